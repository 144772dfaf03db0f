"""
Pytest fixtures for the Apula mailer.
Provides fake mail transports and a TestClient wired to them.
"""
import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import app
from routes import get_email_service
from services import EmailService, MailTransport
from tests.fakes import FakeTransport, FailingTransport

TEST_SENDER_ADDRESS = "apula.sender@gmail.com"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        EMAIL_USER=TEST_SENDER_ADDRESS,
        EMAIL_PASS="app-password",
        MAIL_SEND_TIMEOUT_SECONDS=0.2,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()


@pytest.fixture
def make_client(test_settings):
    """Build a TestClient whose email service uses the given transport."""

    def _make(transport: MailTransport) -> TestClient:
        service = EmailService(transport, test_settings)
        app.dependency_overrides[get_email_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, fake_transport) -> TestClient:
    return make_client(fake_transport)
