from .health import router as health_router
from .verify import router as verify_router, get_email_service

__all__ = ["health_router", "verify_router", "get_email_service"]
