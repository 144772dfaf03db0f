from pydantic import BaseModel
from typing import Any


def is_present(value: Any) -> bool:
    """JSON-level presence: null, "", 0 and false count as missing."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


def as_text(value: Any) -> str:
    """Render a JSON value the way it would read in a text template."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(as_text(v) for v in value)
    return str(value)


class VerificationRequest(BaseModel):
    # Presence is checked by the route; no type or format validation here.
    email: Any = None
    code: Any = None
