from pydantic import BaseModel
from datetime import datetime


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
