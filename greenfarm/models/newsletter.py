from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Any

class SubscriptionRequest(BaseModel):
    # forwarded verbatim; the subscription service owns all validation
    email: str = ""

    @field_validator("email", mode="before")
    @classmethod
    def _blank_if_not_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @classmethod
    def from_payload(cls, payload: Any) -> "SubscriptionRequest":
        """Build a request from a decoded JSON body of any shape"""
        if not isinstance(payload, dict):
            return cls()
        return cls(email=payload.get("email"))

class SubscriptionStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"

class SubscriptionOutcome(BaseModel):
    status: SubscriptionStatus
    message: str
