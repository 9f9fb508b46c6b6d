from pydantic import BaseModel, field_validator
from typing import Any, Dict, List

REQUIRED_FIELDS = ("firstName", "lastName", "email", "subject", "message")

class ContactSubmission(BaseModel):
    # email is deliberately a plain str: any non-empty value is accepted
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def _blank_if_not_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @classmethod
    def from_payload(cls, payload: Any) -> "ContactSubmission":
        """Build a submission from a decoded JSON body of any shape"""
        if not isinstance(payload, dict):
            return cls()
        return cls(**{name: payload.get(name) for name in REQUIRED_FIELDS})

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    @property
    def full_name(self) -> str:
        return f"{self.firstName} {self.lastName}"

class ContactResponse(BaseModel):
    success: bool = True
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
