from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Mail account used by the contact form relay
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_to: Optional[str] = None
    mail_from_name: str = "GreenFarm Contact Form"

    # SMTP server (Gmail by default, implicit TLS on 465)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_timeout: float = 20.0

    # External backend that owns blogs and newsletter subscribers
    api_base_url: Optional[str] = None
    http_timeout: float = 15.0

    # CORS settings
    allowed_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def mail_configured(self) -> bool:
        """True when every credential the mail relay needs is present"""
        return bool(self.email_user and self.email_pass and self.email_to)

@lru_cache
def get_settings():
    return Settings()
