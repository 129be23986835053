"""Application configuration via environment variables."""

from __future__ import annotations

import logging
import re

from pydantic_settings import BaseSettings

log = logging.getLogger("outreach.config")

_COUNTRY_CODE = re.compile(r"^\+\d{1,3}$")


class Settings(BaseSettings):
    # Vapi
    vapi_api_key: str = ""
    vapi_phone_number_id: str = ""
    vapi_assistant_id: str = ""
    vapi_base_url: str = "https://api.vapi.ai"
    vapi_timeout_seconds: float = 30.0

    # Agent model and voice handed to the provider per call
    llm_provider: str = "openai"
    llm_model: str = "gpt-4o"
    voice_provider: str = "11labs"
    voice_id: str = "pFZP5JQG7iQjIQuC4Bku"

    # Numbers without a leading "+" are assumed to be in this region
    default_country_code: str = "+91"

    # Appointment store
    database_url: str = "sqlite:///./outreach.db"

    # Admin auth
    admin_api_key: str = ""

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def provider_configured(self) -> bool:
        """True when every credential needed to place a call is present."""
        return bool(
            self.vapi_api_key and self.vapi_phone_number_id and self.vapi_assistant_id
        )

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        if not _COUNTRY_CODE.match(self.default_country_code):
            raise ValueError(
                f"DEFAULT_COUNTRY_CODE must look like '+91', got "
                f"{self.default_country_code!r}."
            )

        if not self.provider_configured:
            warnings.append(
                "VAPI_API_KEY, VAPI_PHONE_NUMBER_ID or VAPI_ASSISTANT_ID not set. "
                "Outbound calls will fail until they are configured."
            )

        if not self.admin_api_key:
            if self.debug:
                warnings.append(
                    "ADMIN_API_KEY not set. Admin APIs are open (DEBUG=true)."
                )
            else:
                warnings.append(
                    "ADMIN_API_KEY not set. Admin APIs are locked in production. "
                    "Set ADMIN_API_KEY in .env to enable admin access."
                )

        return warnings


settings = Settings()
