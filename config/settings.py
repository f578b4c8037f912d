import os

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    courtlistener_api_key: str = ""
    courtlistener_base_url: str = "https://www.courtlistener.com/api/rest/v4"
    courtlistener_site_url: str = "https://www.courtlistener.com"
    request_timeout: float = 60.0

    # Retry policy for lookup and search (fixed delay, not exponential)
    max_attempts: int = 3
    retry_delay: float = 1.0

    # Case name resolution
    context_window: int = 200

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("courtlistener_api_key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        # Strip comments and whitespace from key value
        return value.split("#")[0].strip() if value else ""

    @field_validator("max_attempts")
    @classmethod
    def _at_least_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_attempts must be at least 1")
        return value

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Older setups export the key as COURTLISTENER_TOKEN
        if not self.courtlistener_api_key:
            token = os.environ.get("COURTLISTENER_TOKEN", "")
            self.courtlistener_api_key = token.split("#")[0].strip()
