import os
from typing import Optional

from llm_client.errors import ClientError

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_SECONDS = 600.0


class Settings:
    """Connection settings for `LLMClient`.

    `from_env` reads:
    - OPENAI_API_KEY: bearer token sent with every call (required)
    - OPENAI_ORGANIZATION: optional organization header
    - OPENAI_BASE_URL: API root, defaults to the public OpenAI endpoint
    - OPENAI_TIMEOUT_SECONDS: per-call timeout, defaults to 600
    """

    def __init__(
        self,
        api_key: str,
        organization: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key
        self.organization = organization
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_env(cls) -> "Settings":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key or not api_key.strip():
            raise ClientError("OPENAI_API_KEY is not set")
        try:
            timeout_seconds = float(
                os.getenv("OPENAI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
                or DEFAULT_TIMEOUT_SECONDS
            )
        except ValueError:
            timeout_seconds = DEFAULT_TIMEOUT_SECONDS
        return cls(
            api_key=api_key.strip(),
            organization=os.getenv("OPENAI_ORGANIZATION") or None,
            base_url=os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            timeout_seconds=timeout_seconds,
        )

    def __repr__(self) -> str:
        # never include the key
        return (
            f"Settings(base_url={self.base_url!r}, organization={self.organization!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )
