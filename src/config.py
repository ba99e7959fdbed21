from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "fizzy-mcp"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # Fizzy API
    FIZZY_URL: str = "http://localhost:3000"
    FIZZY_TOKEN: str = ""
    FIZZY_ACCOUNT_ID: str = "1"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class RemoteEndpoint(BaseModel):
    """Where and as whom the gateway talks to Fizzy.

    Attributes:
        base_url: Root URL of the Fizzy instance, without trailing slash.
        token: Bearer token; empty means no Authorization header is sent.
        account_id: Account scope prefixed to every API path.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    token: str = ""
    account_id: str = "1"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def url_for(self, path: str) -> str:
        """Build the absolute URL for an account-scoped API path."""
        return f"{self.base_url}/{self.account_id}{path}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_remote_endpoint(settings: Settings | None = None) -> RemoteEndpoint:
    """Freeze the Fizzy connection settings into a RemoteEndpoint."""
    settings = settings or get_settings()
    return RemoteEndpoint(
        base_url=settings.FIZZY_URL,
        token=settings.FIZZY_TOKEN,
        account_id=settings.FIZZY_ACCOUNT_ID,
    )
