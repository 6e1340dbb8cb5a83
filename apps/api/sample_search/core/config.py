from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    database_url: str = "postgresql://localhost/sample_search"
    sql_echo: bool = False
    log_level: str = "INFO"

    # Routes are mounted under this prefix (the web client expects /test/v1.0/org/...)
    api_prefix: str = "/test/v1.0"

    # Fixed page size for /org/{id}/sample and the client table
    page_size: int = 15

    # Organisation whose name unlocks resultType / patientId (exact, case-sensitive match)
    extended_fields_org_name: str = "Circle"

    # Rate limiting (per client address)
    search_rate_limit: str = "60/minute"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    # Client side
    client_api_base_url: str = "http://localhost:8080/test/v1.0"
    client_timeout_seconds: float = 30.0
    search_debounce_seconds: float = 0.3

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def async_database_url(self) -> str:
        """Database URL rewritten for the asyncpg driver."""
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://") and "asyncpg" not in url:
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
