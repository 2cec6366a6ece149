from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticketing Client'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs call args/returns and writes log files when True

    # Remote API
    API_BASE_URL: str = 'http://localhost:8000/api'
    REQUEST_TIMEOUT_SECONDS: float = 10.0  # Per attempt, not per execute() call

    # Retry policy
    REQUEST_MAX_ATTEMPTS: int = 3
    REQUEST_BASE_DELAY_SECONDS: float = 1.0  # Wait before retry N is N * base delay
    RETRY_NON_IDEMPOTENT: bool = True  # False: POST/PUT/DELETE retry only with an idempotency key
    GENERIC_ERROR_MESSAGE: str = 'Something went wrong'

    # Durable credential storage (single key)
    CREDENTIAL_STORE_PATH: Path = Path.home() / '.ticketing_client' / 'session.json'
    CREDENTIAL_STORAGE_KEY: str = 'token'

    # Notifications
    NOTIFICATION_BUFFER_SIZE: int = 32

    @field_validator('API_BASE_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/') if isinstance(v, str) else v

    @field_validator('REQUEST_MAX_ATTEMPTS')
    @classmethod
    def at_least_one_attempt(cls, v: int) -> int:
        if v < 1:
            raise ValueError('REQUEST_MAX_ATTEMPTS must be >= 1')
        return v


settings = Settings()  # type: ignore
