import json
from typing import Annotated, List, Optional, Union
from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode
from dotenv import load_dotenv

# Explicitly load .env file and override existing environment variables
# This ensures that values from .env take precedence over system-wide environment variables.
load_dotenv(override=True)

class Settings(BaseSettings):
    """Base settings for the fleet admin API."""

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Fleet Admin API"
    VERSION: str = "0.1.0"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS settings, empty list means any origin
    BACKEND_CORS_ORIGINS: Annotated[List[AnyHttpUrl], NoDecode] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # Store settings
    SEED_DEMO_DATA: bool = True

    # Session settings, None keeps sessions valid until the process exits
    SESSION_TTL_MINUTES: Optional[int] = None

    # Attach the bearer-token gate to the users/cars/reports routers
    REQUIRE_AUTH_FOR_RECORDS: bool = False

    model_config = {
        "case_sensitive": True,
        "env_file": ".env"
    }

    @property
    def cors_origins(self) -> List[str]:
        if not self.BACKEND_CORS_ORIGINS:
            return ["*"]
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

# Create settings instance
settings = Settings()
