"""
Configuration settings for the StudyTube application.
"""

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel


# Ensure environment variables are loaded
load_dotenv()

APP_NAME = "StudyTube"
APP_VERSION = "0.2.0"

BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
DATA_DIR = BASE_DIR / "data"

DEFAULT_LLM_PROVIDER = "groq"
DEFAULT_LLM_MODEL = "llama-3.3-70b-versatile"


class LLMConfig(BaseModel):
    """Settings for an enabled chat model."""
    provider: str = DEFAULT_LLM_PROVIDER
    model: str = DEFAULT_LLM_MODEL
    api_key: str
    temperature: float = 0.3
    max_tokens: int = 4000

    @property
    def enabled(self) -> bool:
        return True


class LLMDisabled(BaseModel):
    """No chat model is configured; generation uses templates only."""
    reason: str = "LLM_API_KEY is not set"

    @property
    def enabled(self) -> bool:
        return False


class Config(BaseModel):
    """Application configuration, built once at process start."""

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    environment: str = "development"
    debug: bool = True
    log_level: str = "DEBUG"

    database_url: str = f"sqlite:///{DATA_DIR}/studytube.db"
    http_timeout: float = 15.0
    public_url: str = "http://localhost:8000"

    llm: Union[LLMConfig, LLMDisabled] = LLMDisabled()

    def initialize(self) -> None:
        """Create local data directories needed by a SQLite database."""
        if self.database_url.startswith("sqlite:///"):
            db_path = Path(self.database_url[len("sqlite:///"):])
            db_path.parent.mkdir(parents=True, exist_ok=True)


def _llm_from_env(env: Mapping[str, str]) -> Union[LLMConfig, LLMDisabled]:
    api_key = (env.get("LLM_API_KEY") or env.get("GROQ_API_KEY") or "").strip()
    if not api_key:
        return LLMDisabled()

    return LLMConfig(
        provider=env.get("LLM_PROVIDER", DEFAULT_LLM_PROVIDER),
        model=env.get("LLM_MODEL", DEFAULT_LLM_MODEL),
        api_key=api_key,
    )


def get_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """Get the appropriate configuration based on environment."""
    env = os.environ if env is None else env
    environment = env.get("ENVIRONMENT", "development").lower()
    production = environment == "production"

    return Config(
        environment=environment,
        debug=not production,
        log_level="INFO" if production else "DEBUG",
        database_url=env.get("DATABASE_URL", f"sqlite:///{DATA_DIR}/studytube.db"),
        http_timeout=float(env.get("HTTP_TIMEOUT", "15")),
        public_url=env.get("PUBLIC_URL", "http://localhost:8000"),
        llm=_llm_from_env(env),
    )
