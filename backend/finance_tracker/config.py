import os
from pathlib import Path
from pydantic import BaseModel

# Data directory: use FINANCE_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.local/share/finance-tracker for local dev
_data_dir = os.environ.get("FINANCE_DATA_DIR")
DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".local" / "share" / "finance-tracker"
DEFAULT_DB_FILE = DATA_DIR / "finance.db"
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Vite dev server


class Settings(BaseModel):
    """Runtime settings for the API server."""
    database_url: str
    seed_demo_data: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def load_settings() -> Settings:
    """Build settings from the FINANCE_* environment variables."""
    database_url = os.environ.get("FINANCE_DATABASE_URL")
    if not database_url:
        ensure_data_dir()
        database_url = f"sqlite:///{DEFAULT_DB_FILE}"

    origins = os.environ.get("FINANCE_CORS_ORIGINS")
    cors_origins = (
        [o.strip() for o in origins.split(",") if o.strip()]
        if origins
        else DEFAULT_CORS_ORIGINS
    )

    return Settings(
        database_url=database_url,
        seed_demo_data=_env_bool("FINANCE_SEED_DEMO_DATA"),
        log_level=os.environ.get("FINANCE_LOG_LEVEL", "INFO").upper(),
        cors_origins=cors_origins,
    )
