import os
from pydantic import BaseModel

class Settings(BaseModel):
    app_title: str = os.environ.get("APP_TITLE", "Custom Case API")
    app_version: str = os.environ.get("APP_VERSION", "1.0.0")

    database_url: str = os.environ.get("DATABASE_URL", "sqlite:///./local.db")
    # bound for every store round trip (connect, statement, pool checkout)
    db_timeout_seconds: float = float(os.environ.get("DB_TIMEOUT_SECONDS", "5"))
    db_init_retries: int = int(os.environ.get("DB_INIT_RETRIES", "15"))
    db_init_delay_sec: float = float(os.environ.get("DB_INIT_DELAY_SEC", "2.0"))

    session_secret: str = os.environ.get("SESSION_SECRET", "change-me")
    session_max_age: int = int(os.environ.get("SESSION_MAX_AGE", str(14 * 24 * 3600)))

    cors_allow_origins: str = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

settings = Settings()
