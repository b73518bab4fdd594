from __future__ import annotations

import pathlib

from pydantic_settings import BaseSettings

VERSION = "0.1.0"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Data
    db_path: pathlib.Path = pathlib.Path("db.json")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS (기본값: 모든 도메인 허용)
    cors_allow_origins: list[str] = ["*"]


settings = Settings()
