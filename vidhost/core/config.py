"""
Core configuration settings
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=Path(__file__).parents[2] / ".env", extra="ignore")

    # Basic settings
    app_name: str = "Vidhost"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./vidhost.db"

    # Upload intake
    upload_temp_dir: str = "./public/temp"

    # Media storage (Cloudflare R2)
    R2_BUCKET: str = ""
    R2_ENDPOINT: str = ""
    R2_ACCESS_KEY: str = ""
    R2_SECRET_KEY: str = ""
    R2_PUBLIC_URL: str = ""
    media_object_prefix: str = "videos/"

    # Raise instead of logging when an old thumbnail can't be removed on update
    media_cleanup_strict: bool = True

    max_page_size: int = 100


settings = Settings()
