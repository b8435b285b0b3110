from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "config" / "settings.yaml"

class AppConfig(BaseModel):
    name: str
    environment: str = "development"

class ApiConfig(BaseModel):
    base_url: str
    media_base_url: Optional[str] = None
    timeout_seconds: float = 15.0

    @property
    def media_root(self) -> str:
        return (self.media_base_url or self.base_url).rstrip("/")

class StorageConfig(BaseModel):
    url: str

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Settings(BaseModel):
    app: AppConfig
    api: ApiConfig
    storage: StorageConfig
    logging: LoggingConfig = LoggingConfig()

def load_settings(path: str | Path | None = None) -> Settings:
    path = path or os.environ.get("INSTITUTE_SETTINGS") or DEFAULT_SETTINGS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    api = dict(data["api"])
    if os.environ.get("INSTITUTE_API_BASE_URL"):
        api["base_url"] = os.environ["INSTITUTE_API_BASE_URL"]
    return Settings(
        app=AppConfig(**data["app"]),
        api=ApiConfig(**api),
        storage=StorageConfig(**data["storage"]),
        logging=LoggingConfig(**(data.get("logging") or {})),
    )
