from functools import lru_cache
from typing import List

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()  # Carga las variables de entorno desde .env


class Settings(BaseModel):
    APP_NAME: str = "Image Resizer"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # Ej: "https://a.com,https://b.com"
    JPEG_QUALITY: int = 90
    WEBP_QUALITY: int = 90

    @classmethod
    def from_env(cls) -> "Settings":
        """Construye la configuración a partir de las variables de entorno"""
        # pydantic convierte los strings a int/bool
        values = {name: os.getenv(name) for name in cls.model_fields}
        return cls(**{k: v for k, v in values.items() if v is not None})

    @property
    def cors_origins(self) -> List[str]:
        """Devuelve CORS_ORIGINS como lista"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
