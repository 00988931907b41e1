import logging

from core.config import get_settings


def configure_logging() -> None:
    """Configura el logger raíz con el nivel definido en la configuración"""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
