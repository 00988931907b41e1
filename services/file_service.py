from PIL import Image
from urllib.parse import quote
import os


class FileService:

    DEFAULT_BASENAME = "image"
    EXTENSIONS = {"JPEG": ".jpg", "PNG": ".png", "WEBP": ".webp", "GIF": ".gif"}

    @staticmethod
    def resolve_content_type(declared_type: str, image_format: str) -> str:
        """Mantiene el tipo declarado por el cliente; si no hay, usa el del formato detectado"""
        if declared_type:
            return declared_type
        Image.init()  # Registra los plugins para poblar Image.MIME
        return Image.MIME.get(image_format, "application/octet-stream")

    @staticmethod
    def build_download_filename(original_filename: str, width: int, image_format: str) -> str:
        # Quitar rutas que algunos navegadores envían (ej: "C:\\fakepath\\foto.png")
        name = os.path.basename((original_filename or "").replace("\\", "/")).strip()
        if not name:
            suffix = FileService.EXTENSIONS.get(image_format, "")
            name = f"{FileService.DEFAULT_BASENAME}{suffix}"

        return f"resized-{width}px-{name}"

    @staticmethod
    def content_disposition(filename: str) -> str:
        """Cabecera Content-Disposition de descarga, con filename* para nombres no ASCII"""
        quoted = quote(filename)
        if quoted != filename:
            return f"attachment; filename*=utf-8''{quoted}"
        return f'attachment; filename="{filename}"'
