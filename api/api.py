from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import Response
from typing import Optional
import re

from domain.errors import MissingInputError
from services.file_service import FileService
from services.image_processing_service import ImageProcessingService

router = APIRouter()

# Entero decimal sin signo negativo ni decimales, ej: "800" o "+800"
WIDTH_PATTERN = re.compile(r"^\+?[0-9]+$")


def parse_width(raw_width: Optional[str]) -> int:
    """Convierte el campo width en un entero positivo o lanza MissingInputError"""
    if raw_width is None:
        raise MissingInputError("width is missing")

    value = raw_width.strip()
    if not WIDTH_PATTERN.match(value):
        raise MissingInputError(f"width is not an integer: {raw_width!r}")

    try:
        width = int(value)
    except ValueError:
        # Más dígitos de los que int() acepta
        raise MissingInputError(f"width is not an integer: {raw_width!r}")

    if width <= 0:
        raise MissingInputError(f"width must be positive: {width}")
    return width


@router.get("/health", tags=["system"])
async def health_check():
    return {"status": "ok"}


@router.post("/api/resize")
async def resize_image(
        image: Optional[UploadFile] = File(None),
        width: Optional[str] = Form(None)
):
    """
    Redimensiona una imagen al ancho indicado manteniendo la relación de aspecto.

    - **image**: archivo de imagen (JPEG, PNG, WebP o GIF)
    - **width**: nuevo ancho en píxeles (entero positivo)

    Devuelve la imagen en el mismo formato y con el mismo Content-Type que la subida.
    Errores: 400 si falta la imagen o el ancho no es válido, 500 si la imagen no se puede procesar.
    """
    if image is None:
        raise MissingInputError("image is missing")

    target_width = parse_width(width)

    result = await ImageProcessingService.resize(image, target_width)

    download_name = FileService.build_download_filename(image.filename, result.width, result.format)
    return Response(
        content=result.image_bytes,
        media_type=result.content_type,
        headers={"Content-Disposition": FileService.content_disposition(download_name)}
    )
