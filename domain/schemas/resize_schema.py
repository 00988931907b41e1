from pydantic import BaseModel, PositiveInt
from typing import Optional


class ResizeRequest(BaseModel):
    image_bytes: bytes
    content_type: str  # Ej: "image/png"
    target_width: PositiveInt  # Ej: 800
    filename: Optional[str] = None  # Ej: "foto.png"


class ResizeResult(BaseModel):
    image_bytes: bytes
    format: str  # Formato de Pillow, ej: "PNG"
    content_type: str
    width: int
    height: int


class ErrorResponse(BaseModel):
    error: str
