from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from PIL import Image
import io
import logging

from core.config import get_settings
from domain.errors import MissingInputError, ProcessingError
from domain.schemas.resize_schema import ResizeRequest, ResizeResult
from services.file_service import FileService

logger = logging.getLogger(__name__)


class ImageProcessingService:

    SUPPORTED_FORMATS = ("JPEG", "PNG", "WEBP", "GIF")
    FORMAT_ALIASES = {"MPO": "JPEG"}
    PALETTE_FORMATS = ("PNG",)  # GIF vuelve a paleta en su propio codificador

    @staticmethod
    async def resize(file: UploadFile, target_width: int) -> ResizeResult:
        """Controlador principal: lee la subida y la redimensiona al ancho pedido"""
        try:
            image_bytes = await file.read()
            if not image_bytes:
                raise MissingInputError("empty upload")

            request = ResizeRequest(
                image_bytes=image_bytes,
                content_type=file.content_type or "",
                target_width=target_width,
                filename=file.filename
            )
            # Pillow bloquea, se ejecuta fuera del event loop
            return await run_in_threadpool(ImageProcessingService.process_request, request)
        finally:
            await file.close()

    @staticmethod
    def process_request(request: ResizeRequest) -> ResizeResult:
        try:
            result = ImageProcessingService.resize_image_bytes(
                image_bytes=request.image_bytes,
                target_width=request.target_width
            )
        except ProcessingError as e:
            logger.error("Error procesando imagen %r: %s", request.filename, e.detail)
            raise
        except Exception as e:
            logger.exception("Error procesando imagen %r", request.filename)
            raise ProcessingError(str(e)) from e

        result.content_type = FileService.resolve_content_type(request.content_type, result.format)
        logger.info(
            "Imagen %r redimensionada a %dx%d (%s)",
            request.filename, result.width, result.height, result.format
        )
        return result

    @staticmethod
    def compute_height(original_width: int, original_height: int, target_width: int) -> int:
        """Alto proporcional redondeado hacia arriba en los empates (x.5), mínimo 1px"""
        # round(h * W / w) con aritmética entera para evitar errores de coma flotante
        height = (2 * original_height * target_width + original_width) // (2 * original_width)
        return max(1, height)

    @staticmethod
    def resize_image_bytes(image_bytes: bytes, target_width: int) -> ResizeResult:
        """Redimensiona manteniendo la relación de aspecto y el formato original"""

        # Abrir imagen desde bytes
        with Image.open(io.BytesIO(image_bytes)) as img:
            # Las cámaras guardan JPEG multi-imagen, Pillow los detecta como MPO
            image_format = ImageProcessingService.FORMAT_ALIASES.get(img.format, img.format)
            if image_format not in ImageProcessingService.SUPPORTED_FORMATS:
                raise ProcessingError(f"Formato no soportado: {img.format}")

            # Solo el primer fotograma en imágenes animadas
            img.load()
            icc_profile = img.info.get("icc_profile")
            has_palette = img.mode == "P"

            # Paleta a color real para no degradar el remuestreo a NEAREST
            if img.mode in ("P", "1"):
                img = img.convert("RGBA" if "transparency" in img.info else "RGB")

            # Calcular nuevas dimensiones
            original_width, original_height = img.size
            new_size = (
                target_width,
                ImageProcessingService.compute_height(original_width, original_height, target_width)
            )
            max_pixels = Image.MAX_IMAGE_PIXELS
            if max_pixels and new_size[0] * new_size[1] > max_pixels:
                raise ProcessingError(f"Tamaño de salida demasiado grande: {new_size[0]}x{new_size[1]}")

            # Redimensionar
            resized_img = img.resize(new_size, Image.Resampling.LANCZOS)

            # Volver a paleta en los formatos que la admiten
            if has_palette and image_format in ImageProcessingService.PALETTE_FORMATS:
                method = Image.Quantize.FASTOCTREE if resized_img.mode == "RGBA" else Image.Quantize.MEDIANCUT
                resized_img = resized_img.quantize(colors=256, method=method)

            # Guardar en buffer de bytes con el mismo formato
            img_byte_arr = io.BytesIO()
            ImageProcessingService._save(resized_img, img_byte_arr, image_format, icc_profile)

            return ResizeResult(
                image_bytes=img_byte_arr.getvalue(),
                format=image_format,
                content_type=Image.MIME.get(image_format, ""),
                width=new_size[0],
                height=new_size[1]
            )

    @staticmethod
    def _save(img: Image.Image, buffer: io.BytesIO, image_format: str, icc_profile: bytes = None) -> None:
        settings = get_settings()
        options = {}
        if icc_profile and image_format != "GIF":
            options["icc_profile"] = icc_profile

        if image_format == "JPEG":
            if img.mode not in ("RGB", "L", "CMYK"):
                img = img.convert("RGB")
            options["quality"] = settings.JPEG_QUALITY
        elif image_format == "WEBP":
            options["quality"] = settings.WEBP_QUALITY

        img.save(buffer, format=image_format, **options)
