class ResizeServiceError(Exception):
    """Error base del servicio. El mensaje es fijo y es lo único que ve el cliente."""

    status_code: int = 500
    message: str = "Error processing image."

    def __init__(self, detail: str = None):
        # El detalle solo se registra en el log del servidor
        self.detail = detail
        super().__init__(detail or self.message)


class MissingInputError(ResizeServiceError):
    """Falta la imagen o el ancho, o el ancho no es un entero positivo"""

    status_code = 400
    message = "Missing image or width."


class ProcessingError(ResizeServiceError):
    """Pillow falló al decodificar, redimensionar o codificar la imagen"""

    status_code = 500
    message = "Error processing image."
