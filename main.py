import uvicorn
from dotenv import load_dotenv
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

load_dotenv()  # Load environment variables from a .env file

from fastapi import FastAPI, Request
from api import api
from core.config import get_settings
from core.logger import configure_logging
from domain.errors import MissingInputError, ResizeServiceError
from domain.schemas.resize_schema import ErrorResponse

configure_logging()
settings = get_settings()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


@app.exception_handler(ResizeServiceError)
async def resize_error_handler(request: Request, exc: ResizeServiceError):
    logger.debug("%s en %s: %s", type(exc).__name__, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Campos del formulario con tipo incorrecto (ej: "image" enviado como texto)
    return await resize_error_handler(request, MissingInputError(str(exc)))


app.include_router(api.router)


# Punto de entrada para ejecutar la aplicación
if __name__ == "__main__":
    uvicorn.run(
        "main:app",  # Módulo y nombre de la aplicación
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,  # Recarga automática en desarrollo
        log_level=settings.LOG_LEVEL.lower()  # Nivel de logs
    )
