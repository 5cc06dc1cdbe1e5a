from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Optional
from app.api import extensions
from app.core.config import Settings
from app.core.database import create_db_engine, create_session_factory
from app.core.logging import log_request, setup_logging
import logging
import os
import time

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


# Garante resposta 500 opaca para qualquer exceção não tratada
class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled exception",
                extra={'http': {'method': request.method, 'path': request.url.path}}
            )
            return JSONResponse(
                status_code=500,
                content={"detail": "Erro interno do servidor"}
            )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(
        "Invalid request body",
        extra={'http': {'method': request.method, 'path': request.url.path}}
    )
    return JSONResponse(status_code=400, content={"detail": "Requisição inválida"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Monta a aplicação a partir de uma configuração explícita

    Engine e fábrica de sessões ficam em app.state; nada depende de
    estado global de módulo.
    """
    settings = settings or Settings()

    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    engine = create_db_engine(settings)

    app = FastAPI(
        title="Bloqueio de Extensões de Arquivo",
        description="API para gerenciar extensões fixas e customizadas bloqueadas",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        log_request(
            logger,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
            ip_address=request.client.host if request.client else None
        )
        return response

    app.include_router(extensions.router)

    @app.get("/health")
    def health_check():
        logger.debug("Health check performed")
        return {"status": "ok"}

    @app.on_event("shutdown")
    async def shutdown_event():
        engine.dispose()
        logger.info("Application shutting down", extra={'event': 'shutdown'})

    # Página estática por último para não encobrir as rotas da API
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    logger.info(
        "Application configured",
        extra={'event': 'startup', 'cors_origins': settings.CORS_ORIGINS}
    )
    return app


if __name__ == "__main__":
    import uvicorn
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)
