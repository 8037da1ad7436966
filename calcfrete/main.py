from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calcfrete.api.api import api_router
from calcfrete.core.config import HOST, PORT, settings
from calcfrete.core.errors import register_exception_handlers
from calcfrete.core.logging import get_logger, setup_logging

logger = get_logger(module="main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        level=settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON,
        log_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
    )
    logger.info(f"Servidor rodando em http://localhost:{PORT}")
    yield
    logger.info("Servidor encerrado")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        lifespan=lifespan,
        # Única rota exposta: POST /calcularfrete
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # CORS liberado para qualquer origem
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    run()
