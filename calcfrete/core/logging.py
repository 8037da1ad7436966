# calcfrete/core/logging.py
import inspect
import logging
import os
import sys
from typing import Any

from loguru import logger


class InterceptHandler(logging.Handler):
    """
    Redireciona os logs do logging padrão para o loguru.
    """
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        # sobe na pilha até sair de emit() e de logging/__init__.py
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(
            depth=depth,
            exception=record.exc_info,
        ).log(level, record.getMessage())


def setup_logging(
    *,
    level: str = "INFO",
    json_logs: bool = False,
    log_file: bool = False,
    log_dir: str = "logs",
) -> None:
    """
    Configuração global:
    - Intercepta o logging padrão (uvicorn, fastapi)
    - Console: a partir de `level`
    - Arquivos (opcional):
        - app_YYYY-MM-DD.log   → INFO e WARNING
        - error_YYYY-MM-DD.log → ERROR e acima
    """
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False

    logger.remove()

    # Formato (texto ou JSON serializado pelo próprio loguru)
    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level> {extra}"
    )

    logger.add(
        sys.stdout,
        format=fmt,
        level=level,
        serialize=json_logs,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        os.makedirs(log_dir, exist_ok=True)

        app_log_path = os.path.join(log_dir, "app_{time:YYYY-MM-DD}.log")
        error_log_path = os.path.join(log_dir, "error_{time:YYYY-MM-DD}.log")

        logger.add(
            app_log_path,
            format=fmt,
            level=level,
            serialize=json_logs,
            filter=lambda record: record["level"].no < 40,  # < ERROR (40)
            rotation="00:00",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

        logger.add(
            error_log_path,
            format=fmt,
            level="ERROR",
            serialize=json_logs,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            enqueue=True,
        )


def get_logger(**binds: Any):
    """
    Retorna um logger com contexto extra.
    Ex: logger = get_logger(module="freight_service")
    """
    return logger.bind(**binds)
