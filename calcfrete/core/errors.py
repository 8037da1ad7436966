"""
Erros de domínio do cálculo de frete e o mapeamento deles para HTTP.

Toda resposta de erro da API tem o formato {"error": "<mensagem>"}.
"""
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calcfrete.core.logging import get_logger

logger = get_logger(module="errors")

MISSING_FIELD_MESSAGE = "Distância e tipo de transporte são obrigatórios."
UNKNOWN_TRANSPORT_TYPE_MESSAGE = "Tipo de transporte inválido."
INVALID_BODY_MESSAGE = "Corpo da requisição inválido."
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor."


class FreightError(Exception):
    """Erro de validação da entrada do frete (sempre HTTP 400)."""

    message = "Requisição inválida."
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(FreightError):
    message = MISSING_FIELD_MESSAGE


class UnknownTransportTypeError(FreightError):
    message = UNKNOWN_TRANSPORT_TYPE_MESSAGE

    def __init__(self, transport_type: str):
        self.transport_type = transport_type
        super().__init__()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def freight_error_handler(request: Request, exc: FreightError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(
        "Corpo da requisição rejeitado",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        "Erro não tratado",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FreightError, freight_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
