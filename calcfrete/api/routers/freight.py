from decimal import Decimal
from typing import Mapping, Optional

from fastapi import APIRouter, Depends, status

from calcfrete.core.logging import get_logger
from calcfrete.schemas.freight import ErrorResponse, FreightRequest, FreightResponse
from calcfrete.services import freight_service

router = APIRouter(tags=["frete"])
logger = get_logger(module="freight")


@router.post(
    "/calcularfrete",
    response_model=FreightResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def calculate_freight(
    payload: Optional[FreightRequest] = None,
    price_table: Mapping[str, Decimal] = Depends(freight_service.get_price_table),
) -> FreightResponse:
    # Sem corpo equivale a um objeto vazio: cai no erro de campos obrigatórios.
    if payload is None:
        payload = FreightRequest()

    logger.debug(
        "Requisição de frete recebida",
        distance=payload.distance,
        transport_type=payload.transport_type,
    )

    return freight_service.calculate_freight(payload, price_table)
