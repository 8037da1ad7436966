from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from calcfrete.core.enums import TransportType
from calcfrete.core.errors import MissingFieldError, UnknownTransportTypeError
from calcfrete.core.logging import get_logger
from calcfrete.schemas.freight import FreightRequest, FreightResponse

logger = get_logger(module="freight_service")

# Preço por km de cada tipo de transporte.
PRICES_PER_KM = {
    TransportType.BICICLETA: Decimal("0.75"),
    TransportType.CARRO: Decimal("0.25"),
    TransportType.DRONE: Decimal("1.00"),
}

CENTS = Decimal("0.01")
# A partir daqui o total sai em notação exponencial, sem casas fixas.
EXPONENT_THRESHOLD = 1e21


@lru_cache
def get_price_table() -> Mapping[str, Decimal]:
    """
    Tabela de preços somente leitura, construída uma única vez.
    Usada como dependência do FastAPI (sobrescrevível nos testes).
    """
    return MappingProxyType(
        {transport.value: price for transport, price in PRICES_PER_KM.items()}
    )


def get_unit_price(
    transport_type: str,
    price_table: Mapping[str, Decimal],
) -> Decimal:
    unit_price = price_table.get(transport_type.lower())
    if unit_price is None:
        raise UnknownTransportTypeError(transport_type)
    return unit_price


def format_total(value: float) -> str:
    """
    Duas casas decimais sobre o valor binário exato do float (ex: "25.00").

    Empates exatos arredondam para longe do zero (0.125 -> "0.13"), mas
    3.3 * 0.25 fica em "0.82" porque o float é 0.82499...
    """
    if abs(value) >= EXPONENT_THRESHOLD:
        return repr(value)
    if value == 0:
        value = 0.0  # -0.0 sai como "0.00"
    return str(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


def calculate_freight(
    request: FreightRequest,
    price_table: Mapping[str, Decimal],
) -> FreightResponse:
    if request.distance is None or request.transport_type is None:
        logger.warning(
            "Cálculo de frete sem campos obrigatórios",
            distance=request.distance,
            transport_type=request.transport_type,
        )
        raise MissingFieldError()

    try:
        unit_price = get_unit_price(request.transport_type, price_table)
    except UnknownTransportTypeError:
        logger.warning(
            "Tipo de transporte desconhecido",
            transport_type=request.transport_type,
        )
        raise

    # Distâncias negativas ou zero não são rejeitadas.
    total = request.distance * float(unit_price)
    total_value = format_total(total)

    logger.info(
        "Frete calculado",
        transport_type=request.transport_type.lower(),
        distance=request.distance,
        unit_price=str(unit_price),
        total_value=total_value,
    )

    return FreightResponse(total_value=total_value)
