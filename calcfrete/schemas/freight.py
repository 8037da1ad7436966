from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FreightRequest(BaseModel):
    # Campos ausentes (ou null) ficam como None; a obrigatoriedade é
    # verificada no serviço para devolver a mensagem de erro do contrato.
    distance: Optional[float] = Field(
        default=None,
        alias="distancia",
        allow_inf_nan=False,
    )  # km
    transport_type: Optional[str] = Field(
        default=None,
        alias="tipoTransporte",
    )  # "bicicleta" | "carro" | "drone", em qualquer caixa

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FreightResponse(BaseModel):
    total_value: str = Field(alias="valorTotal")  # sempre com duas casas decimais

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
