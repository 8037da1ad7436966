from enum import Enum


class TransportType(str, Enum):
    BICICLETA = "bicicleta"
    CARRO = "carro"
    DRONE = "drone"
