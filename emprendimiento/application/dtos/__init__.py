from .estadisticas_dto import (
    EstadisticasClientesDTO,
    EstadisticasEmprendedoresDTO,
    EstadisticasUsuariosDTO,
)

__all__ = [
    "EstadisticasUsuariosDTO",
    "EstadisticasClientesDTO",
    "EstadisticasEmprendedoresDTO",
]
