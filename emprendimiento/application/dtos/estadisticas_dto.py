"""DTOs for the aggregate statistics returned by the application services."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class EstadisticasUsuariosDTO(BaseModel):
    """Counts over every registered usuario."""

    total: int = Field(ge=0, description="Number of usuarios")
    por_rol: Dict[str, int] = Field(
        default_factory=dict, description="Usuarios per role"
    )
    activos: int = Field(ge=0, description="Usuarios in ACTIVO state")
    inactivos: int = Field(ge=0, description="Usuarios in any other state")

    model_config = {
        "json_schema_extra": {
            "example": {
                "total": 3,
                "por_rol": {"ADMINISTRADOR": 1, "EMPRENDEDOR": 1, "CLIENTE": 1},
                "activos": 3,
                "inactivos": 0,
            }
        }
    }


class EstadisticasClientesDTO(BaseModel):
    """Counts and average age over every registered cliente."""

    total: int = Field(ge=0, description="Number of clientes")
    por_estado: Dict[str, int] = Field(default_factory=dict)
    por_categoria: Dict[str, int] = Field(default_factory=dict)
    edad_promedio: int = Field(
        ge=0, description="Mean age rounded half-up, 0 without clientes"
    )
    mayores_de_edad: int = Field(ge=0)
    vip: int = Field(ge=0, description="Clientes in ORO or PLATINO")


class EstadisticasEmprendedoresDTO(BaseModel):
    """Counts and average rating over every registered emprendedor."""

    total: int = Field(ge=0, description="Number of emprendedores")
    por_estado: Dict[str, int] = Field(default_factory=dict)
    por_sector: Dict[str, int] = Field(default_factory=dict)
    por_experiencia: Dict[str, int] = Field(default_factory=dict)
    puntuacion_promedio: float = Field(
        ge=0, le=5, description="Mean rating rounded to two decimals"
    )
    verificados: int = Field(ge=0)
    alta_puntuacion: int = Field(ge=0, description="Ratings of 4.0 or more")
