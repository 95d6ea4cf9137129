"""
Emprendedor Service - Application Layer

This module orchestrates the Emprendedor operations: creation, lookups,
verification, rating updates, specialty search and statistics.
"""

from typing import Dict, List, Optional, Union

import structlog
from dependency_injector.wiring import Provide, inject

from emprendimiento.domain.entities.emprendedor import (
    PUNTUACION_MAXIMA,
    PUNTUACION_MINIMA,
    ActualizarEmprendedorDTO,
    CrearEmprendedorDTO,
    Emprendedor,
    EstadoEmprendedor,
    NivelExperiencia,
    SectorEmprendimiento,
)
from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.repositories.emprendedor_repository import (
    IEmprendedorRepository,
)
from emprendimiento.domain.services import require_text, validate_crear_emprendedor

from ..dtos.estadisticas_dto import EstadisticasEmprendedoresDTO

logger = structlog.get_logger(__name__)


class EmprendedorService:
    """Application service for entrepreneur profiles."""

    @inject
    def __init__(
        self,
        emprendedor_repository: IEmprendedorRepository = Provide[
            "emprendedor_repository"
        ],
    ):
        self.emprendedor_repository = emprendedor_repository

    async def crear_emprendedor(self, datos: CrearEmprendedorDTO) -> Emprendedor:
        """
        Validate and create a new emprendedor.

        Raises:
            ValidationError: If the payload breaks a business rule
            DuplicateKeyError: If the e-mail is taken
            DuplicatePlatformError: If two social accounts share a platform
        """
        validate_crear_emprendedor(datos)
        emprendedor = await self.emprendedor_repository.crear(datos)
        logger.info(
            "Emprendedor registered",
            emprendedor_id=emprendedor.id,
            nombre=emprendedor.nombre_completo,
            especialidad=str(emprendedor.especialidad),
            sector=emprendedor.sector.value,
        )
        return emprendedor

    async def obtener_emprendedor_por_id(
        self, emprendedor_id: str
    ) -> Optional[Emprendedor]:
        require_text(emprendedor_id, "ID de emprendedor requerido")

        emprendedor = await self.emprendedor_repository.obtener_por_id(emprendedor_id)
        if emprendedor is None:
            logger.info("Emprendedor not found", emprendedor_id=emprendedor_id)
        return emprendedor

    async def obtener_emprendedor_por_email(self, email: str) -> Optional[Emprendedor]:
        require_text(email, "Email requerido")
        return await self.emprendedor_repository.obtener_por_email(email)

    async def obtener_emprendedor_por_usuario_id(
        self, usuario_id: str
    ) -> Optional[Emprendedor]:
        require_text(usuario_id, "ID de usuario requerido")
        return await self.emprendedor_repository.obtener_por_usuario_id(usuario_id)

    async def listar_emprendedores(self) -> List[Emprendedor]:
        emprendedores = await self.emprendedor_repository.obtener_todos()
        logger.debug("Emprendedores listed", total=len(emprendedores))
        return emprendedores

    async def obtener_emprendedores_por_estado(
        self, estado: Union[EstadoEmprendedor, str]
    ) -> List[Emprendedor]:
        return await self.emprendedor_repository.obtener_por_estado(estado)

    async def obtener_emprendedores_por_sector(
        self, sector: Union[SectorEmprendimiento, str]
    ) -> List[Emprendedor]:
        return await self.emprendedor_repository.obtener_por_sector(sector)

    async def obtener_emprendedores_por_experiencia(
        self, experiencia: Union[NivelExperiencia, str]
    ) -> List[Emprendedor]:
        return await self.emprendedor_repository.obtener_por_experiencia(experiencia)

    async def obtener_emprendedores_verificados(self) -> List[Emprendedor]:
        return await self.emprendedor_repository.obtener_verificados()

    async def obtener_mejor_puntuados(self, limite: int = 10) -> List[Emprendedor]:
        return await self.emprendedor_repository.obtener_mejor_puntuados(limite)

    async def actualizar_emprendedor(
        self, emprendedor_id: str, datos: ActualizarEmprendedorDTO
    ) -> OperationResult[Emprendedor]:
        if not emprendedor_id or not emprendedor_id.strip():
            return OperationResult.fail(
                error="ID de emprendedor requerido", message="Parámetros inválidos"
            )

        try:
            return await self.emprendedor_repository.actualizar(emprendedor_id, datos)
        except Exception as e:
            logger.error(
                "Failed to update emprendedor",
                emprendedor_id=emprendedor_id,
                error=str(e),
            )
            return OperationResult.fail(
                error=str(e), message="Error actualizando emprendedor"
            )

    async def eliminar_emprendedor(self, emprendedor_id: str) -> bool:
        require_text(emprendedor_id, "ID de emprendedor requerido")

        emprendedor = await self.emprendedor_repository.obtener_por_id(emprendedor_id)
        if emprendedor is None:
            logger.info(
                "Emprendedor not found for deletion", emprendedor_id=emprendedor_id
            )
            return False

        eliminado = await self.emprendedor_repository.eliminar(emprendedor_id)
        if eliminado:
            logger.info("Emprendedor removed", emprendedor_id=emprendedor_id)
        return eliminado

    async def verificar_emprendedor(
        self, emprendedor_id: str
    ) -> OperationResult[Emprendedor]:
        emprendedor = await self.emprendedor_repository.obtener_por_id(emprendedor_id)
        if emprendedor is None:
            return OperationResult.fail(
                error=f"Emprendedor con ID '{emprendedor_id}' no encontrado",
                message="Emprendedor no existe",
            )

        if emprendedor.esta_verificado():
            return OperationResult.fail(
                error="Emprendedor ya está verificado",
                message="Estado actual es verificado",
            )

        emprendedor.verificar()
        return await self.actualizar_emprendedor(
            emprendedor_id, ActualizarEmprendedorDTO(estado=emprendedor.estado)
        )

    async def cambiar_estado_emprendedor(
        self, emprendedor_id: str, nuevo_estado: Union[EstadoEmprendedor, str]
    ) -> OperationResult[Emprendedor]:
        return await self.actualizar_emprendedor(
            emprendedor_id, ActualizarEmprendedorDTO(estado=nuevo_estado)
        )

    async def actualizar_puntuacion(
        self, emprendedor_id: str, nueva_puntuacion: float
    ) -> OperationResult[Emprendedor]:
        """
        Set a new rating.

        Values outside [0, 5] are rejected here with a failed result; the
        entity itself would clamp them.
        """
        if not PUNTUACION_MINIMA <= nueva_puntuacion <= PUNTUACION_MAXIMA:
            return OperationResult.fail(
                error="Puntuación debe estar entre 0 y 5",
                message="Puntuación inválida",
            )

        emprendedor = await self.emprendedor_repository.obtener_por_id(emprendedor_id)
        if emprendedor is None:
            return OperationResult.fail(
                error=f"Emprendedor con ID '{emprendedor_id}' no encontrado",
                message="Emprendedor no existe",
            )

        emprendedor.actualizar_puntuacion(nueva_puntuacion)
        resultado = await self.emprendedor_repository.actualizar(
            emprendedor_id, ActualizarEmprendedorDTO()
        )
        if resultado.success:
            logger.info(
                "Puntuacion updated",
                emprendedor_id=emprendedor_id,
                puntuacion=emprendedor.puntuacion,
            )
        return resultado

    async def verificar_disponibilidad_email(self, email: str) -> bool:
        return not await self.emprendedor_repository.existe_email(email)

    async def obtener_emprendedores_alta_puntuacion(self) -> List[Emprendedor]:
        emprendedores = await self.emprendedor_repository.obtener_todos()
        return [e for e in emprendedores if e.tiene_buena_puntuacion()]

    async def buscar_por_especialidad(self, texto: str) -> List[Emprendedor]:
        """Case-insensitive substring match on the specialty."""
        buscado = (texto or "").lower()
        emprendedores = await self.emprendedor_repository.obtener_todos()
        return [e for e in emprendedores if buscado in str(e.especialidad).lower()]

    async def obtener_estadisticas(self) -> EstadisticasEmprendedoresDTO:
        emprendedores = await self.emprendedor_repository.obtener_todos()

        por_estado: Dict[str, int] = {}
        por_sector: Dict[str, int] = {}
        por_experiencia: Dict[str, int] = {}
        suma_puntuaciones = 0.0
        verificados = 0
        alta_puntuacion = 0
        for emprendedor in emprendedores:
            estado = emprendedor.estado.value
            sector = emprendedor.sector.value
            experiencia = emprendedor.experiencia.value
            por_estado[estado] = por_estado.get(estado, 0) + 1
            por_sector[sector] = por_sector.get(sector, 0) + 1
            por_experiencia[experiencia] = por_experiencia.get(experiencia, 0) + 1
            suma_puntuaciones += emprendedor.puntuacion
            if emprendedor.esta_verificado():
                verificados += 1
            if emprendedor.tiene_buena_puntuacion():
                alta_puntuacion += 1

        puntuacion_promedio = (
            round(suma_puntuaciones / len(emprendedores), 2) if emprendedores else 0.0
        )

        return EstadisticasEmprendedoresDTO(
            total=len(emprendedores),
            por_estado=por_estado,
            por_sector=por_sector,
            por_experiencia=por_experiencia,
            puntuacion_promedio=puntuacion_promedio,
            verificados=verificados,
            alta_puntuacion=alta_puntuacion,
        )
