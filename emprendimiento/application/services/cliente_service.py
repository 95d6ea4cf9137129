"""
Cliente Service - Application Layer

This module orchestrates the Cliente operations, including the category
ladder and the customer statistics.
"""

import math
from typing import Dict, List, Optional, Union

import structlog
from dependency_injector.wiring import Provide, inject

from emprendimiento.domain.entities.cliente import (
    ActualizarClienteDTO,
    CategoriaCliente,
    Cliente,
    CrearClienteDTO,
    EstadoCliente,
)
from emprendimiento.domain.entities.result import OperationResult
from emprendimiento.domain.repositories.cliente_repository import IClienteRepository
from emprendimiento.domain.services import require_text, validate_crear_cliente
from emprendimiento.domain.value_objects import TipoDocumento

from ..dtos.estadisticas_dto import EstadisticasClientesDTO

logger = structlog.get_logger(__name__)


class ClienteService:
    """Application service for customers."""

    @inject
    def __init__(
        self,
        cliente_repository: IClienteRepository = Provide["cliente_repository"],
    ):
        self.cliente_repository = cliente_repository

    async def crear_cliente(self, datos: CrearClienteDTO) -> Cliente:
        """
        Validate and create a new cliente.

        Raises:
            ValidationError: If the payload breaks a business rule or the
                person is under age
            DuplicateKeyError: If the e-mail or document is taken
        """
        validate_crear_cliente(datos)
        cliente = await self.cliente_repository.crear(datos)
        logger.info(
            "Cliente registered",
            cliente_id=cliente.id,
            nombre=cliente.nombre_completo,
            categoria=cliente.categoria.value,
        )
        return cliente

    async def obtener_cliente_por_id(self, cliente_id: str) -> Optional[Cliente]:
        require_text(cliente_id, "ID de cliente requerido")

        cliente = await self.cliente_repository.obtener_por_id(cliente_id)
        if cliente is None:
            logger.info("Cliente not found", cliente_id=cliente_id)
        return cliente

    async def obtener_cliente_por_email(self, email: str) -> Optional[Cliente]:
        require_text(email, "Email requerido")
        return await self.cliente_repository.obtener_por_email(email)

    async def obtener_cliente_por_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> Optional[Cliente]:
        require_text(numero_documento, "Número de documento requerido")
        return await self.cliente_repository.obtener_por_documento(
            tipo_documento, numero_documento
        )

    async def obtener_cliente_por_usuario_id(
        self, usuario_id: str
    ) -> Optional[Cliente]:
        require_text(usuario_id, "ID de usuario requerido")
        return await self.cliente_repository.obtener_por_usuario_id(usuario_id)

    async def listar_clientes(self) -> List[Cliente]:
        clientes = await self.cliente_repository.obtener_todos()
        logger.debug("Clientes listed", total=len(clientes))
        return clientes

    async def obtener_clientes_por_estado(
        self, estado: Union[EstadoCliente, str]
    ) -> List[Cliente]:
        return await self.cliente_repository.obtener_por_estado(estado)

    async def obtener_clientes_por_categoria(
        self, categoria: Union[CategoriaCliente, str]
    ) -> List[Cliente]:
        return await self.cliente_repository.obtener_por_categoria(categoria)

    async def actualizar_cliente(
        self, cliente_id: str, datos: ActualizarClienteDTO
    ) -> OperationResult[Cliente]:
        if not cliente_id or not cliente_id.strip():
            return OperationResult.fail(
                error="ID de cliente requerido", message="Parámetros inválidos"
            )

        try:
            return await self.cliente_repository.actualizar(cliente_id, datos)
        except Exception as e:
            logger.error("Failed to update cliente", cliente_id=cliente_id, error=str(e))
            return OperationResult.fail(
                error=str(e), message="Error actualizando cliente"
            )

    async def eliminar_cliente(self, cliente_id: str) -> bool:
        require_text(cliente_id, "ID de cliente requerido")

        cliente = await self.cliente_repository.obtener_por_id(cliente_id)
        if cliente is None:
            logger.info("Cliente not found for deletion", cliente_id=cliente_id)
            return False

        eliminado = await self.cliente_repository.eliminar(cliente_id)
        if eliminado:
            logger.info("Cliente removed", cliente_id=cliente_id)
        return eliminado

    async def cambiar_estado_cliente(
        self, cliente_id: str, nuevo_estado: Union[EstadoCliente, str]
    ) -> OperationResult[Cliente]:
        return await self.actualizar_cliente(
            cliente_id, ActualizarClienteDTO(estado=nuevo_estado)
        )

    async def ascender_categoria_cliente(
        self, cliente_id: str
    ) -> OperationResult[Cliente]:
        """Move the cliente one step up the category ladder."""
        cliente = await self.cliente_repository.obtener_por_id(cliente_id)
        if cliente is None:
            return OperationResult.fail(
                error=f"Cliente con ID '{cliente_id}' no encontrado",
                message="Cliente no existe",
            )

        if not cliente.ascender_categoria():
            return OperationResult.fail(
                error="Cliente ya está en la categoría más alta",
                message="No se puede ascender más",
            )

        return await self.actualizar_cliente(
            cliente_id, ActualizarClienteDTO(categoria=cliente.categoria)
        )

    async def verificar_disponibilidad_email(self, email: str) -> bool:
        return not await self.cliente_repository.existe_email(email)

    async def verificar_disponibilidad_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> bool:
        return not await self.cliente_repository.existe_documento(
            tipo_documento, numero_documento
        )

    async def obtener_clientes_mayores_de_edad(self) -> List[Cliente]:
        clientes = await self.cliente_repository.obtener_todos()
        return [cliente for cliente in clientes if cliente.es_mayor_de_edad()]

    async def obtener_clientes_vip(self) -> List[Cliente]:
        """Clientes in the ORO or PLATINO categories."""
        clientes = await self.cliente_repository.obtener_todos()
        return [cliente for cliente in clientes if cliente.es_vip()]

    async def obtener_estadisticas(self) -> EstadisticasClientesDTO:
        clientes = await self.cliente_repository.obtener_todos()

        por_estado: Dict[str, int] = {}
        por_categoria: Dict[str, int] = {}
        suma_edades = 0
        mayores_de_edad = 0
        vip = 0
        for cliente in clientes:
            estado = cliente.estado.value
            categoria = cliente.categoria.value
            por_estado[estado] = por_estado.get(estado, 0) + 1
            por_categoria[categoria] = por_categoria.get(categoria, 0) + 1
            suma_edades += cliente.edad
            if cliente.es_mayor_de_edad():
                mayores_de_edad += 1
            if cliente.es_vip():
                vip += 1

        # Rounded half-up.
        edad_promedio = (
            math.floor(suma_edades / len(clientes) + 0.5) if clientes else 0
        )

        return EstadisticasClientesDTO(
            total=len(clientes),
            por_estado=por_estado,
            por_categoria=por_categoria,
            edad_promedio=edad_promedio,
            mayores_de_edad=mayores_de_edad,
            vip=vip,
        )
