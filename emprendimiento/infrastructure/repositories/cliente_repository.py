"""
Infrastructure Repository - Cliente In-Memory Implementation

This module implements the Cliente repository on top of the in-memory store.
"""

from datetime import date
from typing import List, Optional, Union

import structlog

from emprendimiento.domain.entities.cliente import (
    EDAD_MINIMA,
    CategoriaCliente,
    Cliente,
    CrearClienteDTO,
    EstadoCliente,
    calcular_edad,
    to_direccion,
)
from emprendimiento.domain.errors import DomainError, DuplicateKeyError, ValidationError
from emprendimiento.domain.repositories.cliente_repository import IClienteRepository
from emprendimiento.domain.value_objects import Email, NumeroDocumento, TipoDocumento
from emprendimiento.infrastructure.database.memory_store import CLIENTES_COLLECTION

from .base import InMemoryRepository

logger = structlog.get_logger(__name__)


class ClienteMemoryRepository(InMemoryRepository[Cliente], IClienteRepository):
    """In-memory implementation of the Cliente repository."""

    collection_name = CLIENTES_COLLECTION
    entity_label = "Cliente"

    async def crear(self, datos: CrearClienteDTO) -> Cliente:
        """
        Create a new cliente.

        E-mail and document uniqueness are checked first, then the minimum
        age, then every value object is built. Nothing is stored on failure.
        """
        await self._simulate_latency()

        try:
            if self._existe_email(datos.email):
                raise DuplicateKeyError(
                    "email", datos.email, f"Email '{datos.email}' ya existe"
                )
            if self._existe_documento(datos.tipo_documento, datos.numero_documento):
                tipo = getattr(datos.tipo_documento, "value", datos.tipo_documento)
                raise DuplicateKeyError(
                    "numero_documento",
                    datos.numero_documento,
                    f"Documento {tipo} '{datos.numero_documento}' ya existe",
                    details={"tipo_documento": tipo},
                )
            if not isinstance(datos.fecha_nacimiento, date):
                raise ValidationError(
                    "Fecha de nacimiento inválida",
                    details={"fecha_nacimiento": datos.fecha_nacimiento},
                )
            edad = calcular_edad(datos.fecha_nacimiento)
            if edad < EDAD_MINIMA:
                raise ValidationError(
                    f"El cliente debe ser mayor de edad ({EDAD_MINIMA} años)",
                    details={"edad": edad},
                )

            cliente = Cliente(
                nombre=datos.nombre,
                apellido=datos.apellido,
                email=Email(datos.email),
                telefono=datos.telefono,
                numero_documento=NumeroDocumento(
                    datos.numero_documento, datos.tipo_documento
                ),
                fecha_nacimiento=datos.fecha_nacimiento,
                direccion=to_direccion(datos.direccion),
                usuario_id=datos.usuario_id,
            )
        except DomainError as e:
            logger.error(
                "Failed to create cliente", email=datos.email, error=e.message
            )
            raise e

        self._items[cliente.id] = cliente
        logger.info("Cliente created", cliente_id=cliente.id, email=str(cliente.email))
        return cliente

    async def obtener_por_email(self, email: str) -> Optional[Cliente]:
        await self._simulate_latency()
        buscado = (email or "").strip().lower()
        return self._find_one(lambda c: str(c.email) == buscado)

    async def obtener_por_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> Optional[Cliente]:
        await self._simulate_latency()
        return self._buscar_documento(tipo_documento, numero_documento)

    async def obtener_por_estado(
        self, estado: Union[EstadoCliente, str]
    ) -> List[Cliente]:
        await self._simulate_latency()
        return self._find_all(lambda c: c.estado == estado)

    async def obtener_por_categoria(
        self, categoria: Union[CategoriaCliente, str]
    ) -> List[Cliente]:
        await self._simulate_latency()
        return self._find_all(lambda c: c.categoria == categoria)

    async def obtener_por_usuario_id(self, usuario_id: str) -> Optional[Cliente]:
        await self._simulate_latency()
        return self._find_one(lambda c: c.usuario_id == usuario_id)

    async def existe_email(self, email: str) -> bool:
        await self._simulate_latency()
        return self._existe_email(email)

    async def existe_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> bool:
        await self._simulate_latency()
        return self._existe_documento(tipo_documento, numero_documento)

    async def contar_por_categoria(
        self, categoria: Union[CategoriaCliente, str]
    ) -> int:
        await self._simulate_latency()
        return len(self._find_all(lambda c: c.categoria == categoria))

    def _existe_email(self, email: str) -> bool:
        buscado = (email or "").strip().lower()
        return self._find_one(lambda c: str(c.email) == buscado) is not None

    def _buscar_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> Optional[Cliente]:
        digitos = NumeroDocumento.normalizar(numero_documento)
        return self._find_one(
            lambda c: c.tipo_documento == tipo_documento
            and str(c.numero_documento) == digitos
        )

    def _existe_documento(
        self, tipo_documento: Union[TipoDocumento, str], numero_documento: str
    ) -> bool:
        return self._buscar_documento(tipo_documento, numero_documento) is not None
