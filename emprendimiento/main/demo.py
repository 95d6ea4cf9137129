"""
Demo Runner - Main Layer

Walks through the create, read, update and delete flows of the three
services against the seeded store and prints the statistics before and
after. Run it with ``python -m emprendimiento.main``.
"""

import asyncio
from datetime import date
from typing import Dict

from emprendimiento.application.services import (
    ClienteService,
    EmprendedorService,
    UsuarioService,
)
from emprendimiento.domain.entities import (
    ActualizarClienteDTO,
    ActualizarEmprendedorDTO,
    ActualizarUsuarioDTO,
    CategoriaCliente,
    CrearClienteDTO,
    CrearEmprendedorDTO,
    CrearUsuarioDTO,
    DireccionDTO,
    EstadoCliente,
    EstadoEmprendedor,
    EstadoUsuario,
    NivelExperiencia,
    RedSocialDTO,
    RolUsuario,
    SectorEmprendimiento,
)
from emprendimiento.domain.errors import DomainError
from emprendimiento.domain.value_objects import PlataformaRedSocial, TipoDocumento
from emprendimiento.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

from .config import get_settings
from .container import app_lifespan, init_container

logger = get_logger(__name__)

# Records kept in each collection; the demo only deletes above this.
MINIMO_REGISTROS = 3


def _formatear_conteo(conteo: Dict[str, int]) -> str:
    return ", ".join(f"{clave}: {valor}" for clave, valor in conteo.items())


class DemoRunner:
    """Runs the functional walkthrough over the three services."""

    def __init__(
        self,
        usuario_service: UsuarioService,
        cliente_service: ClienteService,
        emprendedor_service: EmprendedorService,
    ):
        self.usuario_service = usuario_service
        self.cliente_service = cliente_service
        self.emprendedor_service = emprendedor_service

    async def run(self) -> None:
        print("\nINICIALIZANDO SISTEMA DE EMPRENDIMIENTO")
        print("=" * 60)

        await self.mostrar_estadisticas_iniciales()
        await self.probar_usuarios()
        await self.probar_clientes()
        await self.probar_emprendedores()
        await self.mostrar_estadisticas_finales()

        print("\nTODAS LAS PRUEBAS COMPLETADAS")

    async def mostrar_estadisticas_iniciales(self) -> None:
        usuarios = await self.usuario_service.obtener_estadisticas()
        clientes = await self.cliente_service.obtener_estadisticas()
        emprendedores = await self.emprendedor_service.obtener_estadisticas()

        print("\nESTADÍSTICAS INICIALES DEL SISTEMA")
        print("-" * 40)
        print(f"Usuarios: {usuarios.total} (Activos: {usuarios.activos})")
        print(
            f"Clientes: {clientes.total} "
            f"(Edad promedio: {clientes.edad_promedio} años)"
        )
        print(
            f"Emprendedores: {emprendedores.total} "
            f"(Verificados: {emprendedores.verificados})"
        )

    async def probar_usuarios(self) -> None:
        print("\nOPERACIONES DE USUARIO")
        print("=" * 40)

        try:
            usuario = await self.usuario_service.crear_usuario(
                CrearUsuarioDTO(
                    username="nuevousuario2024",
                    email="nuevo@usuario.com",
                    password="MiPassword123$",
                    nombre="Roberto",
                    apellido="Silva",
                    telefono="+57-300-9876543",
                    rol=RolUsuario.CLIENTE,
                )
            )
            print(f"  Usuario creado: {usuario.nombre_completo} - ID: {usuario.id}")
        except DomainError as e:
            print(f"  Error: {e.message}")

        usuarios = await self.usuario_service.listar_usuarios()
        print(f"  Usuarios encontrados: {len(usuarios)}")
        admin = await self.usuario_service.obtener_usuario_por_username("admin")
        if admin is not None:
            print(f"  Usuario por username: {admin.nombre}")

        if usuarios:
            resultado = await self.usuario_service.actualizar_usuario(
                usuarios[-1].id,
                ActualizarUsuarioDTO(
                    nombre="Roberto Carlos",
                    telefono="+57-310-1234567",
                    estado=EstadoUsuario.ACTIVO,
                ),
            )
            self._mostrar_resultado(resultado, "Usuario actualizado")

        if len(usuarios) > MINIMO_REGISTROS:
            eliminado = await self.usuario_service.eliminar_usuario(usuarios[-1].id)
            print(
                "  Usuario eliminado exitosamente"
                if eliminado
                else "  No se pudo eliminar el usuario"
            )
        else:
            print("  Manteniendo usuarios para otras pruebas")

    async def probar_clientes(self) -> None:
        print("\nOPERACIONES DE CLIENTE")
        print("=" * 40)

        try:
            cliente = await self.cliente_service.crear_cliente(
                CrearClienteDTO(
                    nombre="Elena",
                    apellido="Morales",
                    email="elena.morales@email.com",
                    telefono="+57-315-9876543",
                    tipo_documento=TipoDocumento.CEDULA,
                    numero_documento="98765432",
                    fecha_nacimiento=date(1988, 3, 15),
                    direccion=DireccionDTO(
                        calle="Avenida 68 #123-45",
                        ciudad="Cali",
                        departamento="Valle del Cauca",
                        codigo_postal="760001",
                    ),
                )
            )
            print(f"  Cliente creado: {cliente.nombre_completo} - Edad: {cliente.edad} años")
        except DomainError as e:
            print(f"  Error: {e.message}")

        clientes = await self.cliente_service.listar_clientes()
        vip = await self.cliente_service.obtener_clientes_vip()
        oro = await self.cliente_service.obtener_clientes_por_categoria(
            CategoriaCliente.ORO
        )
        activos = await self.cliente_service.obtener_clientes_por_estado(
            EstadoCliente.ACTIVO
        )
        print(f"  Clientes encontrados: {len(clientes)}")
        print(f"  Clientes VIP: {len(vip)}")
        print(f"  Clientes categoría ORO: {len(oro)}")
        print(f"  Clientes activos: {len(activos)}")

        if clientes:
            resultado = await self.cliente_service.actualizar_cliente(
                clientes[-1].id,
                ActualizarClienteDTO(
                    telefono="+57-320-7777777",
                    categoria=CategoriaCliente.PLATA,
                    estado=EstadoCliente.ACTIVO,
                ),
            )
            self._mostrar_resultado(resultado, "Cliente actualizado")

        if len(clientes) > MINIMO_REGISTROS:
            eliminado = await self.cliente_service.eliminar_cliente(clientes[-1].id)
            print(
                "  Cliente eliminado exitosamente"
                if eliminado
                else "  No se pudo eliminar el cliente"
            )
        else:
            print("  Manteniendo clientes para otras pruebas")

    async def probar_emprendedores(self) -> None:
        print("\nOPERACIONES DE EMPRENDEDOR")
        print("=" * 40)

        try:
            emprendedor = await self.emprendedor_service.crear_emprendedor(
                CrearEmprendedorDTO(
                    nombre="Andrés",
                    apellido="Vásquez",
                    email="andres.vasquez@startup.com",
                    telefono="+57-318-5555555",
                    especialidad="Marketing Digital y E-commerce",
                    biografia=(
                        "Especialista en marketing digital con 6 años de "
                        "experiencia ayudando a pequeñas empresas a crecer en "
                        "línea. Experto en SEO, SEM, redes sociales y "
                        "estrategias de e-commerce."
                    ),
                    sector=SectorEmprendimiento.SERVICIOS,
                    experiencia=NivelExperiencia.AVANZADO,
                    redes_sociales=[
                        RedSocialDTO(
                            plataforma=PlataformaRedSocial.LINKEDIN,
                            url="https://linkedin.com/in/andres-vasquez-marketing",
                            nombre_usuario="andres-vasquez-marketing",
                        ),
                        RedSocialDTO(
                            plataforma=PlataformaRedSocial.INSTAGRAM,
                            url="https://instagram.com/andres_marketing_digital",
                            nombre_usuario="andres_marketing_digital",
                        ),
                    ],
                )
            )
            print(
                f"  Emprendedor creado: {emprendedor.nombre_completo} "
                f"- {emprendedor.sector.value}"
            )
            print(f"    Redes sociales: {len(emprendedor.redes_sociales)}")
        except DomainError as e:
            print(f"  Error: {e.message}")

        emprendedores = await self.emprendedor_service.listar_emprendedores()
        verificados = await self.emprendedor_service.obtener_emprendedores_verificados()
        tecnologia = await self.emprendedor_service.obtener_emprendedores_por_sector(
            SectorEmprendimiento.TECNOLOGIA
        )
        mejores = await self.emprendedor_service.obtener_mejor_puntuados(3)
        expertos = await self.emprendedor_service.obtener_emprendedores_por_experiencia(
            NivelExperiencia.EXPERTO
        )
        print(f"  Emprendedores encontrados: {len(emprendedores)}")
        print(f"  Emprendedores verificados: {len(verificados)}")
        print(f"  Emprendedores de tecnología: {len(tecnologia)}")
        print(
            "  Top 3 mejor puntuados: "
            + ", ".join(f"{e.nombre_completo} ({e.puntuacion})" for e in mejores)
        )
        print(f"  Emprendedores expertos: {len(expertos)}")

        if emprendedores:
            resultado = await self.emprendedor_service.actualizar_emprendedor(
                emprendedores[-1].id,
                ActualizarEmprendedorDTO(
                    biografia=(
                        "Especialista en marketing digital con 7 años de "
                        "experiencia. Certificado en Google Ads y Facebook "
                        "Business."
                    ),
                    experiencia=NivelExperiencia.EXPERTO,
                    estado=EstadoEmprendedor.VERIFICADO,
                ),
            )
            self._mostrar_resultado(resultado, "Emprendedor actualizado")

        if len(emprendedores) > MINIMO_REGISTROS:
            eliminado = await self.emprendedor_service.eliminar_emprendedor(
                emprendedores[-1].id
            )
            print(
                "  Emprendedor eliminado exitosamente"
                if eliminado
                else "  No se pudo eliminar el emprendedor"
            )
        else:
            print("  Manteniendo emprendedores para otras pruebas")

    async def mostrar_estadisticas_finales(self) -> None:
        usuarios = await self.usuario_service.obtener_estadisticas()
        clientes = await self.cliente_service.obtener_estadisticas()
        emprendedores = await self.emprendedor_service.obtener_estadisticas()

        print("\nESTADÍSTICAS FINALES DEL SISTEMA")
        print("-" * 40)
        print("\nUSUARIOS:")
        print(f"  Total: {usuarios.total}")
        print(f"  Activos: {usuarios.activos}")
        print(f"  Por rol: {_formatear_conteo(usuarios.por_rol)}")
        print("\nCLIENTES:")
        print(f"  Total: {clientes.total}")
        print(f"  Edad promedio: {clientes.edad_promedio} años")
        print(f"  VIP: {clientes.vip}")
        print(f"  Por categoría: {_formatear_conteo(clientes.por_categoria)}")
        print("\nEMPRENDEDORES:")
        print(f"  Total: {emprendedores.total}")
        print(f"  Verificados: {emprendedores.verificados}")
        print(f"  Puntuación promedio: {emprendedores.puntuacion_promedio}/5")
        print(f"  Alta puntuación (>=4.0): {emprendedores.alta_puntuacion}")
        print(f"  Por sector: {_formatear_conteo(emprendedores.por_sector)}")

    @staticmethod
    def _mostrar_resultado(resultado, etiqueta: str) -> None:
        if resultado.success:
            print(f"  {etiqueta}: {resultado.data.nombre_completo}")
        else:
            print(f"  Error: {resultado.error}")


async def run_demo() -> None:
    """Run the walkthrough inside the lifespan of the global container."""
    async with app_lifespan() as container:
        runner = DemoRunner(
            usuario_service=container.usuario_service(),
            cliente_service=container.cliente_service(),
            emprendedor_service=container.emprendedor_service(),
        )
        await runner.run()


def main() -> None:
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    init_container(settings)
    logger.info(
        "Demo starting",
        title=settings.app.title,
        version=settings.app.version,
        environment=settings.environment.value,
    )
    asyncio.run(run_demo())
    logger.info("Demo finished")
