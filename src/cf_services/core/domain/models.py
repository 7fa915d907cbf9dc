"""Modelos del dominio (Pydantic v2).

Describen un enlace de servicio tal como lo publica Cloud Foundry en
`VCAP_SERVICES`:

- `Credentials`: material de conexión/autenticación de un enlace.
- `ServiceBinding`: un servicio enlazado a la aplicación.
- `ServiceCatalog`: tipo de servicio -> lista ordenada de enlaces.

Todos los modelos son inmutables (`frozen`) e ignoran campos desconocidos
del payload. Los campos opcionales declaran explícitamente su valor por
defecto; solo `ServiceBinding.credentials` es obligatorio.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Atributo interno -> nombre del campo en el JSON de VCAP_SERVICES.
# Los atributos que no aparecen aquí usan el mismo nombre en ambos lados.
CREDENTIALS_WIRE_NAMES: dict[str, str] = {
    "jdbc_url": "jdbcUrl",
    "api_uri": "http_api_uri",
    "license_key": "licenseKey",
}


def credentials_wire_name(field_name: str) -> str:
    """Nombre en el payload para un atributo de `Credentials`."""

    return CREDENTIALS_WIRE_NAMES.get(field_name, field_name)


class Credentials(BaseModel):
    """Credenciales para conectarse a un servicio enlazado."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        alias_generator=credentials_wire_name,
    )

    uri: str = Field(default="", description="URI de conexión del servicio.")
    jdbc_url: str = Field(default="", description="URL JDBC (payload: `jdbcUrl`).")
    api_uri: str = Field(
        default="",
        description="URI de la API HTTP de gestión (payload: `http_api_uri`).",
    )
    license_key: str = Field(
        default="",
        description="Clave de licencia del proveedor (payload: `licenseKey`).",
    )
    client_secret: str = Field(default="", description="Secreto OAuth2 del cliente.")
    client_id: str = Field(default="", description="Identificador OAuth2 del cliente.")
    access_token_uri: str = Field(
        default="",
        description="Endpoint para obtener tokens de acceso.",
    )
    hostname: str = Field(default="", description="Host del servicio.")
    username: str = Field(default="", description="Usuario de conexión.")
    password: str = Field(default="", description="Contraseña de conexión.")
    port: int = Field(default=0, description="Puerto del servicio (0 si no se informa).")
    name: str = Field(default="", description="Nombre lógico (p.ej. base de datos).")


class ServiceBinding(BaseModel):
    """Un servicio enlazado a la aplicación.

    Puede haber varios enlaces del mismo tipo (p.ej. varios Config Servers);
    comparten clave en el catálogo y conservan el orden del payload.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(default="", description="Nombre dado al enlace.")
    instance_name: str = Field(default="", description="Nombre de la instancia.")
    binding_name: str = Field(
        default="",
        description="Nombre usado al enlazar explícitamente el servicio.",
    )
    label: str = Field(
        default="",
        description="Identificador de la oferta de servicio subyacente.",
    )
    credentials: Credentials = Field(
        ...,
        description="Credenciales del enlace (obligatorio).",
    )


ServiceCatalog = dict[str, list[ServiceBinding]]
