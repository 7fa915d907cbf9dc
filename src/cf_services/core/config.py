"""Configuración del Core.

Centraliza:
- El nombre de la variable de entorno que publica Cloud Foundry.
- Los ajustes opcionales de la librería (pydantic-settings), leídos con el
  prefijo `CF_SERVICES_`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VCAP_SERVICES = "VCAP_SERVICES"
"""Variable de entorno con todos los servicios enlazados a la aplicación."""


class CFServicesSettings(BaseSettings):
    """Ajustes de decodificación.

    Los valores por defecto reproducen el comportamiento histórico: cualquier
    variable ilegible cuenta como "no definida".
    """

    model_config = SettingsConfigDict(
        env_prefix="CF_SERVICES_",
        extra="ignore",
        case_sensitive=False,
    )

    strict_text: bool = Field(
        default=False,
        description=(
            "Distinguir una variable presente pero con texto no UTF-8 "
            "(EnvNotTextError) de una variable ausente."
        ),
    )
