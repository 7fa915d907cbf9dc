"""Errores del Core.

Cada fallo de la librería es una subclase de `CFServicesError`. Los errores
se comparan por tipo y carga útil, de modo que un llamador (o un test) puede
comprobar `err == ServiceNotPresentError("db")`.
"""

from __future__ import annotations

from cf_services.core.config import VCAP_SERVICES


class CFServicesError(Exception):
    """Base de todos los errores de cf-services."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CFServicesError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EnvNotSetError(CFServicesError):
    """`VCAP_SERVICES` no está definida (o no se puede leer como texto)."""

    def __str__(self) -> str:
        return f'environment variable "{VCAP_SERVICES}" is not set'


class EnvNotTextError(EnvNotSetError):
    """`VCAP_SERVICES` está definida pero no es texto UTF-8 válido.

    Solo se lanza con `strict_text` activado; hereda de `EnvNotSetError`
    para que los manejadores existentes la sigan capturando.
    """

    def __str__(self) -> str:
        return f'environment variable "{VCAP_SERVICES}" is not valid text'


class MalformedJSONError(CFServicesError):
    """El contenido de `VCAP_SERVICES` no encaja con la forma esperada."""

    def __str__(self) -> str:
        return f'environment variable "{VCAP_SERVICES}" is malformed'


class ServiceNotPresentError(CFServicesError):
    """El tipo de servicio pedido no está enlazado a la aplicación."""

    def __init__(self, service_name: str) -> None:
        super().__init__(service_name)
        self.service_name = service_name

    def __str__(self) -> str:
        return f'service "{self.service_name}" is not bound to the application'
