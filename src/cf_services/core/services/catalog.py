"""Decodificación de `VCAP_SERVICES` y búsqueda de credenciales.

Flujo:
1) `decode_catalog` lee la variable a través de un `EnvironmentSource`.
2) `decode_catalog_text` valida el JSON contra `ServiceCatalog`.
3) `lookup_credentials` proyecta las credenciales de un tipo de servicio.

`get_credentials_for` encadena los tres pasos. Ningún paso guarda estado:
cada llamada vuelve a leer el entorno y construye valores nuevos.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from cf_services.adapters.environment import ProcessEnvironment
from cf_services.core.config import VCAP_SERVICES, CFServicesSettings
from cf_services.core.domain.models import Credentials, ServiceCatalog
from cf_services.core.errors import (
    EnvNotSetError,
    EnvNotTextError,
    MalformedJSONError,
    ServiceNotPresentError,
)
from cf_services.core.interfaces.environment import EnvironmentSource

logger = logging.getLogger(__name__)

_CATALOG_ADAPTER: TypeAdapter[ServiceCatalog] = TypeAdapter(ServiceCatalog)


def _is_text(raw: str) -> bool:
    # os.environ expone los bytes no UTF-8 como surrogates sueltos.
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def read_services_text(
    environment: EnvironmentSource | None = None,
    settings: CFServicesSettings | None = None,
) -> str:
    """Devuelve el texto crudo de `VCAP_SERVICES`.

    Raises:
        EnvNotSetError: la variable no existe, o no es texto válido.
        EnvNotTextError: la variable no es texto válido y `strict_text` está activo.
    """

    environment = environment or ProcessEnvironment()
    settings = settings or CFServicesSettings()

    raw = environment.get(VCAP_SERVICES)
    if raw is None:
        logger.debug("%s is not set", VCAP_SERVICES)
        raise EnvNotSetError()
    if not _is_text(raw):
        logger.debug("%s is set but is not valid UTF-8 text", VCAP_SERVICES)
        if settings.strict_text:
            raise EnvNotTextError()
        raise EnvNotSetError()
    return raw


def decode_catalog_text(text: str) -> ServiceCatalog:
    """Valida `text` como JSON de `VCAP_SERVICES`.

    El resultado es todo o nada: cualquier error de sintaxis o de forma
    (p.ej. un enlace sin `credentials`, o un `port` que no es un entero JSON)
    se traduce a `MalformedJSONError`.

    Reglas:
    - Modo estricto: sin coerciones (`"8080"`, `true` u `8080.0` no son puertos).
    - Solo se aceptan los nombres del payload (`jdbcUrl`, ...); los nombres
      internos (`jdbc_url`, ...) cuentan como campos desconocidos.
    """

    try:
        catalog = _CATALOG_ADAPTER.validate_json(
            text,
            strict=True,
            by_alias=True,
            by_name=False,
        )
    except ValidationError as exc:
        logger.debug(
            "%s failed validation with %d error(s)",
            VCAP_SERVICES,
            exc.error_count(),
        )
        raise MalformedJSONError() from exc

    logger.debug("decoded %d service type(s) from %s", len(catalog), VCAP_SERVICES)
    return catalog


def decode_catalog(
    environment: EnvironmentSource | None = None,
    settings: CFServicesSettings | None = None,
) -> ServiceCatalog:
    """Lee y decodifica todos los servicios enlazados a la aplicación."""

    settings = settings or CFServicesSettings()
    text = read_services_text(environment, settings)
    return decode_catalog_text(text)


def lookup_credentials(catalog: ServiceCatalog, service_name: str) -> list[Credentials]:
    """Credenciales de cada enlace de `service_name`, en el orden del catálogo.

    Un tipo de servicio presente pero sin enlaces devuelve una lista vacía.
    """

    bindings = catalog.get(service_name)
    if bindings is None:
        logger.debug("service %r is not present in %s", service_name, VCAP_SERVICES)
        raise ServiceNotPresentError(service_name)
    return [binding.credentials for binding in bindings]


def get_credentials_for(
    service_name: str,
    environment: EnvironmentSource | None = None,
    settings: CFServicesSettings | None = None,
) -> list[Credentials]:
    """Atajo: `decode_catalog` seguido de `lookup_credentials`."""

    return lookup_credentials(decode_catalog(environment, settings), service_name)
