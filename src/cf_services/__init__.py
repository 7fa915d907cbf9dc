"""cf-services.

Lee y decodifica la variable de entorno `VCAP_SERVICES` de Cloud Foundry para
consultar los servicios enlazados a la aplicación.

Uso típico:

    from cf_services import get_credentials_for

    creds = get_credentials_for("p-mysql")[0]
    print(creds.hostname, creds.port)

- `decode_catalog()` devuelve todos los servicios (`ServiceCatalog`).
- `lookup_credentials(catalog, name)` proyecta las credenciales de un tipo.
- `get_credentials_for(name)` combina ambos pasos.
"""

from __future__ import annotations

import logging

from cf_services.adapters.environment import ProcessEnvironment, StaticEnvironment
from cf_services.adapters.json_exporter import encode_catalog
from cf_services.core.config import VCAP_SERVICES, CFServicesSettings
from cf_services.core.domain.models import (
    CREDENTIALS_WIRE_NAMES,
    Credentials,
    ServiceBinding,
    ServiceCatalog,
)
from cf_services.core.errors import (
    CFServicesError,
    EnvNotSetError,
    EnvNotTextError,
    MalformedJSONError,
    ServiceNotPresentError,
)
from cf_services.core.interfaces.environment import EnvironmentSource
from cf_services.core.services.catalog import (
    decode_catalog,
    decode_catalog_text,
    get_credentials_for,
    lookup_credentials,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CFServicesError",
    "CFServicesSettings",
    "CREDENTIALS_WIRE_NAMES",
    "Credentials",
    "EnvNotSetError",
    "EnvNotTextError",
    "EnvironmentSource",
    "MalformedJSONError",
    "ProcessEnvironment",
    "ServiceBinding",
    "ServiceCatalog",
    "ServiceNotPresentError",
    "StaticEnvironment",
    "VCAP_SERVICES",
    "decode_catalog",
    "decode_catalog_text",
    "encode_catalog",
    "get_credentials_for",
    "lookup_credentials",
]
