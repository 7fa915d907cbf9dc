"""Exportación JSON del catálogo.

Serializa un `ServiceCatalog` con la forma de `VCAP_SERVICES` (nombres de
campo del payload, p.ej. `jdbcUrl`), de modo que el resultado se puede volver
a decodificar o usar como fixture.
"""

from __future__ import annotations

import json

from cf_services.core.domain.models import ServiceCatalog


def catalog_payload(catalog: ServiceCatalog) -> dict[str, list[dict]]:
    """Convierte el catálogo a estructuras JSON-compatibles con los nombres del payload."""

    return {
        service_type: [binding.model_dump(mode="json", by_alias=True) for binding in bindings]
        for service_type, bindings in catalog.items()
    }


def encode_catalog(catalog: ServiceCatalog, *, indent: int | None = None) -> str:
    """Exporta `catalog` a texto JSON (UTF-8, orden de claves del catálogo)."""

    return json.dumps(catalog_payload(catalog), ensure_ascii=False, indent=indent)
