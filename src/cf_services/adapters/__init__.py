"""Adaptadores: acceso al entorno del proceso y exportación JSON."""

from cf_services.adapters.environment import ProcessEnvironment, StaticEnvironment
from cf_services.adapters.json_exporter import catalog_payload, encode_catalog

__all__ = [
    "ProcessEnvironment",
    "StaticEnvironment",
    "catalog_payload",
    "encode_catalog",
]
