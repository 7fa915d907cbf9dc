"""Contrato de acceso al entorno.

El Core nunca lee `os.environ` directamente: recibe un `EnvironmentSource`.
En producción es el entorno del proceso; en tests, un mapeo fijo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentSource(Protocol):
    """Fuente de variables de entorno de solo lectura."""

    def get(self, key: str) -> str | None:
        """Devuelve el texto crudo de `key`, o `None` si no está definida."""

        ...
