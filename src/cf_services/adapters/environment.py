"""Adaptadores de `EnvironmentSource`.

- `ProcessEnvironment`: lee `os.environ` en el momento de la llamada.
- `StaticEnvironment`: mapeo fijo, para tests o para aplicaciones que ya
  tienen el texto de `VCAP_SERVICES` a mano.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from cf_services.core.config import VCAP_SERVICES
from cf_services.core.interfaces.environment import EnvironmentSource


class ProcessEnvironment(EnvironmentSource):
    """Entorno real del proceso."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)


class StaticEnvironment(EnvironmentSource):
    """Entorno inmutable construido a partir de un mapeo."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    @classmethod
    def with_services(cls, payload: Mapping[str, Any] | str) -> "StaticEnvironment":
        """Entorno con `VCAP_SERVICES` definido.

        `payload` puede ser el texto JSON tal cual o un dict que se serializa.
        """

        text = payload if isinstance(payload, str) else json.dumps(payload)
        return cls({VCAP_SERVICES: text})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"StaticEnvironment(keys={sorted(self._values)!r})"
