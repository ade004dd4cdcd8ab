"""Contrato de sesiones de datos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que la sesión real (HTTP) y la de fixtures sean intercambiables
  y testeables sin acoplar el coordinador ni el decoder a ninguna de ellas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ResourceLocator


@runtime_checkable
class DataSession(Protocol):
    """Proveedor de bytes crudos para un `ResourceLocator`.

    Reglas de diseño:
    - `fetch` es asíncrono porque es el único punto de I/O (red o disco).
    - Solo puede fallar con subclases de `core.domain.errors.FetchError`.
    """

    async def fetch(self, locator: ResourceLocator) -> bytes:
        """Devuelve el payload crudo del recurso indicado."""

        ...
