"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Los grupos de endpoints dependen del contrato, no del cliente httpx.
"""

from core.interfaces.transport import PlatformTransport

__all__ = ["PlatformTransport"]
