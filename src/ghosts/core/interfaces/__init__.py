"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones y recibe
  las capacidades (DNS, HTTP) como parámetros explícitos.
"""

from ghosts.core.interfaces.capabilities import LookupFn, MetaFetcher, NameResolver

__all__ = ["LookupFn", "MetaFetcher", "NameResolver"]
