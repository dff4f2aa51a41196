"""
Инфраструктурный слой: хранилища в памяти и логирование.
"""

from .logging import StdLogger, configure_logging
from .repositories import InMemoryAccountStore, InMemoryRoomCatalog

__all__ = [
    "InMemoryAccountStore",
    "InMemoryRoomCatalog",
    "StdLogger",
    "configure_logging",
]
