"""SEQLIKE Backend Registry Package"""

from .errors import BackendAlreadyRegisteredError, RegistryError, UnknownBackendError
from .registry import BackendEntry, BackendRegistry, default_registry

__all__ = [
    "BackendAlreadyRegisteredError",
    "BackendEntry",
    "BackendRegistry",
    "RegistryError",
    "UnknownBackendError",
    "default_registry",
]
