"""Persistance des adresses identifiées.

FR: Interface abstraite consommée par le domaine, adaptateurs mémoire et
    fichiers JSON, et hiérarchie d'exceptions associée.
EN: Abstract interface consumed by the domain, memory and JSON file
    adapters, and the related exception hierarchy.
"""

from address_converter.repository.base import BaseAddressRepository, parse_address_id
from address_converter.repository.connectors import (
    JsonAddressRepository,
    MemoryAddressRepository,
)
from address_converter.repository.errors import (
    AddressAlreadyExistsError,
    AddressNotFoundError,
    RepositoryError,
    RepositoryIOError,
)

__all__ = [
    "AddressAlreadyExistsError",
    "AddressNotFoundError",
    "BaseAddressRepository",
    "JsonAddressRepository",
    "MemoryAddressRepository",
    "RepositoryError",
    "RepositoryIOError",
    "parse_address_id",
]
