"""Adaptateurs de stockage : mémoire et fichiers JSON."""

from address_converter.repository.connectors.json_file import JsonAddressRepository
from address_converter.repository.connectors.memory import MemoryAddressRepository

__all__ = ["JsonAddressRepository", "MemoryAddressRepository"]
