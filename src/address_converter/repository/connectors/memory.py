"""Dépôt d'adresses en mémoire pour les tests et le développement.

FR: Stocke les adresses dans un dictionnaire indexé par identifiant.
    Le contenu est perdu à la fin du processus.
EN: Stores addresses in a dict keyed by identifier. Content is lost when
    the process ends.
"""

from __future__ import annotations

import logging
from uuid import UUID

from address_converter.models.address import Address
from address_converter.repository.base import BaseAddressRepository, parse_address_id
from address_converter.repository.errors import (
    AddressAlreadyExistsError,
    AddressNotFoundError,
)

logger = logging.getLogger(__name__)


class MemoryAddressRepository(BaseAddressRepository):
    """Dépôt d'adresses en mémoire."""

    def __init__(self) -> None:
        self._addresses: dict[UUID, Address] = {}

    def __len__(self) -> int:
        return len(self._addresses)

    def __contains__(self, address_id: object) -> bool:
        if not isinstance(address_id, (UUID, str)):
            return False
        try:
            return parse_address_id(address_id) in self._addresses
        except AddressNotFoundError:
            return False

    def _existing_key(self, address_id: UUID | str) -> UUID:
        """Vérifie la présence de l'adresse et retourne son UUID."""
        key = parse_address_id(address_id)
        if key not in self._addresses:
            raise AddressNotFoundError(address_id)
        return key

    def save(self, address: Address) -> None:
        """Enregistre l'adresse en mémoire."""
        if address.id in self._addresses:
            raise AddressAlreadyExistsError(address.id)
        self._addresses[address.id] = address
        logger.debug("Adresse %s enregistrée en mémoire", address.id)

    def fetch(self, address_id: UUID | str) -> Address:
        """Retourne l'adresse stockée."""
        return self._addresses[self._existing_key(address_id)]

    def update(self, address_id: UUID | str, address: Address) -> None:
        """Remplace l'adresse stockée."""
        key = self._existing_key(address_id)
        self._check_identity(key, address)
        self._addresses[key] = address
        logger.debug("Adresse %s mise à jour en mémoire", key)

    def delete(self, address_id: UUID | str) -> None:
        """Supprime l'adresse stockée."""
        key = self._existing_key(address_id)
        del self._addresses[key]
        logger.debug("Adresse %s supprimée de la mémoire", key)

    def list_ids(self) -> list[UUID]:
        """Liste les identifiants stockés, triés."""
        return sorted(self._addresses)
