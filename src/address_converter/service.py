"""Cas d'usage de conversion et de gestion des adresses.

FR: Orchestration : désérialisation d'un document JSON dans son format
    source, conversion vers les champs canoniques, persistance via le
    dépôt, et restitution dans le format demandé. Les erreurs du domaine
    et du dépôt sont propagées telles quelles à l'appelant.
EN: Orchestration: JSON deserialisation in the source format, conversion
    to canonical fields, persistence through the repository and rendering
    in the requested format. Domain and repository errors propagate
    unchanged to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import TypeAdapter

from address_converter.models.address import Address
from address_converter.models.enums import AddressFormat
from address_converter.models.formats import (
    FORMAT_MODELS,
    FormattedAddress,
    detect_format,
    render,
)
from address_converter.repository.base import BaseAddressRepository

logger = logging.getLogger(__name__)

Payload = str | bytes | Mapping[str, Any]

_JSON_OBJECT = TypeAdapter(dict[str, Any])


class AddressService:
    """Service applicatif de conversion et de persistance d'adresses."""

    def __init__(self, repository: BaseAddressRepository) -> None:
        self.repository = repository

    def parse(
        self,
        payload: Payload,
        source_format: AddressFormat | str | None = None,
    ) -> FormattedAddress:
        """Désérialise un document dans son format source.

        Args:
            payload: Document JSON (texte, bytes) ou dictionnaire.
            source_format: Format du document ; deviné si absent.

        Returns:
            L'objet valeur ``FrenchAddress`` ou ``IsoAddress``.

        Raises:
            ValidationError: Si le document est mal formé ou incomplet.
        """
        data = payload if isinstance(payload, Mapping) else _JSON_OBJECT.validate_json(payload)
        fmt = AddressFormat(source_format) if source_format else detect_format(data)
        return FORMAT_MODELS[fmt].model_validate(data)

    def convert(
        self,
        payload: Payload,
        target_format: AddressFormat | str,
        source_format: AddressFormat | str | None = None,
        *,
        save: bool = False,
    ) -> tuple[FormattedAddress, Address | None]:
        """Convertit un document vers le format cible.

        FR: Avec ``save``, l'adresse n'est enregistrée qu'après une
            conversion réussie.
        EN: With ``save``, the address is stored only after a successful
            conversion.

        Returns:
            L'adresse convertie et, si enregistrée, l'entité créée.

        Raises:
            ValidationError: Si le document est invalide.
            ConversionError: Si la conversion échoue.
            RepositoryError: Si l'enregistrement échoue.
        """
        source = self.parse(payload, source_format)
        converted = source.to_canonical()
        result = render(converted, AddressFormat(target_format))
        logger.debug(
            "Conversion %s -> %s réussie",
            converted.source_format,
            AddressFormat(target_format),
        )

        address = None
        if save:
            address = Address.create(converted)
            self.repository.save(address)
            logger.info("Adresse %s enregistrée après conversion", address.id)
        return result, address

    def save(
        self,
        payload: Payload,
        source_format: AddressFormat | str | None = None,
    ) -> Address:
        """Enregistre une nouvelle adresse et retourne l'entité identifiée."""
        converted = self.parse(payload, source_format).to_canonical()
        address = Address.create(converted)
        self.repository.save(address)
        logger.info("Adresse %s enregistrée (%s)", address.id, converted.source_format)
        return address

    def update(
        self,
        address_id: UUID | str,
        payload: Payload,
        source_format: AddressFormat | str | None = None,
    ) -> Address:
        """Remplace les champs d'une adresse existante.

        Raises:
            AddressNotFoundError: Si l'adresse n'existe pas.
        """
        converted = self.parse(payload, source_format).to_canonical()
        current = self.repository.fetch(address_id)
        updated = current.apply_update(converted)
        self.repository.update(address_id, updated)
        logger.info("Adresse %s mise à jour", updated.id)
        return updated

    def delete(self, address_id: UUID | str) -> None:
        """Supprime une adresse."""
        self.repository.delete(address_id)
        logger.info("Adresse %s supprimée", address_id)

    def fetch(self, address_id: UUID | str) -> Address:
        """Relit une adresse identifiée."""
        return self.repository.fetch(address_id)

    def fetch_format(
        self,
        address_id: UUID | str,
        target_format: AddressFormat | str,
    ) -> FormattedAddress:
        """Relit une adresse et la restitue dans le format demandé."""
        return self.fetch(address_id).render(AddressFormat(target_format))

    def list_ids(self) -> list[UUID]:
        """Liste les identifiants enregistrés."""
        return self.repository.list_ids()
