"""Entité adresse, indépendante du format.

FR: Une ``Address`` porte les champs canoniques, un identifiant unique
    attribué une seule fois à la création et l'horodatage de la dernière
    modification. Elle ne naît que d'une ``ConvertedAddress`` et peut être
    restituée dans n'importe quel format, quel que soit celui d'origine.
EN: An ``Address`` carries the canonical fields, a unique identifier
    assigned once at creation, and the last modification timestamp.
    It only arises from a ``ConvertedAddress`` and can be rendered in
    any format, regardless of the original one.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from pydantic import Field

from address_converter.models.canonical import CanonicalAddress, ConvertedAddress
from address_converter.models.enums import AddressFormat
from address_converter.models.formats import FormattedAddress, render


class Address(CanonicalAddress):
    """Adresse identifiée et persistable.

    FR: Immuable : une mise à jour produit une nouvelle instance qui
        conserve l'identifiant. Utiliser ``Address.create`` pour une
        nouvelle adresse ; ``model_validate`` est réservé à la relecture
        d'un enregistrement stocké.
    EN: Immutable: an update yields a new instance keeping the identifier.
        Use ``Address.create`` for a new address; ``model_validate`` is
        reserved to reloading a stored record.
    """

    id: UUID = Field(..., description="Identifiant unique / Unique identifier")
    updated_at: datetime = Field(
        ...,
        description="Date UTC de création ou dernière mise à jour / Last update (UTC)",
    )

    @classmethod
    def create(cls, converted: ConvertedAddress) -> Address:
        """Crée une adresse identifiée à partir d'une conversion.

        Raises:
            TypeError: Si ``converted`` n'est pas une ``ConvertedAddress``.
        """
        if not isinstance(converted, ConvertedAddress):
            msg = "Une Address ne peut être créée qu'à partir d'une ConvertedAddress"
            raise TypeError(msg)
        return cls(
            id=uuid4(),
            updated_at=datetime.now(UTC),
            **converted.canonical_fields(),
        )

    def apply_update(self, converted: ConvertedAddress) -> Address:
        """Remplace les champs canoniques en conservant l'identifiant.

        FR: ``updated_at`` avance strictement, même si l'horloge ne
            progresse pas entre deux mises à jour.
        EN: ``updated_at`` strictly advances, even if the clock does not
            move between two updates.
        """
        if not isinstance(converted, ConvertedAddress):
            msg = "Une mise à jour attend une ConvertedAddress"
            raise TypeError(msg)
        updated_at = max(
            datetime.now(UTC),
            self.updated_at + timedelta(microseconds=1),
        )
        return self.model_copy(
            update={**converted.canonical_fields(), "updated_at": updated_at},
        )

    def render(self, target_format: AddressFormat) -> FormattedAddress:
        """Restitue l'adresse dans le format demandé.

        Raises:
            ConversionError: Si le format cible ne peut pas être construit.
        """
        return render(self, target_format)
