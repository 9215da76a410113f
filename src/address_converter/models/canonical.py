"""Champs canoniques d'une adresse, indépendants du format.

FR: Ensemble de champs commun à ``ConvertedAddress`` (conversion en cours,
    sans identité) et à ``Address`` (entité persistée). Chaque format sait
    se convertir vers et depuis ces champs.
EN: Field set shared by ``ConvertedAddress`` (in-flight conversion, no
    identity) and ``Address`` (persisted entity).
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from address_converter.models.enums import AddressFormat, AddressKind, Country


class _CanonicalPart(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)


class IndividualRecipient(_CanonicalPart):
    """Destinataire particulier (ex. « Monsieur Jean DELHOURME »)."""

    kind: Literal["individual"] = "individual"
    name: str = Field(..., min_length=1, description="Identité / Full name")


class BusinessRecipient(_CanonicalPart):
    """Destinataire entreprise.

    FR: Raison sociale, complétée éventuellement d'un interlocuteur ou d'un
        service (« Société DUPONT » / « Mademoiselle Lucie MARTIN »).
    EN: Company name, optionally with a contact person or department.
    """

    kind: Literal["business"] = "business"
    company_name: str = Field(..., min_length=1, description="Raison sociale / Company name")
    contact: str | None = Field(
        default=None,
        description="Interlocuteur ou service / Contact or department",
    )


Recipient = Annotated[
    IndividualRecipient | BusinessRecipient,
    Field(discriminator="kind"),
]


class DeliveryPoint(_CanonicalPart):
    """Compléments du point de remise."""

    external: str | None = Field(
        default=None,
        description="Bâtiment, résidence, entrée / Building, residence, entrance",
    )
    internal: str | None = Field(
        default=None,
        description="Appartement, étage, escalier / Flat, floor, staircase",
    )
    postbox: str | None = Field(
        default=None,
        description="Boîte postale ou lieu de distribution / Postbox",
    )


class Street(_CanonicalPart):
    """Voie : numéro (2, 2BIS, 2D) et libellé (« RUE DE L'EGLISE »)."""

    number: str | None = Field(default=None, description="Numéro / Building number")
    name: str = Field(..., min_length=1, description="Libellé de voie / Street name")


class PostalDetails(_CanonicalPart):
    """Code postal, localité et lieu-dit éventuel."""

    postcode: str = Field(..., min_length=1, description="Code postal / Postcode")
    town: str = Field(..., min_length=1, description="Localité / Town")
    town_location: str | None = Field(
        default=None,
        description="Lieu-dit ou commune d'implantation / Town location",
    )


class CanonicalAddress(BaseModel):
    """Champs canoniques communs à toutes les représentations.

    FR: Ne porte ni identité ni provenance ; sert de contrat d'entrée
        aux conversions ``from_canonical``.
    EN: Carries neither identity nor provenance; input contract of
        ``from_canonical`` conversions.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    recipient: Recipient
    delivery_point: DeliveryPoint | None = None
    street: Street | None = None
    postal_details: PostalDetails
    country: Country

    @property
    def kind(self) -> AddressKind:
        """Variante déduite du destinataire."""
        return AddressKind(self.recipient.kind)

    def canonical_fields(self) -> dict[str, Any]:
        """Retourne les seuls champs canoniques (sans identité ni provenance)."""
        return {name: getattr(self, name) for name in CanonicalAddress.model_fields}


class ConvertedAddress(CanonicalAddress):
    """Résultat d'une conversion, pas encore identifié.

    FR: Produit par ``to_canonical()`` d'un format source ; immuable.
        Seul objet accepté par ``Address.create``.
    EN: Produced by a source format's ``to_canonical()``; immutable.
        The only input accepted by ``Address.create``.
    """

    source_format: AddressFormat
