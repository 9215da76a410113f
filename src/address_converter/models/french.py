"""Adresse postale française (norme NF Z10-011).

FR: Une adresse NF Z10-011 comporte au plus 7 lignes de 38 caractères :
    identité du destinataire, point de remise intérieur (ou interlocuteur
    pour une entreprise), point de remise extérieur, voie, mention
    spéciale de distribution, code postal et localité, pays.
EN: An NF Z10-011 address has at most 7 lines of 38 characters:
    recipient, internal delivery point (or contact for a business),
    external delivery point, street, distribution info, postcode and
    town, country.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from address_converter.errors import ConversionError
from address_converter.models.canonical import (
    BusinessRecipient,
    CanonicalAddress,
    ConvertedAddress,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Street,
)
from address_converter.models.enums import AddressFormat, AddressKind
from address_converter.utils.parsing import (
    country_name,
    join_parts,
    join_postal,
    join_street,
    parse_country,
    split_distribution_info,
    split_postal,
    split_street,
)

# Largeur maximale d'une ligne d'adresse NF Z10-011
LINE_MAX_LENGTH = 38

_OPTIONAL_LINES = (
    "name",
    "business_name",
    "recipient",
    "internal_delivery",
    "external_delivery",
    "distribution_info",
)


class FrenchAddress(BaseModel):
    """Adresse au format NF Z10-011, variante particulier ou entreprise.

    FR: La variante est déterminée par la présence de ``name``
        (particulier) ou de ``business_name`` (entreprise), jamais les deux.
        ``internal_delivery`` est propre aux particuliers, ``recipient``
        aux entreprises.
    EN: The variant is determined by ``name`` (individual) or
        ``business_name`` (business), never both.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 1 : civilité, prénom, nom / Individual identity",
    )
    business_name: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 1 : raison sociale / Business name",
    )
    recipient: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 2 : interlocuteur ou service / Contact or department",
    )
    internal_delivery: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 2 : appartement, étage, escalier / Internal delivery point",
    )
    external_delivery: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 3 : bâtiment, résidence, entrée / External delivery point",
    )
    street: str = Field(
        ...,
        min_length=1,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 4 : numéro et libellé de voie / Street",
    )
    distribution_info: str | None = Field(
        default=None,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 5 : lieu-dit, BP, CS, TSA / Distribution info",
    )
    postal: str = Field(
        ...,
        min_length=1,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 6 : code postal et localité / Postcode and town",
    )
    country: str = Field(
        ...,
        min_length=1,
        max_length=LINE_MAX_LENGTH,
        description="Ligne 7 : pays / Country name",
    )

    @field_validator(*_OPTIONAL_LINES, mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_variant(self) -> Self:
        if self.name and self.business_name:
            msg = "name et business_name sont mutuellement exclusifs"
            raise ValueError(msg)
        if not self.name and not self.business_name:
            msg = "name (particulier) ou business_name (entreprise) est obligatoire"
            raise ValueError(msg)
        if self.name and self.recipient:
            msg = "recipient est réservé aux adresses d'entreprise"
            raise ValueError(msg)
        if self.business_name and self.internal_delivery:
            msg = "internal_delivery est réservé aux adresses de particulier"
            raise ValueError(msg)
        return self

    @property
    def kind(self) -> AddressKind:
        """Variante de l'adresse."""
        if self.business_name:
            return AddressKind.BUSINESS
        return AddressKind.INDIVIDUAL

    def lines(self) -> list[str]:
        """Retourne les lignes non vides dans l'ordre de la norme."""
        if self.kind == AddressKind.BUSINESS:
            candidates = (self.business_name, self.recipient)
        else:
            candidates = (self.name, self.internal_delivery)
        candidates += (
            self.external_delivery,
            self.street,
            self.distribution_info,
            self.postal,
            self.country,
        )
        return [line for line in candidates if line]

    # --- Conversion ---

    def to_canonical(self) -> ConvertedAddress:
        """Convertit l'adresse vers les champs canoniques.

        Raises:
            ConversionError: Si la ligne 6 n'a pas de code postal ou si le
                pays n'est pas dans la table de correspondance.
        """
        country = parse_country(self.country)
        number, street_name = split_street(self.street)
        postcode, town = split_postal(self.postal, country)
        postbox, town_location = split_distribution_info(self.distribution_info)

        if self.kind == AddressKind.BUSINESS:
            recipient = BusinessRecipient(
                company_name=self.business_name,
                contact=self.recipient,
            )
        else:
            recipient = IndividualRecipient(name=self.name)

        delivery_point = None
        if self.internal_delivery or self.external_delivery or postbox:
            delivery_point = DeliveryPoint(
                external=self.external_delivery,
                internal=self.internal_delivery,
                postbox=postbox,
            )

        return ConvertedAddress(
            recipient=recipient,
            delivery_point=delivery_point,
            street=Street(number=number, name=street_name),
            postal_details=PostalDetails(
                postcode=postcode,
                town=town,
                town_location=town_location,
            ),
            country=country,
            source_format=AddressFormat.FRENCH,
        )

    @classmethod
    def from_canonical(cls, canonical: CanonicalAddress) -> Self:
        """Construit l'adresse NF Z10-011 à partir des champs canoniques.

        FR: Le point de remise intérieur d'une entreprise n'a pas de ligne
            dédiée et n'est pas repris.
        EN: A business internal delivery point has no dedicated line and
            is dropped.

        Raises:
            ConversionError: Si la voie est absente ou si une ligne dépasse
                les contraintes de la norme.
        """
        if canonical.street is None:
            msg = "La voie est obligatoire en NF Z10-011"
            raise ConversionError(msg, field="street")

        delivery_point = canonical.delivery_point or DeliveryPoint()
        details = canonical.postal_details
        fields: dict[str, str | None] = {
            "external_delivery": delivery_point.external,
            "street": join_street(canonical.street.number, canonical.street.name),
            "distribution_info": join_parts(delivery_point.postbox, details.town_location),
            "postal": join_postal(details.postcode, details.town),
            "country": country_name(canonical.country),
        }

        recipient = canonical.recipient
        if isinstance(recipient, BusinessRecipient):
            fields["business_name"] = recipient.company_name
            fields["recipient"] = recipient.contact
        else:
            fields["name"] = recipient.name
            fields["internal_delivery"] = delivery_point.internal

        try:
            return cls(**fields)
        except ValidationError as exc:
            raise ConversionError.from_validation_error(exc, "NF Z10-011") from exc

