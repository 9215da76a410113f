"""Adresse postale structurée ISO 20022.

FR: Modélise le bloc ``PostalAddress24`` (``<PstlAdr>``) et le nom de la
    partie (``<Nm>``) tels qu'utilisés dans les messages de paiement.
    Les longueurs maximales sont celles du dictionnaire ISO 20022.
EN: Models the ``PostalAddress24`` block (``<PstlAdr>``) and the party
    name (``<Nm>``) as used in payment messages. Maximum lengths follow
    the ISO 20022 data dictionary.
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
from address_converter.utils.parsing import join_parts, parse_country


class IsoPostalAddress(BaseModel):
    """Bloc ``<PstlAdr>`` ISO 20022."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    street_name: str = Field(..., min_length=1, max_length=70, description="<StrtNm>")
    building_number: str | None = Field(default=None, max_length=16, description="<BldgNb>")
    floor: str | None = Field(default=None, max_length=70, description="<Flr>")
    room: str | None = Field(default=None, max_length=70, description="<Room>")
    postbox: str | None = Field(default=None, max_length=16, description="<PstBx>")
    department: str | None = Field(default=None, max_length=70, description="<Dept>")
    postcode: str = Field(..., min_length=1, max_length=16, description="<PstCd>")
    town_name: str = Field(..., min_length=1, max_length=35, description="<TwnNm>")
    town_location_name: str | None = Field(default=None, max_length=35, description="<TwnLctnNm>")
    country: str = Field(
        ...,
        pattern=r"^[A-Z]{2}$",
        description="<Ctry> code ISO 3166-1 alpha-2",
    )

    @field_validator(
        "building_number",
        "floor",
        "room",
        "postbox",
        "department",
        "town_location_name",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class IsoAddress(BaseModel):
    """Partie ISO 20022 : nom et adresse postale structurée.

    FR: ``name`` pour un particulier, ``business_name`` pour une
        entreprise ; exactement l'un des deux.
    EN: ``name`` for an individual, ``business_name`` for a business;
        exactly one of them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, max_length=140, description="<Nm> particulier")
    business_name: str | None = Field(default=None, max_length=140, description="<Nm> entreprise")
    postal_address: IsoPostalAddress

    @field_validator("name", "business_name", mode="before")
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
        return self

    @property
    def kind(self) -> AddressKind:
        """Variante de l'adresse."""
        if self.business_name:
            return AddressKind.BUSINESS
        return AddressKind.INDIVIDUAL

    @property
    def party_name(self) -> str:
        """Nom porté par ``<Nm>``, quelle que soit la variante."""
        return self.business_name or self.name  # type: ignore[return-value]

    # --- Conversion ---

    def to_canonical(self) -> ConvertedAddress:
        """Convertit l'adresse vers les champs canoniques.

        FR: Pour un particulier, ``department`` n'a pas d'équivalent
            canonique et est accolé à ``room`` dans le point de remise
            intérieur.
        EN: For an individual, ``department`` is appended to ``room`` in
            the internal delivery point.

        Raises:
            ConversionError: Si le code pays n'est pas dans la table.
        """
        postal = self.postal_address
        if self.kind == AddressKind.BUSINESS:
            recipient = BusinessRecipient(
                company_name=self.business_name,
                contact=postal.department,
            )
            internal = postal.room
        else:
            recipient = IndividualRecipient(name=self.name)
            internal = join_parts(postal.room, postal.department)

        delivery_point = None
        if postal.floor or internal or postal.postbox:
            delivery_point = DeliveryPoint(
                external=postal.floor,
                internal=internal,
                postbox=postal.postbox,
            )

        return ConvertedAddress(
            recipient=recipient,
            delivery_point=delivery_point,
            street=Street(number=postal.building_number, name=postal.street_name),
            postal_details=PostalDetails(
                postcode=postal.postcode,
                town=postal.town_name,
                town_location=postal.town_location_name,
            ),
            country=parse_country(postal.country),
            source_format=AddressFormat.ISO20022,
        )

    @classmethod
    def from_canonical(cls, canonical: CanonicalAddress) -> Self:
        """Construit l'adresse ISO 20022 à partir des champs canoniques.

        Raises:
            ConversionError: Si la voie est absente ou si un champ dépasse
                les longueurs ISO 20022.
        """
        if canonical.street is None:
            msg = "Le nom de voie (StrtNm) est obligatoire en ISO 20022"
            raise ConversionError(msg, field="street")

        delivery_point = canonical.delivery_point or DeliveryPoint()
        details = canonical.postal_details
        postal_fields: dict[str, str | None] = {
            "street_name": canonical.street.name,
            "building_number": canonical.street.number,
            "floor": delivery_point.external,
            "room": delivery_point.internal,
            "postbox": delivery_point.postbox,
            "postcode": details.postcode,
            "town_name": details.town,
            "town_location_name": details.town_location,
            "country": canonical.country.value,
        }

        recipient = canonical.recipient
        try:
            if isinstance(recipient, BusinessRecipient):
                postal_fields["department"] = recipient.contact
                return cls(
                    business_name=recipient.company_name,
                    postal_address=IsoPostalAddress(**postal_fields),
                )
            return cls(
                name=recipient.name,
                postal_address=IsoPostalAddress(**postal_fields),
            )
        except ValidationError as exc:
            raise ConversionError.from_validation_error(exc, "ISO 20022") from exc
