"""Modèles Pydantic des adresses : formats, champs canoniques et entité."""

from address_converter.models.address import Address
from address_converter.models.canonical import (
    BusinessRecipient,
    CanonicalAddress,
    ConvertedAddress,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Recipient,
    Street,
)
from address_converter.models.enums import (
    FRENCH_COUNTRY_NAMES,
    AddressFormat,
    AddressKind,
    Country,
)
from address_converter.models.formats import (
    FORMAT_MODELS,
    AddressConvertible,
    FormattedAddress,
    convert,
    detect_format,
    format_of,
    render,
)
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress, IsoPostalAddress

__all__ = [
    "FORMAT_MODELS",
    "FRENCH_COUNTRY_NAMES",
    "Address",
    "AddressConvertible",
    "AddressFormat",
    "AddressKind",
    "BusinessRecipient",
    "CanonicalAddress",
    "ConvertedAddress",
    "Country",
    "DeliveryPoint",
    "FormattedAddress",
    "FrenchAddress",
    "IndividualRecipient",
    "IsoAddress",
    "IsoPostalAddress",
    "PostalDetails",
    "Recipient",
    "Street",
    "convert",
    "detect_format",
    "format_of",
    "render",
]
