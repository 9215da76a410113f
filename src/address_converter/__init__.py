"""address-converter : conversion d'adresses postales NF Z10-011 <-> ISO 20022.

FR: Modèles des deux formats, champs canoniques, entité identifiée,
    dépôts de persistance et service applicatif.
EN: Models for both formats, canonical fields, identified entity,
    persistence repositories and application service.
"""

from address_converter.models import (
    Address,
    AddressFormat,
    AddressKind,
    ConvertedAddress,
    Country,
    FrenchAddress,
    IsoAddress,
    IsoPostalAddress,
)
from address_converter.errors import ConversionError, ValidationError
from address_converter.repository import (
    AddressAlreadyExistsError,
    AddressNotFoundError,
    BaseAddressRepository,
    JsonAddressRepository,
    MemoryAddressRepository,
    RepositoryError,
    RepositoryIOError,
)
from address_converter.service import AddressService

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressAlreadyExistsError",
    "AddressFormat",
    "AddressKind",
    "AddressNotFoundError",
    "AddressService",
    "BaseAddressRepository",
    "ConversionError",
    "ConvertedAddress",
    "Country",
    "FrenchAddress",
    "IsoAddress",
    "IsoPostalAddress",
    "JsonAddressRepository",
    "MemoryAddressRepository",
    "RepositoryError",
    "RepositoryIOError",
    "ValidationError",
    "__version__",
]
