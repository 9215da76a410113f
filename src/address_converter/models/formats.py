"""Capacité de conversion commune aux formats d'adresse.

FR: Chaque format (NF Z10-011, ISO 20022) sait produire une
    ``ConvertedAddress`` à partir de lui-même et se reconstruire à partir
    de champs canoniques. L'ensemble des formats est fermé : la table
    ``FORMAT_MODELS`` couvre exactement les membres de ``AddressFormat``.

    Pertes connues lors d'une conversion :

    - ISO 20022 particulier : ``department`` est accolé à ``room`` et
      n'est pas restitué séparément ;
    - entreprise vers NF Z10-011 : le point de remise intérieur (``room``
      ISO 20022) n'a pas de ligne et est abandonné ;
    - les espaces internes du numéro et du libellé de voie sont
      normalisés (la localité et le lieu-dit sont conservés tels quels) ;
    - le nom du pays est restitué selon l'orthographe de la table ;
    - une boîte postale ISO 20022 sans mention BP, CS, TSA ou CP en tête
      revient comme lieu-dit (``town_location_name``).

    Limites : un lieu-dit NF Z10-011 de plus de 35 caractères ou une
    boîte postale de plus de 16 caractères ne peut pas être restitué en
    ISO 20022 (``ConversionError``).
EN: Each format can produce a ``ConvertedAddress`` from itself and be
    rebuilt from canonical fields. The format set is closed.
"""

from collections.abc import Mapping
from typing import Any, Protocol, Self

from address_converter.models.canonical import CanonicalAddress, ConvertedAddress
from address_converter.models.enums import AddressFormat
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress

FormattedAddress = FrenchAddress | IsoAddress


class AddressConvertible(Protocol):
    """Contrat de conversion implémenté par chaque format."""

    def to_canonical(self) -> ConvertedAddress: ...

    @classmethod
    def from_canonical(cls, canonical: CanonicalAddress) -> Self: ...


FORMAT_MODELS: dict[AddressFormat, type[FrenchAddress] | type[IsoAddress]] = {
    AddressFormat.FRENCH: FrenchAddress,
    AddressFormat.ISO20022: IsoAddress,
}


def format_of(address: FormattedAddress) -> AddressFormat:
    """Retourne le format d'un objet valeur."""
    if isinstance(address, FrenchAddress):
        return AddressFormat.FRENCH
    if isinstance(address, IsoAddress):
        return AddressFormat.ISO20022
    msg = f"Format d'adresse inconnu : {type(address).__name__}"
    raise TypeError(msg)


def detect_format(data: Mapping[str, Any]) -> AddressFormat:
    """Devine le format d'un document JSON désérialisé.

    FR: La présence d'un bloc ``postal_address`` désigne ISO 20022 ;
        sinon le document est lu comme NF Z10-011.
    EN: A ``postal_address`` block means ISO 20022, otherwise NF Z10-011.
    """
    if "postal_address" in data:
        return AddressFormat.ISO20022
    return AddressFormat.FRENCH


def render(canonical: CanonicalAddress, target_format: AddressFormat) -> FormattedAddress:
    """Restitue des champs canoniques dans le format demandé.

    Raises:
        ConversionError: Si le format cible ne peut pas être construit.
    """
    return FORMAT_MODELS[AddressFormat(target_format)].from_canonical(canonical)


def convert(address: FormattedAddress, target_format: AddressFormat) -> FormattedAddress:
    """Convertit directement un objet valeur vers un autre format."""
    return render(address.to_canonical(), target_format)
