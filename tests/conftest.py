"""Fixtures partagées : adresses de référence dans les deux formats."""

import pytest

from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress, IsoPostalAddress
from address_converter.repository.connectors.memory import MemoryAddressRepository
from address_converter.service import AddressService


@pytest.fixture
def individual_french() -> FrenchAddress:
    """Adresse de particulier NF Z10-011 complète."""
    return FrenchAddress(
        name="Monsieur Jean DELHOURME",
        internal_delivery="Chez Mireille COPEAU Appartement 2",
        external_delivery="Entrée A Bâtiment Jonquille",
        street="25 RUE DE L'EGLISE",
        distribution_info="CAUDOS",
        postal="33380 MIOS",
        country="FRANCE",
    )


@pytest.fixture
def business_french() -> FrenchAddress:
    """Adresse d'entreprise NF Z10-011 avec BP et CEDEX."""
    return FrenchAddress(
        business_name="Société DUPONT",
        recipient="Mademoiselle Lucie MARTIN",
        external_delivery="Résidence des Capucins Bâtiment Quater",
        street="56 RUE EMILE ZOLA",
        distribution_info="BP 90432 MONTFERRIER SUR LEZ",
        postal="34092 MONTPELLIER CEDEX 5",
        country="FRANCE",
    )


@pytest.fixture
def individual_iso() -> IsoAddress:
    """Adresse de particulier ISO 20022 sans numéro de voie."""
    return IsoAddress(
        name="Madame Isabelle RICHARD",
        postal_address=IsoPostalAddress(
            street_name="LE VILLAGE",
            floor="VILLA BEAU SOLEIL",
            postcode="82500",
            town_name="AUTERIVE",
            country="FR",
        ),
    )


@pytest.fixture
def business_iso() -> IsoAddress:
    """Adresse d'entreprise ISO 20022 avec service et lieu-dit."""
    return IsoAddress(
        business_name="Société DUPONT",
        postal_address=IsoPostalAddress(
            street_name="RUE EMILE ZOLA",
            building_number="56",
            department="Service achat",
            postbox="BP 90432",
            postcode="34092",
            town_name="MONTPELLIER CEDEX 5",
            town_location_name="MONTFERRIER SUR LEZ",
            country="FR",
        ),
    )


@pytest.fixture
def memory_repository() -> MemoryAddressRepository:
    """Dépôt d'adresses en mémoire."""
    return MemoryAddressRepository()


@pytest.fixture
def service(memory_repository: MemoryAddressRepository) -> AddressService:
    """Service applicatif branché sur le dépôt mémoire."""
    return AddressService(memory_repository)
