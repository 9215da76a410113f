"""Fixtures pour les tests des dépôts d'adresses."""

from pathlib import Path

import pytest

from address_converter.models.address import Address
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress
from address_converter.repository.base import BaseAddressRepository
from address_converter.repository.connectors.json_file import JsonAddressRepository
from address_converter.repository.connectors.memory import MemoryAddressRepository


@pytest.fixture(params=["memory", "json"])
def repository(request: pytest.FixtureRequest, tmp_path: Path) -> BaseAddressRepository:
    """Chaque adaptateur, pour vérifier le même contrat."""
    if request.param == "memory":
        return MemoryAddressRepository()
    return JsonAddressRepository(tmp_path / "storage")


@pytest.fixture
def json_repository(tmp_path: Path) -> JsonAddressRepository:
    """Dépôt JSON dans un répertoire temporaire."""
    return JsonAddressRepository(tmp_path / "storage")


@pytest.fixture
def stored_address(individual_french: FrenchAddress) -> Address:
    """Adresse identifiée de particulier."""
    return Address.create(individual_french.to_canonical())


@pytest.fixture
def other_address(business_iso: IsoAddress) -> Address:
    """Adresse identifiée d'entreprise."""
    return Address.create(business_iso.to_canonical())
