"""Tests de l'entité Address."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from address_converter.errors import ConversionError
from address_converter.models.address import Address
from address_converter.models.canonical import (
    BusinessRecipient,
    ConvertedAddress,
    PostalDetails,
)
from address_converter.models.enums import AddressFormat, AddressKind, Country
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress


class TestAddressCreate:
    """Création d'une adresse identifiée."""

    def test_create_from_converted(self, individual_french: FrenchAddress) -> None:
        converted = individual_french.to_canonical()
        before = datetime.now(UTC)
        address = Address.create(converted)

        assert address.id is not None
        assert address.updated_at >= before
        assert address.updated_at.tzinfo is not None
        assert address.kind == AddressKind.INDIVIDUAL
        assert address.canonical_fields() == converted.canonical_fields()

    def test_identifiers_are_unique(self, individual_french: FrenchAddress) -> None:
        converted = individual_french.to_canonical()
        ids = {Address.create(converted).id for _ in range(50)}
        assert len(ids) == 50

    def test_create_requires_converted_address(self, individual_french: FrenchAddress) -> None:
        with pytest.raises(TypeError):
            Address.create(individual_french)  # type: ignore[arg-type]

    def test_address_is_immutable(self, individual_french: FrenchAddress) -> None:
        address = Address.create(individual_french.to_canonical())
        with pytest.raises(ValidationError):
            address.country = Country.BELGIUM  # type: ignore[misc]

    def test_no_source_format(self, individual_french: FrenchAddress) -> None:
        address = Address.create(individual_french.to_canonical())
        assert "source_format" not in address.model_dump()


class TestAddressUpdate:
    """Mise à jour d'une adresse identifiée."""

    def test_keeps_identifier(
        self,
        individual_french: FrenchAddress,
        business_iso: IsoAddress,
    ) -> None:
        address = Address.create(individual_french.to_canonical())
        updated = address.apply_update(business_iso.to_canonical())

        assert updated.id == address.id
        assert updated.kind == AddressKind.BUSINESS
        assert updated.canonical_fields() == business_iso.to_canonical().canonical_fields()
        assert address.kind == AddressKind.INDIVIDUAL

    def test_updated_at_strictly_advances(self, individual_french: FrenchAddress) -> None:
        converted = individual_french.to_canonical()
        address = Address.create(converted)
        first = address.apply_update(converted)
        second = first.apply_update(converted)
        assert address.updated_at < first.updated_at < second.updated_at

    def test_updated_at_advances_past_future_timestamp(
        self,
        individual_french: FrenchAddress,
    ) -> None:
        future = datetime.now(UTC) + timedelta(days=1)
        address = Address.create(individual_french.to_canonical()).model_copy(
            update={"updated_at": future},
        )
        updated = address.apply_update(individual_french.to_canonical())
        assert updated.updated_at == future + timedelta(microseconds=1)

    def test_update_requires_converted_address(self, individual_french: FrenchAddress) -> None:
        address = Address.create(individual_french.to_canonical())
        with pytest.raises(TypeError):
            address.apply_update(address)  # type: ignore[arg-type]


class TestAddressRender:
    """Restitution d'une adresse dans un format quelconque."""

    def test_render_french_from_iso_origin(self, business_iso: IsoAddress) -> None:
        address = Address.create(business_iso.to_canonical())
        french = address.render(AddressFormat.FRENCH)

        assert isinstance(french, FrenchAddress)
        assert french.business_name == "Société DUPONT"
        assert french.recipient == "Service achat"
        assert french.street == "56 RUE EMILE ZOLA"
        assert french.distribution_info == "BP 90432 MONTFERRIER SUR LEZ"
        assert french.postal == "34092 MONTPELLIER CEDEX 5"
        assert french.country == "FRANCE"

    def test_render_iso_from_french_origin(self, individual_french: FrenchAddress) -> None:
        address = Address.create(individual_french.to_canonical())
        iso = address.render(AddressFormat.ISO20022)

        assert isinstance(iso, IsoAddress)
        assert iso.name == "Monsieur Jean DELHOURME"
        assert iso.postal_address.building_number == "25"

    def test_render_back_to_origin(self, individual_french: FrenchAddress) -> None:
        address = Address.create(individual_french.to_canonical())
        assert address.render(AddressFormat.FRENCH) == individual_french

    def test_render_without_street(self) -> None:
        converted = ConvertedAddress(
            recipient=BusinessRecipient(company_name="DURAND SA"),
            postal_details=PostalDetails(postcode="33000", town="BORDEAUX"),
            country=Country.FRANCE,
            source_format=AddressFormat.ISO20022,
        )
        address = Address.create(converted)
        with pytest.raises(ConversionError) as exc_info:
            address.render(AddressFormat.FRENCH)
        assert exc_info.value.field == "street"


class TestAddressSerialization:
    """Relecture d'un enregistrement sérialisé."""

    def test_json_round_trip(self, business_french: FrenchAddress) -> None:
        address = Address.create(business_french.to_canonical())
        reloaded = Address.model_validate_json(address.model_dump_json())
        assert reloaded == address

    def test_recipient_discriminator(self, business_french: FrenchAddress) -> None:
        address = Address.create(business_french.to_canonical())
        data = address.model_dump(mode="json")
        assert data["recipient"]["kind"] == "business"
        assert data["country"] == "FR"
        reloaded = Address.model_validate(data)
        assert isinstance(reloaded.recipient, BusinessRecipient)
