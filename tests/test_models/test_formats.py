"""Tests de la répartition entre formats d'adresse."""

import pytest

from address_converter.models.enums import AddressFormat
from address_converter.models.formats import (
    FORMAT_MODELS,
    convert,
    detect_format,
    format_of,
    render,
)
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress


def test_format_models_cover_every_format() -> None:
    assert set(FORMAT_MODELS) == set(AddressFormat)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"name": "Jean DELHOURME", "street": "LE BOURG"}, AddressFormat.FRENCH),
        ({"name": "Jean DELHOURME", "postal_address": {}}, AddressFormat.ISO20022),
        ({}, AddressFormat.FRENCH),
    ],
)
def test_detect_format(data: dict[str, object], expected: AddressFormat) -> None:
    assert detect_format(data) == expected


def test_format_of(individual_french: FrenchAddress, individual_iso: IsoAddress) -> None:
    assert format_of(individual_french) == AddressFormat.FRENCH
    assert format_of(individual_iso) == AddressFormat.ISO20022


def test_format_of_unknown() -> None:
    with pytest.raises(TypeError, match="inconnu"):
        format_of("25 RUE DE L'EGLISE")  # type: ignore[arg-type]


def test_convert_french_to_iso(business_french: FrenchAddress) -> None:
    result = convert(business_french, AddressFormat.ISO20022)
    assert isinstance(result, IsoAddress)
    assert result.business_name == "Société DUPONT"


def test_convert_to_same_format(individual_iso: IsoAddress) -> None:
    assert convert(individual_iso, AddressFormat.ISO20022) == individual_iso


def test_render_accepts_format_value(individual_iso: IsoAddress) -> None:
    result = render(individual_iso.to_canonical(), "french")  # type: ignore[arg-type]
    assert isinstance(result, FrenchAddress)
    assert result.street == "LE VILLAGE"
    assert result.external_delivery == "VILLA BEAU SOLEIL"
    assert result.postal == "82500 AUTERIVE"
