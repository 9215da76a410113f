"""Tests des règles de découpage des champs texte libre."""

import pytest

from address_converter.errors import ConversionError
from address_converter.models.enums import FRENCH_COUNTRY_NAMES, Country
from address_converter.utils.parsing import (
    country_name,
    join_parts,
    join_postal,
    join_street,
    normalize_whitespace,
    parse_country,
    split_distribution_info,
    split_postal,
    split_street,
)


class TestSplitStreet:
    """Découpage numéro / libellé de voie."""

    @pytest.mark.parametrize(
        ("street", "expected"),
        [
            ("25 RUE DE L'EGLISE", ("25", "RUE DE L'EGLISE")),
            ("2BIS AVENUE FOCH", ("2BIS", "AVENUE FOCH")),
            ("2D CHEMIN VERT", ("2D", "CHEMIN VERT")),
            ("25 BIS RUE VICTOR HUGO", ("25 BIS", "RUE VICTOR HUGO")),
            ("12 ter place du marché", ("12 ter", "place du marché")),
            ("LE VILLAGE", (None, "LE VILLAGE")),
            ("A12 ROUTE NATIONALE", (None, "A12 ROUTE NATIONALE")),
        ],
    )
    def test_split(self, street: str, expected: tuple[str | None, str]) -> None:
        assert split_street(street) == expected

    def test_single_number_is_street_name(self) -> None:
        assert split_street("25") == (None, "25")

    def test_whitespace_is_normalized(self) -> None:
        assert split_street("  25   RUE   DE L'EGLISE ") == ("25", "RUE DE L'EGLISE")

    def test_repetition_index_without_label_stays_label(self) -> None:
        assert split_street("25 BIS") == ("25", "BIS")

    def test_join_with_number(self) -> None:
        assert join_street("25 BIS", "RUE VICTOR HUGO") == "25 BIS RUE VICTOR HUGO"

    def test_join_without_number(self) -> None:
        assert join_street(None, "LE VILLAGE") == "LE VILLAGE"


class TestSplitPostal:
    """Découpage code postal / localité."""

    @pytest.mark.parametrize(
        ("postal", "expected"),
        [
            ("33380 MIOS", ("33380", "MIOS")),
            ("34092 MONTPELLIER CEDEX 5", ("34092", "MONTPELLIER CEDEX 5")),
            ("  75011    PARIS ", ("75011", "PARIS")),
            ("L-1234 LUXEMBOURG", ("L-1234", "LUXEMBOURG")),
            ("75008 SAINT  DENIS", ("75008", "SAINT  DENIS")),
        ],
    )
    def test_split(self, postal: str, expected: tuple[str, str]) -> None:
        assert split_postal(postal) == expected

    @pytest.mark.parametrize(
        ("postal", "country", "expected"),
        [
            ("SW1A 1AA LONDON", Country.UNITED_KINGDOM, ("SW1A 1AA", "LONDON")),
            ("EC1A 1BB LONDON", Country.UNITED_KINGDOM, ("EC1A 1BB", "LONDON")),
            ("M1 1AE MANCHESTER", Country.UNITED_KINGDOM, ("M1 1AE", "MANCHESTER")),
            ("1012 AB AMSTERDAM", Country.NETHERLANDS, ("1012 AB", "AMSTERDAM")),
            ("1000-001 LISBOA", Country.PORTUGAL, ("1000-001", "LISBOA")),
            ("AD500 ANDORRA LA VELLA", Country.ANDORRA, ("AD500", "ANDORRA LA VELLA")),
            ("33380 MIOS", Country.FRANCE, ("33380", "MIOS")),
        ],
    )
    def test_split_with_country(
        self, postal: str, country: Country, expected: tuple[str, str]
    ) -> None:
        assert split_postal(postal, country) == expected

    def test_national_format_falls_back_to_first_token(self) -> None:
        assert split_postal("1012 AMSTERDAM", Country.NETHERLANDS) == ("1012", "AMSTERDAM")
        assert split_postal("SW1A1AA LONDON", Country.UNITED_KINGDOM) == ("SW1A1AA", "LONDON")

    def test_without_country_spaced_postcode_is_split_at_first_token(self) -> None:
        assert split_postal("SW1A 1AA LONDON") == ("SW1A", "1AA LONDON")

    @pytest.mark.parametrize("postal", ["MIOS", "33380", "MIOS 33380", ""])
    def test_invalid_postal_raises(self, postal: str) -> None:
        with pytest.raises(ConversionError) as exc_info:
            split_postal(postal)
        assert exc_info.value.field == "postal"

    def test_join(self) -> None:
        assert join_postal("33380", "MIOS") == "33380 MIOS"


class TestSplitDistributionInfo:
    """Découpage boîte postale / lieu-dit."""

    def test_postbox_and_locality(self) -> None:
        result = split_distribution_info("BP 90432 MONTFERRIER SUR LEZ")
        assert result == ("BP 90432", "MONTFERRIER SUR LEZ")

    @pytest.mark.parametrize("postbox", ["CS 70001", "TSA 12345", "B.P. 12", "BP12", "bp 7"])
    def test_postbox_markers(self, postbox: str) -> None:
        assert split_distribution_info(postbox) == (postbox, None)

    def test_no_marker_goes_to_locality(self) -> None:
        assert split_distribution_info("CAUDOS") == (None, "CAUDOS")

    def test_long_locality_is_not_a_postbox(self) -> None:
        assert split_distribution_info("LIEU-DIT LES VIGNES DU HAUT") == (
            None,
            "LIEU-DIT LES VIGNES DU HAUT",
        )

    def test_locality_keeps_inner_spaces(self) -> None:
        result = split_distribution_info(" BP 12   LES  VIGNES ")
        assert result == ("BP 12", "LES  VIGNES")

    def test_marker_prefix_inside_word_is_not_postbox(self) -> None:
        assert split_distribution_info("CPAM 12") == (None, "CPAM 12")

    def test_empty(self) -> None:
        assert split_distribution_info(None) == (None, None)


class TestCountries:
    """Table de correspondance nom français <-> code ISO."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("FRANCE", Country.FRANCE),
            ("france", Country.FRANCE),
            ("FR", Country.FRANCE),
            ("fr", Country.FRANCE),
            ("Belgique", Country.BELGIUM),
            ("ROYAUME-UNI", Country.UNITED_KINGDOM),
            ("Pays-Bas", Country.NETHERLANDS),
            ("  Suisse ", Country.SWITZERLAND),
        ],
    )
    def test_parse(self, value: str, expected: Country) -> None:
        assert parse_country(value) == expected

    def test_accents_are_ignored(self) -> None:
        assert parse_country("Itàlie") == Country.ITALY

    @pytest.mark.parametrize("value", ["ATLANTIDE", "US", "ETATS-UNIS", ""])
    def test_unknown_country_raises(self, value: str) -> None:
        with pytest.raises(ConversionError) as exc_info:
            parse_country(value)
        assert exc_info.value.field == "country"

    def test_table_is_bijective(self) -> None:
        assert set(FRENCH_COUNTRY_NAMES) == set(Country)
        assert len(set(FRENCH_COUNTRY_NAMES.values())) == len(Country)

    @pytest.mark.parametrize("country", list(Country))
    def test_name_round_trip(self, country: Country) -> None:
        assert parse_country(country_name(country)) == country


class TestHelpers:
    def test_normalize_whitespace(self) -> None:
        assert normalize_whitespace("  A  B\tC ") == "A B C"

    def test_join_parts(self) -> None:
        assert join_parts("BP 12", None, "LIEU-DIT") == "BP 12 LIEU-DIT"

    def test_join_parts_all_empty(self) -> None:
        assert join_parts(None, "") is None
