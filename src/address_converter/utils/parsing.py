"""Règles de découpage et de recomposition des champs texte libre.

FR: NF Z10-011 regroupe sur une même ligne des informations que ISO 20022
    structure en plusieurs champs (numéro + libellé de voie, code postal +
    localité, boîte postale + lieu-dit). Ces fonctions implémentent les
    règles de découpage retenues, sans interprétation linguistique.
EN: NF Z10-011 packs on a single line data that ISO 20022 splits into
    several fields. These functions implement the chosen tokenisation
    rules, without natural-language parsing.
"""

import re
import unicodedata

from address_converter.errors import ConversionError
from address_converter.models.enums import FRENCH_COUNTRY_NAMES, Country

# Indices de répétition accolés ou séparés du numéro (25BIS, 25 BIS)
REPETITION_INDEXES: frozenset[str] = frozenset({"BIS", "TER", "QUATER", "QUINQUIES"})

_BUILDING_NUMBER = re.compile(
    r"^\d+(?:[A-Z]|BIS|TER|QUATER|QUINQUIES)?$",
    re.IGNORECASE,
)

_POSTAL = re.compile(r"^(?P<postcode>\S*\d\S*)\s+(?P<town>\S.*)$")

# Codes postaux comportant une espace, reconnus avant la règle du premier mot
POSTCODE_PATTERNS: dict[Country, str] = {
    Country.UNITED_KINGDOM: r"[A-Z]{1,2}\d[A-Z\d]? \d[A-Z]{2}",
    Country.NETHERLANDS: r"\d{4} [A-Z]{2}",
}

_COUNTRY_POSTAL: dict[Country, re.Pattern[str]] = {
    country: re.compile(rf"^(?P<postcode>{pattern})\s+(?P<town>\S.*)$", re.IGNORECASE)
    for country, pattern in POSTCODE_PATTERNS.items()
}

_POSTBOX = re.compile(
    r"^(?P<postbox>(?:B\.P\.|BP|CS|TSA|CP) ?\d+)(?:\s+(?P<rest>\S.*))?$",
    re.IGNORECASE,
)

_COUNTRY_BY_NAME: dict[str, Country] = {
    name: country for country, name in FRENCH_COUNTRY_NAMES.items()
}


def normalize_whitespace(value: str) -> str:
    """Supprime les espaces en bord et réduit les espaces internes à un seul."""
    return " ".join(value.split())


def join_parts(*parts: str | None) -> str | None:
    """Concatène les fragments non vides avec un espace, ou ``None``."""
    kept = [part for part in parts if part]
    if not kept:
        return None
    return " ".join(kept)


def split_street(street: str) -> tuple[str | None, str]:
    """Découpe une ligne voie NF Z10-011 en (numéro, libellé).

    FR: Le premier mot est le numéro s'il est composé de chiffres,
        éventuellement suivis d'une lettre ou d'un indice de répétition
        (``2D``, ``25BIS``). Un indice isolé qui suit le numéro lui est
        rattaché (``25 BIS``) tant qu'un libellé subsiste. Sans numéro
        reconnu, toute la ligne est le libellé.
    EN: The first token is the building number when it is digits,
        optionally followed by a letter or repetition index.

    Examples:
        >>> split_street("25 RUE DE L'EGLISE")
        ('25', "RUE DE L'EGLISE")
        >>> split_street("LE VILLAGE")
        (None, 'LE VILLAGE')
    """
    tokens = street.split()
    if len(tokens) < 2 or not _BUILDING_NUMBER.match(tokens[0]):
        return None, " ".join(tokens)

    size = 1
    if len(tokens) > 2 and tokens[1].upper() in REPETITION_INDEXES:
        size = 2
    return " ".join(tokens[:size]), " ".join(tokens[size:])


def join_street(number: str | None, name: str) -> str:
    """Recompose la ligne voie à partir du numéro et du libellé."""
    if number:
        return f"{number} {name}"
    return name


def split_postal(postal: str, country: Country | None = None) -> tuple[str, str]:
    """Découpe la ligne 6 NF Z10-011 en (code postal, localité).

    FR: Pour un pays dont le code postal comporte une espace
        (``SW1A 1AA``, ``1012 AB``), le format national est reconnu en
        premier. Sinon le premier mot doit contenir au moins un chiffre.
        Le reste de la ligne est la localité (y compris une mention
        CEDEX), espaces internes conservées.
    EN: For a country whose postcode contains a space, the national format
        is tried first. Otherwise the first token must contain a digit.
        The rest of the line is the town, inner spaces kept.

    Raises:
        ConversionError: Si la ligne ne commence pas par un code postal
            ou ne contient pas de localité.
    """
    value = postal.strip()
    match = None
    if country in _COUNTRY_POSTAL:
        match = _COUNTRY_POSTAL[country].match(value)
    if match is None:
        match = _POSTAL.match(value)
    if match is None:
        msg = f"Ligne code postal / localité invalide : {postal!r}"
        raise ConversionError(msg, field="postal")
    return match["postcode"], match["town"]


def join_postal(postcode: str, town: str) -> str:
    """Recompose la ligne 6 à partir du code postal et de la localité."""
    return f"{postcode} {town}"


def split_distribution_info(value: str | None) -> tuple[str | None, str | None]:
    """Découpe la ligne 5 NF Z10-011 en (boîte postale, lieu-dit).

    FR: Une mention de boîte postale en tête (BP, CS, TSA, CP suivie d'un
        numéro) devient la boîte postale, le reste le lieu-dit. Sans
        mention, la ligne entière est un lieu-dit.
    EN: A leading postbox marker becomes the postbox and the remainder
        the town location. Without marker the whole line is a town
        location.
    """
    if not value or not value.strip():
        return None, None
    value = value.strip()
    match = _POSTBOX.match(value)
    if match is not None:
        return match["postbox"], match["rest"]
    return None, value


def _fold(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return normalize_whitespace(stripped).upper()


def parse_country(value: str) -> Country:
    """Retrouve le pays à partir de son nom français ou de son code ISO.

    FR: La comparaison ignore la casse et les accents (``Belgique``,
        ``BELGIQUE`` et ``BE`` désignent le même pays).
    EN: Matching is case- and accent-insensitive.

    Raises:
        ConversionError: Si le pays n'est pas dans la table.
    """
    folded = _fold(value)
    if folded in _COUNTRY_BY_NAME:
        return _COUNTRY_BY_NAME[folded]
    try:
        return Country(folded)
    except ValueError:
        msg = f"Pays non supporté : {value!r}"
        raise ConversionError(msg, field="country") from None


def country_name(country: Country) -> str:
    """Retourne le nom français imprimable d'un pays."""
    return FRENCH_COUNTRY_NAMES[country]
