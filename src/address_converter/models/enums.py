"""Énumérations pour la conversion d'adresses.

FR: Formats supportés, variantes d'adresse et pays de la table de
    correspondance nom français <-> code ISO 3166-1 alpha-2.
EN: Supported formats, address variants and the countries of the
    French name <-> ISO 3166-1 alpha-2 lookup table.
"""

from enum import StrEnum


class AddressFormat(StrEnum):
    """Format d'échange d'une adresse.

    FR: Ensemble fermé : aucun troisième format n'est prévu.
    EN: Closed set: no third format is planned.
    """

    FRENCH = "french"
    """Norme française NF Z10-011 / French standard NF Z10-011"""

    ISO20022 = "iso20022"
    """Adresse postale structurée ISO 20022 / ISO 20022 structured postal address"""


class AddressKind(StrEnum):
    """Variante d'adresse (particulier ou entreprise)."""

    INDIVIDUAL = "individual"
    """Particulier / Individual"""

    BUSINESS = "business"
    """Entreprise / Business"""


class Country(StrEnum):
    """Pays supportés (ISO 3166-1 alpha-2).

    FR: La valeur est le code ISO ; le nom français associé est donné par
        ``FRENCH_COUNTRY_NAMES``.
    EN: The value is the ISO code; the French name is given by
        ``FRENCH_COUNTRY_NAMES``.
    """

    FRANCE = "FR"
    BELGIUM = "BE"
    SWITZERLAND = "CH"
    LUXEMBOURG = "LU"
    MONACO = "MC"
    ANDORRA = "AD"
    GERMANY = "DE"
    SPAIN = "ES"
    ITALY = "IT"
    UNITED_KINGDOM = "GB"
    NETHERLANDS = "NL"
    PORTUGAL = "PT"


# Table bijective code ISO -> nom du pays tel qu'imprimé sur la ligne 7
FRENCH_COUNTRY_NAMES: dict[Country, str] = {
    Country.FRANCE: "FRANCE",
    Country.BELGIUM: "BELGIQUE",
    Country.SWITZERLAND: "SUISSE",
    Country.LUXEMBOURG: "LUXEMBOURG",
    Country.MONACO: "MONACO",
    Country.ANDORRA: "ANDORRE",
    Country.GERMANY: "ALLEMAGNE",
    Country.SPAIN: "ESPAGNE",
    Country.ITALY: "ITALIE",
    Country.UNITED_KINGDOM: "ROYAUME-UNI",
    Country.NETHERLANDS: "PAYS-BAS",
    Country.PORTUGAL: "PORTUGAL",
}
