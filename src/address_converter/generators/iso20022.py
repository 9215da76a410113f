"""Générateur XML ISO 20022 (bloc partie ``<Nm>`` + ``<PstlAdr>``).

FR: Produit le fragment XML d'une partie (créancier, débiteur...) tel
    qu'inséré dans un message pain.001, avec les éléments de
    ``PostalAddress24`` dans l'ordre imposé par le schéma.
EN: Produces the XML fragment of a party as embedded in a pain.001
    message, with ``PostalAddress24`` elements in schema order.
"""

from lxml import etree

from address_converter.generators.base import BaseGenerator
from address_converter.models.enums import AddressFormat
from address_converter.models.iso20022 import IsoAddress

# --- Namespace pain.001.001.09 (PostalAddress24) ---
PAIN_NS = "urn:iso:std:iso:20022:tech:xsd:pain.001.001.09"

# Ordre des éléments de PostalAddress24 -> attribut de IsoPostalAddress
POSTAL_ADDRESS_ELEMENTS: tuple[tuple[str, str], ...] = (
    ("Dept", "department"),
    ("StrtNm", "street_name"),
    ("BldgNb", "building_number"),
    ("Flr", "floor"),
    ("PstBx", "postbox"),
    ("Room", "room"),
    ("PstCd", "postcode"),
    ("TwnNm", "town_name"),
    ("TwnLctnNm", "town_location_name"),
    ("Ctry", "country"),
)


class Iso20022XmlGenerator(BaseGenerator):
    """Générateur du fragment XML ISO 20022 d'une partie.

    FR: ``party_tag`` désigne l'élément englobant (``Cdtr``, ``Dbtr``,
        ``UltmtCdtr``...).
    EN: ``party_tag`` is the enclosing element (``Cdtr``, ``Dbtr``...).
    """

    target_format = AddressFormat.ISO20022
    media_type = "application/xml"

    def __init__(self, party_tag: str = "Cdtr", namespace: str = PAIN_NS) -> None:
        self.party_tag = party_tag
        self.namespace = namespace

    def _qname(self, tag: str) -> str:
        return f"{{{self.namespace}}}{tag}"

    def generate_bytes(self, address: IsoAddress) -> bytes:
        """Génère le XML de la partie."""
        if not isinstance(address, IsoAddress):
            msg = f"IsoAddress attendue, reçu {type(address).__name__}"
            raise TypeError(msg)
        root = self.build_element(address)
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )

    def build_element(self, address: IsoAddress) -> etree._Element:
        """Construit l'élément partie, pour insertion dans un message."""
        root = etree.Element(self._qname(self.party_tag), nsmap={None: self.namespace})
        etree.SubElement(root, self._qname("Nm")).text = address.party_name
        postal = etree.SubElement(root, self._qname("PstlAdr"))
        for tag, attribute in POSTAL_ADDRESS_ELEMENTS:
            value = getattr(address.postal_address, attribute)
            if value:
                etree.SubElement(postal, self._qname(tag)).text = value
        return root
