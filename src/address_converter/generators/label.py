"""Générateur d'étiquette NF Z10-011 (texte brut).

FR: Une ligne par ligne d'adresse non vide, dans l'ordre de la norme,
    séparées par des fins de ligne.
EN: One line per non-empty address line, in standard order.
"""

from address_converter.generators.base import BaseGenerator
from address_converter.models.enums import AddressFormat
from address_converter.models.french import FrenchAddress


class LabelGenerator(BaseGenerator):
    """Générateur d'étiquette postale NF Z10-011."""

    target_format = AddressFormat.FRENCH
    media_type = "text/plain; charset=utf-8"

    def generate_bytes(self, address: FrenchAddress) -> bytes:
        """Génère le texte de l'étiquette."""
        if not isinstance(address, FrenchAddress):
            msg = f"FrenchAddress attendue, reçu {type(address).__name__}"
            raise TypeError(msg)
        return ("\n".join(address.lines()) + "\n").encode("utf-8")
