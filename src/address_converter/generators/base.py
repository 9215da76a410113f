"""Interface abstraite pour les générateurs de documents d'adresse."""

from abc import ABC, abstractmethod
from typing import ClassVar

from address_converter.models.canonical import CanonicalAddress
from address_converter.models.enums import AddressFormat
from address_converter.models.formats import FormattedAddress, render


class GenerationResult:
    """Résultat de la génération d'un document.

    FR: Contient le contenu produit et son type MIME.
    EN: Contains the generated content and its media type.
    """

    def __init__(self, content: bytes, media_type: str) -> None:
        self.content = content
        self.media_type = media_type

    def save(self, path: str) -> None:
        """Sauvegarde le résultat dans un fichier."""
        with open(path, "wb") as f:
            f.write(self.content)


class BaseGenerator(ABC):
    """Classe de base abstraite pour les générateurs.

    FR: Chaque générateur produit un document dans un format cible. Il
        accepte l'objet valeur de ce format, ou toute adresse canonique
        (``ConvertedAddress``, ``Address``) qui est d'abord restituée.
    EN: Each generator produces a document for one target format. It
        accepts that format's value object, or any canonical address
        which is rendered first.
    """

    target_format: ClassVar[AddressFormat]
    media_type: ClassVar[str]

    def generate(self, address: FormattedAddress | CanonicalAddress) -> GenerationResult:
        """Génère le document pour l'adresse.

        Raises:
            ConversionError: Si l'adresse canonique ne peut pas être
                restituée dans le format cible.
            TypeError: Si l'objet valeur n'est pas du format cible.
        """
        if isinstance(address, CanonicalAddress):
            address = render(address, self.target_format)
        return GenerationResult(content=self.generate_bytes(address), media_type=self.media_type)

    @abstractmethod
    def generate_bytes(self, address: FormattedAddress) -> bytes:
        """Produit le contenu brut du document.

        Args:
            address: L'adresse dans le format cible.

        Returns:
            Le contenu en bytes.
        """
        ...
