"""Interface abstraite des dépôts d'adresses.

FR: Contrat de persistance consommé par le domaine : enregistrement,
    lecture, mise à jour et suppression par identifiant. Chaque opération
    est atomique pour un identifiant donné ; aucune garantie
    transactionnelle n'est attendue au-delà.
EN: Persistence contract consumed by the domain: save, fetch, update and
    delete by identifier. Each operation is atomic for a single
    identifier.
"""

from abc import ABCMeta, abstractmethod
from uuid import UUID

from address_converter.models.address import Address
from address_converter.repository.errors import AddressNotFoundError


def parse_address_id(address_id: UUID | str) -> UUID:
    """Normalise un identifiant reçu sous forme texte ou UUID.

    Raises:
        AddressNotFoundError: Si le texte n'est pas un UUID valide.
    """
    if isinstance(address_id, UUID):
        return address_id
    try:
        return UUID(str(address_id).strip())
    except ValueError:
        raise AddressNotFoundError(address_id) from None


class BaseAddressRepository(metaclass=ABCMeta):
    """Classe de base abstraite pour les dépôts d'adresses.

    FR: Les adaptateurs concrets (mémoire, fichiers JSON) héritent de
        cette classe.
    EN: Concrete adapters (memory, JSON files) inherit from this class.
    """

    @abstractmethod
    def save(self, address: Address) -> None:
        """Enregistre une nouvelle adresse.

        Args:
            address: L'adresse à enregistrer, déjà identifiée.

        Raises:
            AddressAlreadyExistsError: Si l'identifiant est déjà stocké.
            RepositoryIOError: Si le stockage échoue.
        """
        ...

    @abstractmethod
    def fetch(self, address_id: UUID | str) -> Address:
        """Relit une adresse.

        Args:
            address_id: L'identifiant de l'adresse.

        Returns:
            L'adresse stockée.

        Raises:
            AddressNotFoundError: Si l'adresse n'existe pas.
            RepositoryIOError: Si le stockage échoue.
        """
        ...

    @abstractmethod
    def update(self, address_id: UUID | str, address: Address) -> None:
        """Remplace une adresse existante.

        Args:
            address_id: L'identifiant de l'adresse à remplacer.
            address: La nouvelle version, de même identifiant.

        Raises:
            AddressNotFoundError: Si l'adresse n'existe pas.
            ValueError: Si l'identifiant de ``address`` diffère.
            RepositoryIOError: Si le stockage échoue.
        """
        ...

    @abstractmethod
    def delete(self, address_id: UUID | str) -> None:
        """Supprime une adresse.

        Args:
            address_id: L'identifiant de l'adresse.

        Raises:
            AddressNotFoundError: Si l'adresse n'existe pas.
            RepositoryIOError: Si le stockage échoue.
        """
        ...

    @abstractmethod
    def list_ids(self) -> list[UUID]:
        """Liste les identifiants stockés, triés."""
        ...

    @staticmethod
    def _check_identity(address_id: UUID, address: Address) -> None:
        if address.id != address_id:
            msg = f"Identifiant incohérent : {address.id} au lieu de {address_id}"
            raise ValueError(msg)
