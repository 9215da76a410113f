"""Hiérarchie d'exceptions pour les dépôts d'adresses.

FR: Exceptions typées pour les adresses introuvables, les doublons
    d'identifiant et les échecs d'entrée/sortie du stockage.
EN: Typed exceptions for missing addresses, duplicate identifiers and
    storage I/O failures.
"""


class RepositoryError(Exception):
    """Erreur de base pour toutes les opérations de dépôt.

    FR: Classe parente de toutes les exceptions levées par un dépôt.
    EN: Base class for all repository exceptions.
    """


class AddressNotFoundError(RepositoryError):
    """Identifiant absent du stockage.

    FR: Levée par ``fetch``, ``update`` et ``delete``, y compris pour un
        identifiant mal formé.
    EN: Raised by ``fetch``, ``update`` and ``delete``, including for a
        malformed identifier.
    """

    def __init__(self, address_id: object) -> None:
        super().__init__(f"Adresse introuvable : {address_id}")
        self.address_id = address_id


class AddressAlreadyExistsError(RepositoryError):
    """Identifiant déjà présent lors d'un ``save``."""

    def __init__(self, address_id: object) -> None:
        super().__init__(f"Adresse déjà enregistrée : {address_id}")
        self.address_id = address_id


class RepositoryIOError(RepositoryError):
    """Échec du support de stockage.

    FR: Erreur opaque de l'adaptateur (disque, permissions, enregistrement
        illisible). L'exception d'origine est chaînée en ``__cause__``.
    EN: Opaque adapter failure. The original exception is chained as
        ``__cause__``.
    """
