"""Exceptions du domaine de conversion d'adresses.

FR: Les erreurs de saisie (champ obligatoire absent, variante incohérente,
    JSON mal formé) sont des ``pydantic.ValidationError`` levées à la
    construction des objets valeur. Les erreurs de correspondance entre
    formats sont des ``ConversionError``.
EN: Input errors are ``pydantic.ValidationError`` raised at value object
    construction. Mapping errors between formats are ``ConversionError``.
"""

from pydantic import ValidationError

__all__ = ["ConversionError", "ValidationError"]


class ConversionError(Exception):
    """Conversion impossible entre le format canonique et un format cible.

    FR: Levée quand les données canoniques ne satisfont pas les champs
        obligatoires du format cible, ou quand un pays n'a pas d'entrée
        dans la table de correspondance.
    EN: Raised when canonical data cannot satisfy the target format's
        mandatory fields, or when a country has no lookup entry.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def from_validation_error(cls, error: ValidationError, target: str) -> "ConversionError":
        """Traduit le premier échec de validation du format cible."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        msg = f"Adresse {target} non constructible ({field or 'modèle'}) : {first['msg']}"
        return cls(msg, field=field)
