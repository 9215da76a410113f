"""Générateurs de documents d'adresse (XML ISO 20022, étiquette NF Z10-011)."""

from address_converter.generators.base import BaseGenerator, GenerationResult
from address_converter.generators.iso20022 import Iso20022XmlGenerator
from address_converter.generators.label import LabelGenerator

__all__ = [
    "BaseGenerator",
    "GenerationResult",
    "Iso20022XmlGenerator",
    "LabelGenerator",
]
