"""Configuration par variables d'environnement.

FR: Helper pour accéder aux paramètres de l'outil (répertoire de stockage,
    niveau de log). Fournit des valeurs par défaut et un instanciateur du
    dépôt configuré.
EN: Helper for accessing tool settings (storage directory, log level).
    Provides defaults and a factory for the configured repository.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from address_converter.repository.connectors.json_file import JsonAddressRepository

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, str] = {
    "STORAGE_DIR": "./json_storage",
    "LOG_LEVEL": "WARNING",
}

# Nom du paramètre -> variable d'environnement
ENVIRONMENT_VARIABLES: dict[str, str] = {
    "STORAGE_DIR": "STORAGE_DIR",
    "LOG_LEVEL": "ADDRESS_CONVERTER_LOG_LEVEL",
}


def get_setting(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Retourne la valeur d'un paramètre.

    FR: Cherche la variable d'environnement associée, puis les défauts.
        Une variable vide est ignorée.
    EN: Looks up the associated environment variable, then the defaults.

    Raises:
        KeyError: Si le paramètre est inconnu.
    """
    if name not in DEFAULTS:
        msg = f"Paramètre inconnu : {name}"
        raise KeyError(msg)
    env = os.environ if environ is None else environ
    value = env.get(ENVIRONMENT_VARIABLES[name], "").strip()
    return value or DEFAULTS[name]


def get_log_level(environ: Mapping[str, str] | None = None) -> int:
    """Retourne le niveau de log configuré (WARNING si invalide)."""
    name = get_setting("LOG_LEVEL", environ).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Niveau de log inconnu %r, WARNING utilisé", name)
        return logging.WARNING
    return level


def get_repository(environ: Mapping[str, str] | None = None) -> JsonAddressRepository:
    """Instancie le dépôt JSON sur le répertoire configuré.

    Raises:
        RepositoryIOError: Si le répertoire ne peut pas être créé.
    """
    directory = get_setting("STORAGE_DIR", environ)
    logger.debug("Stockage des adresses dans %s", directory)
    return JsonAddressRepository(directory)
