"""Dépôt d'adresses sur disque, un fichier JSON par adresse.

FR: Chaque adresse est écrite dans ``<répertoire>/<uuid>.json`` sous la
    forme ``{"id": ..., "address": {...}}``. L'écriture passe par un
    fichier temporaire renommé atomiquement, de sorte qu'un lecteur ne voit
    jamais un enregistrement partiel.
EN: Each address is written to ``<directory>/<uuid>.json`` as
    ``{"id": ..., "address": {...}}``. Writes go through a temporary file
    atomically renamed, so readers never see a partial record.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, ValidationError

from address_converter.models.address import Address
from address_converter.repository.base import BaseAddressRepository, parse_address_id
from address_converter.repository.errors import (
    AddressAlreadyExistsError,
    AddressNotFoundError,
    RepositoryIOError,
)

logger = logging.getLogger(__name__)


class StoredAddress(BaseModel):
    """Enregistrement tel qu'écrit sur disque."""

    id: UUID
    address: Address


class JsonAddressRepository(BaseAddressRepository):
    """Dépôt d'adresses en fichiers JSON.

    FR: Le répertoire est créé s'il n'existe pas. Les erreurs système
        sont remontées en ``RepositoryIOError``.
    EN: The directory is created if missing. System errors surface as
        ``RepositoryIOError``.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Répertoire de stockage inaccessible : {self.directory}"
            raise RepositoryIOError(msg) from exc

    def _path(self, address_id: UUID) -> Path:
        return self.directory / f"{address_id}.json"

    def _existing_path(self, address_id: UUID | str) -> Path:
        """Retourne le chemin de l'enregistrement ou lève AddressNotFoundError."""
        path = self._path(parse_address_id(address_id))
        if not path.is_file():
            raise AddressNotFoundError(address_id)
        return path

    def _write(self, address: Address) -> None:
        record = StoredAddress(id=address.id, address=address)
        payload = record.model_dump_json(indent=2, exclude_none=True)
        target = self._path(address.id)
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory,
                prefix=f".{address.id}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Écriture impossible : {target}"
            raise RepositoryIOError(msg) from exc

    # --- Opérations du dépôt ---

    def save(self, address: Address) -> None:
        """Écrit une nouvelle adresse sur disque."""
        if self._path(address.id).exists():
            raise AddressAlreadyExistsError(address.id)
        self._write(address)
        logger.info("Adresse %s enregistrée dans %s", address.id, self.directory)

    def fetch(self, address_id: UUID | str) -> Address:
        """Relit une adresse depuis son fichier JSON."""
        path = self._existing_path(address_id)
        try:
            record = StoredAddress.model_validate_json(path.read_bytes())
        except OSError as exc:
            msg = f"Lecture impossible : {path}"
            raise RepositoryIOError(msg) from exc
        except ValidationError as exc:
            msg = f"Enregistrement illisible : {path}"
            raise RepositoryIOError(msg) from exc

        if record.id != record.address.id or path.stem != str(record.id):
            msg = f"Enregistrement incohérent : {path}"
            raise RepositoryIOError(msg)
        return record.address

    def update(self, address_id: UUID | str, address: Address) -> None:
        """Réécrit le fichier d'une adresse existante."""
        path = self._existing_path(address_id)
        self._check_identity(UUID(path.stem), address)
        self._write(address)
        logger.info("Adresse %s mise à jour", address.id)

    def delete(self, address_id: UUID | str) -> None:
        """Supprime le fichier d'une adresse."""
        path = self._existing_path(address_id)
        try:
            path.unlink()
        except FileNotFoundError:
            raise AddressNotFoundError(address_id) from None
        except OSError as exc:
            msg = f"Suppression impossible : {path}"
            raise RepositoryIOError(msg) from exc
        logger.info("Adresse %s supprimée", path.stem)

    def list_ids(self) -> list[UUID]:
        """Liste les identifiants stockés, triés."""
        ids: list[UUID] = []
        for path in self.directory.glob("*.json"):
            try:
                ids.append(UUID(path.stem))
            except ValueError:
                logger.warning("Fichier ignoré dans le stockage : %s", path.name)
        return sorted(ids)
