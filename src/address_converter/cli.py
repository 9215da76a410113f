"""Point d'entrée CLI ``address-converter``.

FR: Commandes ``save``, ``update``, ``delete``, ``fetch``, ``convert`` et
    ``list``. Le répertoire de stockage est lu dans ``STORAGE_DIR``.
    Code de sortie 0 en cas de succès, 1 sur erreur de validation, de
    conversion ou de stockage, 2 sur erreur d'usage.
EN: ``save``, ``update``, ``delete``, ``fetch``, ``convert`` and ``list``
    commands. Exit code 0 on success, 1 on validation, conversion or
    storage error, 2 on usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from address_converter import __version__
from address_converter.config import get_log_level, get_repository
from address_converter.errors import ConversionError
from address_converter.generators import Iso20022XmlGenerator, LabelGenerator
from address_converter.models.enums import AddressFormat
from address_converter.models.formats import FormattedAddress
from address_converter.repository.errors import RepositoryError
from address_converter.service import AddressService

logger = logging.getLogger(__name__)

_FORMATS = [fmt.value for fmt in AddressFormat]
_OUTPUTS = ["json", "xml", "text"]


def build_parser() -> argparse.ArgumentParser:
    """Construit l'analyseur d'arguments."""
    parser = argparse.ArgumentParser(
        prog="address-converter",
        description="Conversion et gestion d'adresses postales (NF Z10-011 / ISO 20022)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    save = commands.add_parser("save", help="Enregistre une nouvelle adresse")
    _add_address_arguments(save)

    update = commands.add_parser("update", help="Met à jour une adresse existante")
    update.add_argument("id", help="UUID de l'adresse à mettre à jour")
    _add_address_arguments(update)

    delete = commands.add_parser("delete", help="Supprime une adresse")
    delete.add_argument("id", help="UUID de l'adresse à supprimer")

    fetch = commands.add_parser("fetch", help="Affiche une adresse dans le format demandé")
    fetch.add_argument("id", help="UUID de l'adresse à afficher")
    _add_output_arguments(fetch)

    convert = commands.add_parser("convert", help="Convertit une adresse sans l'identifier")
    _add_address_arguments(convert)
    _add_output_arguments(convert)
    convert.add_argument(
        "--save",
        action="store_true",
        help="Enregistre l'adresse si la conversion réussit",
    )

    commands.add_parser("list", help="Liste les identifiants enregistrés")
    return parser


def _add_address_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--address", required=True, help="Adresse au format JSON")
    parser.add_argument(
        "--from-format",
        choices=_FORMATS,
        default=None,
        help="Format d'entrée : 'french' ou 'iso20022' (deviné si absent)",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", required=True, choices=_FORMATS, help="Format de sortie")
    parser.add_argument(
        "--output",
        choices=_OUTPUTS,
        default="json",
        help="Rendu : json, xml (iso20022) ou text (étiquette french)",
    )


def render_output(address: FormattedAddress, output: str) -> str:
    """Sérialise l'adresse convertie selon le rendu demandé."""
    if output == "xml":
        return Iso20022XmlGenerator().generate(address).content.decode("utf-8").rstrip("\n")
    if output == "text":
        return LabelGenerator().generate(address).content.decode("utf-8").rstrip("\n")
    return address.model_dump_json(indent=2, exclude_none=True)


def _check_output(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.output == "xml" and args.format != AddressFormat.ISO20022:
        parser.error("--output xml n'est disponible qu'avec --format iso20022")
    if args.output == "text" and args.format != AddressFormat.FRENCH:
        parser.error("--output text n'est disponible qu'avec --format french")


def run_command(args: argparse.Namespace, service: AddressService) -> None:
    """Exécute la commande analysée.

    Raises:
        ValidationError: Si l'adresse fournie est invalide.
        ConversionError: Si la conversion échoue.
        RepositoryError: Si le stockage échoue.
    """
    if args.command == "save":
        address = service.save(args.address, args.from_format)
        print(f"Adresse enregistrée avec l'identifiant : {address.id}")
    elif args.command == "update":
        address = service.update(args.id, args.address, args.from_format)
        print(f"Adresse mise à jour : {address.id}")
    elif args.command == "delete":
        service.delete(args.id)
        print(f"Adresse supprimée : {args.id}")
    elif args.command == "fetch":
        result = service.fetch_format(args.id, args.format)
        print(render_output(result, args.output))
    elif args.command == "convert":
        result, address = service.convert(
            args.address,
            args.format,
            args.from_format,
            save=args.save,
        )
        print(render_output(result, args.output))
        if address is not None:
            print(f"Adresse enregistrée avec l'identifiant : {address.id}", file=sys.stderr)
    elif args.command == "list":
        for address_id in service.list_ids():
            print(address_id)


def main(argv: Sequence[str] | None = None, service: AddressService | None = None) -> int:
    """Analyse les arguments, exécute la commande et retourne le code de sortie."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command in ("fetch", "convert"):
        _check_output(parser, args)

    try:
        if service is None:
            service = AddressService(get_repository())
        run_command(args, service)
    except ValidationError as exc:
        print(f"Erreur : adresse invalide\n{exc}", file=sys.stderr)
        return 1
    except (ConversionError, RepositoryError) as exc:
        logger.debug("Commande %s en échec", args.command, exc_info=True)
        print(f"Erreur : {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Point d'entrée de la commande ``address-converter``."""
    sys.exit(main())
