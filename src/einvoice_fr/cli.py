"""Points d'entrée CLI pour einvoice-fr."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable, Sequence

from pydantic import BaseModel

from einvoice_fr.validators import (
    validate_french_iban,
    validate_french_phone,
    validate_french_postal_code,
    validate_french_vat,
    validate_siren,
    validate_siret,
)


CHECKS: dict[str, Callable[[str], BaseModel]] = {
    "siren": validate_siren,
    "siret": validate_siret,
    "vat": validate_french_vat,
    "iban": validate_french_iban,
    "postal-code": validate_french_postal_code,
    "phone": validate_french_phone,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="einvoice-validate",
        description="Valide un identifiant d'entreprise française.",
    )
    parser.add_argument("kind", choices=sorted(CHECKS), help="Type d'identifiant")
    parser.add_argument("value", help="Valeur à contrôler")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Exécute la validation et retourne le code de sortie (0 si valide)."""
    args = build_parser().parse_args(argv)
    result = CHECKS[args.kind](args.value)
    payload = result.model_dump(mode="json")
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if payload["is_valid"] else 1


def validate() -> None:
    """Point d'entrée pour la commande `einvoice-validate`."""
    sys.exit(run())
