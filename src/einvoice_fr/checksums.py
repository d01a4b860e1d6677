"""Primitives de clés de contrôle (Luhn, modulo 97).

FR: Algorithmes purs utilisés par les validateurs d'identifiants.
    Luhn : les chiffres sont parcourus de droite à gauche, un chiffre sur
    deux (positions impaires depuis la droite, la plus à droite étant 0)
    est doublé, et un doublé supérieur à 9 est réduit de 9.
    La réduction « somme des chiffres » (d - 9) et la réduction
    « +1 sur dépassement » ((d % 10) + 1) donnent le même résultat pour
    tout doublé entre 10 et 18 : une seule règle est donc retenue.
EN: Pure algorithms used by the identifier validators.
    Luhn: digits are processed right to left, every second digit (odd
    positions from the right, rightmost being 0) is doubled, and a doubled
    value above 9 is reduced by 9.
"""

from collections.abc import Iterable


def _as_digits(digits: str | Iterable[int]) -> list[int]:
    if isinstance(digits, str):
        return [int(ch) for ch in digits]
    return list(digits)


def luhn_digit_sum(
    digits: str | Iterable[int],
    double_odd_from_right: bool = True,
) -> int:
    """Somme de Luhn d'une suite de chiffres.

    Args:
        digits: Chiffres 0-9 (chaîne ou itérable d'entiers).
        double_odd_from_right: Doubler les positions impaires depuis la
            droite (Luhn standard). ``False`` double les positions paires,
            ce qui sert au calcul d'une clé sur une charge utile sans clé.

    Returns:
        La somme pondérée.
    """
    total = 0
    for position, digit in enumerate(reversed(_as_digits(digits))):
        if (position % 2 == 1) == double_odd_from_right:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total


def luhn_is_valid(digits: str | Iterable[int]) -> bool:
    """Vrai si la suite complète (clé incluse) passe le contrôle de Luhn."""
    return luhn_digit_sum(digits) % 10 == 0


def luhn_check_digit(payload: str | Iterable[int]) -> int:
    """Calcule la clé de Luhn à ajouter à droite de ``payload``."""
    total = luhn_digit_sum(payload, double_odd_from_right=False)
    return (10 - total % 10) % 10


def mod97(numeral: str) -> int:
    """Reste de la division par 97 d'un grand nombre décimal.

    FR: Calcul chiffre par chiffre, sans convertir le nombre entier.
    EN: Digit-by-digit computation, without converting the whole number.
    """
    remainder = 0
    for ch in numeral:
        remainder = (remainder * 10 + int(ch)) % 97
    return remainder


def iban_numeral(iban: str) -> str:
    """Forme numérique d'un IBAN (ISO 13616).

    FR: Les 4 premiers caractères passent en fin de chaîne, puis chaque
        lettre est remplacée par sa position dans l'alphabet + 9 (A=10 … Z=35).
    EN: The first 4 characters move to the end, then each letter becomes its
        alphabet position + 9 (A=10 … Z=35).
    """
    rearranged = iban[4:] + iban[:4]
    return "".join(
        str(ord(ch) - ord("A") + 10) if ch.isalpha() else ch for ch in rearranged
    )
