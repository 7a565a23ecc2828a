"""
Validazione degli indirizzi tramite una lista ordinata di regole.

Ogni regola è una coppia (codice, predicato). Tutte le regole vengono
valutate, senza interrompersi al primo errore, così l'esito riporta ogni
violazione nell'ordine fisso della lista.
"""

import re
from typing import Callable, Iterable

from .config import MESSAGGI_ERRORE, PAESE_PROVINCIA_OBBLIGATORIA
from .models import Address, RuleViolation, ValidationResult, is_blank

_CAP_RE = re.compile(r"\d+")


def has_valid_postal_code(address: Address) -> bool:
    """Il CAP deve essere presente e composto solo da cifre."""
    if address.postal_code is None:
        return False
    return bool(_CAP_RE.fullmatch(address.postal_code))


def has_country(address: Address) -> bool:
    return not is_blank(address.country)


def has_address_line(address: Address) -> bool:
    """Almeno una riga indirizzo deve essere compilata."""
    return bool(address.filled_lines)


def has_valid_province(address: Address) -> bool:
    """La provincia è obbligatoria solo per il paese configurato."""
    if address.country != PAESE_PROVINCIA_OBBLIGATORIA:
        return True
    return not is_blank(address.province_or_state)


RULES: list[tuple[str, Callable[[Address], bool]]] = [
    ("POSTAL_CODE", has_valid_postal_code),
    ("COUNTRY", has_country),
    ("ADDRESS_LINES", has_address_line),
    ("PROVINCE_ZA", has_valid_province),
]


def validate_address(address: Address) -> ValidationResult:
    """
    Valida un indirizzo applicando tutte le regole.

    Args:
        address: Indirizzo da validare

    Returns:
        ValidationResult con una violazione per ogni regola non rispettata
    """
    violations = tuple(
        RuleViolation(code=code, message=MESSAGGI_ERRORE[code])
        for code, predicate in RULES
        if not predicate(address)
    )
    return ValidationResult(address=address, violations=violations)


def validate_addresses(addresses: Iterable[Address]) -> list[ValidationResult]:
    """Valida tutti gli indirizzi mantenendo l'ordine."""
    return [validate_address(address) for address in addresses]


def error_messages(results: Iterable[ValidationResult]) -> list[str]:
    """
    Genera una riga di report per ogni indirizzo non valido.

    L'indirizzo è identificato dal suo id, oppure dalla posizione
    (1-based) se l'id manca.
    """
    messages = []
    for position, result in enumerate(results, start=1):
        if result.is_valid:
            continue
        identity = result.address.id if not is_blank(result.address.id) else f"#{position}"
        messages.append(
            f"Indirizzo {identity} non valido. Errori di validazione: {'; '.join(result.reasons)}"
        )
    return messages
