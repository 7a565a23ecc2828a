"""
Modelli dati per il formattatore/validatore di indirizzi.
"""

from dataclasses import dataclass, field
from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """
    Indica se un campo opzionale è da considerare mancante.

    None, stringa vuota e stringa di soli spazi sono equivalenti.
    """
    return value is None or not str(value).strip()


def clean_field(value: Optional[str]) -> Optional[str]:
    """Restituisce il valore senza spazi esterni, oppure None se mancante."""
    if is_blank(value):
        return None
    return str(value).strip()


@dataclass(frozen=True)
class Address:
    """Rappresenta un indirizzo caricato dal file."""

    type: str
    address_lines: tuple[Optional[str], ...] = ()
    city: Optional[str] = None
    province_or_state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None  # codice (es. "ZA") o nome
    id: Optional[str] = None
    country_name: Optional[str] = None  # nome leggibile, se disponibile
    suburb_or_district: Optional[str] = None
    last_updated: Optional[str] = None

    @property
    def filled_lines(self) -> list[str]:
        """Righe indirizzo compilate, nell'ordine originale."""
        return [line.strip() for line in self.address_lines if not is_blank(line)]

    def __str__(self) -> str:
        from .formatter import format_address

        return format_address(self)


@dataclass(frozen=True)
class RuleViolation:
    """Regola di validazione non rispettata."""

    code: str  # POSTAL_CODE, COUNTRY, ADDRESS_LINES, PROVINCE_ZA
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Risultato della validazione di un indirizzo."""

    address: Address
    violations: tuple[RuleViolation, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def status(self) -> str:
        return "OK" if self.is_valid else "INVALID"

    @property
    def codes(self) -> list[str]:
        """Codici delle regole violate, in ordine."""
        return [v.code for v in self.violations]

    @property
    def reasons(self) -> list[str]:
        """Messaggi delle regole violate, in ordine."""
        return [v.message for v in self.violations]

    def __str__(self) -> str:
        if self.is_valid:
            return f"[OK] {self.address}"
        return f"[{self.status}] {self.address}: {'; '.join(self.reasons)}"


@dataclass(frozen=True)
class ProcessedAddress:
    """Indirizzo stampato abbinato al suo esito di validazione."""

    formatted: str
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid
