"""
Stampa leggibile degli indirizzi.
"""

from typing import Iterable, Optional

from .config import SEPARATORE_CAMPI, SEPARATORE_RIGHE
from .models import Address, clean_field, is_blank


def _segment(value: Optional[str]) -> str:
    # I campi mancanti restano come segmento vuoto
    return clean_field(value) or ""


def format_lines(address: Address) -> str:
    """Unisce le righe compilate, saltando quelle vuote o nulle."""
    return SEPARATORE_RIGHE.join(address.filled_lines)


def format_address(address: Address) -> str:
    """
    Restituisce l'indirizzo su una sola riga nel formato:

        <Tipo>: <Riga1, Riga2, ...> - <Città> - <Provincia> - <CAP> - <Paese>

    Args:
        address: Indirizzo da stampare

    Returns:
        Stringa formattata
    """
    country = address.country_name if not is_blank(address.country_name) else address.country
    fields = [
        _segment(address.city),
        _segment(address.province_or_state),
        _segment(address.postal_code),
        _segment(country),
    ]
    head = f"{_segment(address.type)}: {format_lines(address)}"
    return SEPARATORE_CAMPI.join([head] + fields)


def format_addresses(addresses: Iterable[Address]) -> list[str]:
    """Formatta tutti gli indirizzi mantenendo l'ordine."""
    return [format_address(address) for address in addresses]
