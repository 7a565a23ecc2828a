"""
Lettura del file JSON degli indirizzi e scrittura del report errori Excel.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from .models import Address, ValidationResult

logger = logging.getLogger(__name__)


class AddressFileError(ValueError):
    """File indirizzi non leggibile o con struttura non valida."""
    pass


def _label(value: Any, key: str = "name") -> Optional[str]:
    """Estrae l'etichetta da una stringa o da un oggetto {code, name}."""
    if value is None:
        return None
    if isinstance(value, dict):
        other = "code" if key == "name" else "name"
        label = value.get(key) or value.get(other)
        return None if label is None or label == "" else str(label)
    return str(value)


def _postal_code(value: Any) -> Optional[str]:
    """Normalizza il CAP a testo (rimuove .0 se letto come numero)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _address_lines(data: dict) -> tuple[Optional[str], ...]:
    lines = data.get("addressLines")
    if lines is None:
        # Formato originale con righe separate
        detail = data.get("addressLineDetail") or {}
        if not isinstance(detail, dict):
            raise ValueError("addressLineDetail deve essere un oggetto")
        lines = [detail.get("line1"), detail.get("line2")]
    if isinstance(lines, str):
        lines = [lines]
    if not isinstance(lines, (list, tuple)):
        raise ValueError(
            f"addressLines deve essere un array, trovato {type(lines).__name__}"
        )
    return tuple(None if line is None else str(line) for line in lines)


def address_from_dict(data: dict) -> Address:
    """
    Crea un Address da un oggetto JSON.

    Accetta sia il formato piatto (addressLines, city, country come
    stringa) sia quello originale con oggetti {code, name} e
    addressLineDetail.

    Args:
        data: Oggetto JSON dell'indirizzo

    Returns:
        Address corrispondente
    """
    country = data.get("country")
    record_id = data.get("id")

    return Address(
        id=None if record_id is None else str(record_id),
        type=_label(data.get("type")) or "",
        address_lines=_address_lines(data),
        city=_label(data.get("city", data.get("cityOrTown"))),
        province_or_state=_label(data.get("provinceOrState")),
        postal_code=_postal_code(data.get("postalCode")),
        country=_label(country, key="code"),
        country_name=_label(country) if isinstance(country, dict) else None,
        suburb_or_district=_label(data.get("suburbOrDistrict")),
        last_updated=_label(data.get("lastUpdated")),
    )


def read_addresses(file_path: str) -> list[Address]:
    """
    Legge un file JSON contenente un array di indirizzi.

    Args:
        file_path: Percorso del file JSON

    Returns:
        Lista di Address nell'ordine del file

    Raises:
        FileNotFoundError: se il file non esiste
        AddressFileError: se il file non è JSON UTF-8 valido o non contiene
            un array di oggetti indirizzo
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File non trovato: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise AddressFileError(f"JSON non valido in {file_path.name}: {e}") from e

    if not isinstance(data, list):
        raise AddressFileError(
            f"{file_path.name}: atteso un array di indirizzi, trovato {type(data).__name__}"
        )

    addresses = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise AddressFileError(
                f"{file_path.name}: elemento {idx} non è un oggetto indirizzo"
            )
        try:
            addresses.append(address_from_dict(item))
        except ValueError as e:
            raise AddressFileError(f"{file_path.name}: elemento {idx} non valido: {e}") from e

    logger.info(f"Letti {len(addresses)} indirizzi da {file_path.name}")
    return addresses


def write_errors(results: list[ValidationResult], output_path: str):
    """
    Scrive il file degli errori di validazione.

    Colonne:
    - Posizione: posizione dell'indirizzo nel file (1-based)
    - ID: identificativo dell'indirizzo, se presente
    - Indirizzo: indirizzo formattato
    - Regole: codici delle regole violate
    - Motivo: descrizione degli errori

    Args:
        results: Lista risultati (gli indirizzi validi vengono ignorati)
        output_path: Percorso file output (.xlsx)
    """
    error_data = []

    for position, result in enumerate(results, start=1):
        if not result.is_valid:
            error_data.append(
                {
                    "Posizione": position,
                    "ID": result.address.id or "",
                    "Indirizzo": str(result.address),
                    "Regole": ", ".join(result.codes),
                    "Motivo": "; ".join(result.reasons),
                }
            )

    df_errors = pd.DataFrame(
        error_data, columns=["Posizione", "ID", "Indirizzo", "Regole", "Motivo"]
    )

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df_errors.to_excel(writer, index=False, sheet_name="Errori")

        # Adatta larghezza colonne
        worksheet = writer.sheets["Errori"]
        for column in worksheet.columns:
            column_letter = column[0].column_letter
            max_length = max(len(str(cell.value or "")) for cell in column)
            worksheet.column_dimensions[column_letter].width = min(max_length + 2, 80)

    logger.info(f"Report errori scritto in {output_path} ({len(error_data)} righe)")
