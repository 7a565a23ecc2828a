"""
Orchestratore elaborazione file indirizzi.
"""

import logging
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .file_io import read_addresses, write_errors
from .formatter import format_address
from .models import Address, ProcessedAddress
from .validator import error_messages, validate_address

logger = logging.getLogger(__name__)


class AddressProcessor:
    """Processore principale: stampa e valida ogni indirizzo."""

    def __init__(self, verbose: bool = False):
        """
        Inizializza il processore.

        Args:
            verbose: Se True, stampa l'esito di ogni indirizzo
        """
        self.verbose = verbose

    def process_file(
        self,
        file_path: str,
        report_path: Optional[str] = None,
        dry_run: bool = False,
    ) -> dict:
        """
        Elabora un file JSON di indirizzi.

        Args:
            file_path: Percorso del file da elaborare
            report_path: Percorso del report errori .xlsx (opzionale)
            dry_run: Se True, non scrive il report

        Returns:
            Dizionario con statistiche elaborazione
        """
        file_path = Path(file_path)

        print(f"\n{'='*60}")
        print(f"Elaborazione: {file_path.name}")
        print(f"{'='*60}")

        addresses = read_addresses(str(file_path))
        print(f"Indirizzi letti: {len(addresses)}")

        processed = self.process_addresses(addresses)

        print(f"\n{'─'*40}")
        print("INDIRIZZI")
        print(f"{'─'*40}")
        for item in processed:
            print(item.formatted)

        results = [item.result for item in processed]
        messages = error_messages(results)
        if messages:
            print(f"\n{'─'*40}")
            print("ERRORI DI VALIDAZIONE")
            print(f"{'─'*40}")
            for message in messages:
                print(message)

        stats = self._compute_stats(processed)
        stats["file"] = str(file_path)
        self._print_stats(stats)

        stats["output_errors"] = None
        if report_path and not dry_run and stats["invalid"]:
            write_errors(results, report_path)
            print(f"\nFile errori: {Path(report_path).name}")
            stats["output_errors"] = str(report_path)
        elif report_path and dry_run:
            print("\n[DRY RUN] Nessun file scritto")

        return stats

    def process_addresses(self, addresses: list[Address]) -> list[ProcessedAddress]:
        """Formatta e valida tutti gli indirizzi con progress bar."""
        processed = []

        with tqdm(total=len(addresses), desc="Validazione", unit="ind") as pbar:
            for position, address in enumerate(addresses, start=1):
                item = ProcessedAddress(
                    formatted=format_address(address),
                    result=validate_address(address),
                )
                processed.append(item)
                pbar.update(1)

                if not item.is_valid:
                    logger.debug(f"Indirizzo #{position} non valido: {item.result.codes}")

                if self.verbose:
                    status_icon = "✓" if item.is_valid else "✗"
                    tqdm.write(f"  {status_icon} #{position}: {item.result.status}")

        return processed

    def _compute_stats(self, processed: list[ProcessedAddress]) -> dict:
        """Calcola statistiche elaborazione."""
        total = len(processed)
        valid = sum(1 for p in processed if p.is_valid)
        invalid = total - valid

        # Raggruppa errori per regola
        errors_by_rule = {}
        for p in processed:
            for code in p.result.codes:
                errors_by_rule[code] = errors_by_rule.get(code, 0) + 1

        return {
            "total": total,
            "valid": valid,
            "invalid": invalid,
            "valid_percent": (valid / total * 100) if total > 0 else 0,
            "errors_by_rule": errors_by_rule,
        }

    def _print_stats(self, stats: dict):
        """Stampa statistiche a console."""
        print(f"\n{'─'*40}")
        print("RIEPILOGO")
        print(f"{'─'*40}")
        print(f"Totale indirizzi:  {stats['total']}")
        print(f"Validi:            {stats['valid']} ({stats['valid_percent']:.1f}%)")
        print(f"Non validi:        {stats['invalid']}")

        if stats["errors_by_rule"]:
            print(f"\nErrori per regola:")
            for code, count in sorted(
                stats["errors_by_rule"].items(), key=lambda x: -x[1]
            ):
                print(f"  {code}: {count}")
