"""
Entry point CLI per il formattatore/validatore di indirizzi.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import ADDRESSES_FILE, LOG_LEVEL
from .gcd import InvalidInputError, gcd_array
from .processor import AddressProcessor


def _log_level(verbose: bool):
    """Livello di logging da -v o da LOG_LEVEL (WARNING se non riconosciuto)."""
    if verbose:
        return logging.DEBUG
    if isinstance(logging.getLevelName(LOG_LEVEL), int):
        return LOG_LEVEL
    return logging.WARNING


def main(argv=None):
    """Entry point principale."""
    parser = argparse.ArgumentParser(
        description="Stampa e validazione indirizzi da file JSON, calcolo MCD",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Esempi:
  %(prog)s addresses.json                 Stampa e valida gli indirizzi
  %(prog)s                                Usa il file ADDRESSES_FILE (default: addresses.json)
  %(prog)s addresses.json -o errori.xlsx  Scrive anche il report errori
  %(prog)s --gcd 12 18 24                 Calcola il MCD dei numeri indicati

Regole di validazione:
  - CAP presente e composto solo da cifre
  - Paese presente
  - Almeno una riga indirizzo compilata
  - Provincia obbligatoria se il paese è ZA
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        help=f"File JSON da elaborare (default: {ADDRESSES_FILE})",
    )

    parser.add_argument(
        "--report", "-o",
        help="File .xlsx in cui scrivere gli indirizzi non validi",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Elabora senza scrivere il report",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Mostra informazioni dettagliate durante l'elaborazione",
    )

    parser.add_argument(
        "--gcd",
        nargs="*",
        type=int,
        metavar="N",
        help="Calcola il MCD degli interi indicati invece di elaborare indirizzi",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Modalità MCD
    if args.gcd is not None:
        try:
            print(gcd_array(args.gcd))
        except InvalidInputError as e:
            print(f"ERRORE: {e}")
            sys.exit(1)
        sys.exit(0)

    file_path = Path(args.file or ADDRESSES_FILE)
    if not file_path.exists():
        print(f"ERRORE: File non trovato: {file_path}")
        sys.exit(1)

    try:
        processor = AddressProcessor(verbose=args.verbose)
        stats = processor.process_file(
            str(file_path),
            report_path=args.report,
            dry_run=args.dry_run,
        )

        print(f"\nElaborazione completata!")
        if stats.get("output_errors"):
            print(f"  Errori: {Path(stats['output_errors']).name}")

    except Exception as e:
        print(f"ERRORE: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
