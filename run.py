#!/usr/bin/env python3
"""
Script di avvio rapido per il formattatore/validatore di indirizzi.

Uso:
    python run.py addresses.json              # Stampa e valida gli indirizzi
    python run.py                             # Usa ADDRESSES_FILE o addresses.json
    python run.py addresses.json -o err.xlsx  # Scrive anche il report errori
    python run.py --gcd 12 18                 # Calcola il MCD
    python run.py --help                      # Mostra aiuto
"""

from address_tasks.main import main

if __name__ == "__main__":
    main()
