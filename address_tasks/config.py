"""
Configurazione per il formattatore/validatore di indirizzi.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Carica .env dalla directory del progetto
_env_path = Path(__file__).parent.parent / ".env"
load_dotenv(_env_path)

# File indirizzi usato dalla CLI se non viene indicato un percorso
ADDRESSES_FILE = os.environ.get("ADDRESSES_FILE", "addresses.json")

# Livello di logging (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

# Paese per cui la provincia è obbligatoria (confronto esatto)
PAESE_PROVINCIA_OBBLIGATORIA = "ZA"

# Separatori usati nella stampa degli indirizzi
SEPARATORE_RIGHE = ", "
SEPARATORE_CAMPI = " - "

# Messaggi per ogni regola di validazione violata
MESSAGGI_ERRORE = {
    "POSTAL_CODE": "CAP mancante o non numerico",
    "COUNTRY": "Paese mancante",
    "ADDRESS_LINES": "Nessuna riga indirizzo valida (almeno una riga deve essere compilata)",
    "PROVINCE_ZA": f"Provincia obbligatoria per il paese {PAESE_PROVINCIA_OBBLIGATORIA}",
}
