"""
Address Tasks - Stampa e validazione indirizzi da file JSON, calcolo MCD
"""

__version__ = "1.0.0"
__author__ = "Address Tasks"

from .formatter import format_address, format_addresses
from .gcd import InvalidInputError, gcd, gcd_array
from .models import Address, ValidationResult
from .processor import AddressProcessor
from .validator import validate_address, validate_addresses

__all__ = [
    "Address",
    "ValidationResult",
    "AddressProcessor",
    "format_address",
    "format_addresses",
    "validate_address",
    "validate_addresses",
    "gcd",
    "gcd_array",
    "InvalidInputError",
    "__version__",
]
