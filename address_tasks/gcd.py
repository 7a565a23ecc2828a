"""
Massimo comun divisore di una sequenza di interi.
"""

from typing import Iterable


class InvalidInputError(ValueError):
    """Sequenza di interi vuota."""
    pass


def gcd(a: int, b: int) -> int:
    """
    Calcola il MCD di due interi con l'algoritmo di Euclide.

    I valori negativi sono normalizzati al valore assoluto,
    gcd(x, 0) vale abs(x) e gcd(0, 0) vale 0.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def gcd_array(values: Iterable[int]) -> int:
    """
    Calcola il MCD di una sequenza di interi.

    Args:
        values: Interi da ridurre (almeno uno)

    Returns:
        MCD positivo, oppure 0 se tutti i valori sono zero

    Raises:
        InvalidInputError: se la sequenza è vuota
    """
    values = list(values)
    if not values:
        raise InvalidInputError("Serve almeno un intero per calcolare il MCD")

    result = abs(values[0])
    for value in values[1:]:
        result = gcd(result, value)

    return result
