# bag_errors.py
"""
Eccezioni della libreria.

  BagError (base)
  ├── CapacityExceededError - capacità iniziale o di crescita oltre il massimo
  └── BagIntegrityError     - bag usata senza che la costruzione sia terminata

Una bag vuota o un elemento non trovato NON sono errori: in quei casi i metodi
ritornano None / False.
"""


class BagError(Exception):
    """Base di tutti gli errori sollevati dalle bag."""


class CapacityExceededError(BagError):
    def __init__(self, requested: int, maximum: int):
        self.requested = requested
        self.maximum = maximum
        super().__init__(
            f"Attempted to create a bag whose capacity ({requested}) exceeds "
            f"allowed maximum of {maximum}"
        )


class BagIntegrityError(BagError):
    def __init__(self, message: str = "ArrayBag object is corrupt."):
        super().__init__(message)
