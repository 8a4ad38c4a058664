# resizeable_array_bag.py

import logging
from typing import Iterable, List, Optional, TypeVar

from typing_extensions import Self

from bag_errors import BagIntegrityError, CapacityExceededError
from bag_interface import BagInterface, NO_ENTRY

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResizeableArrayBag(BagInterface[T]):
    """
    Bag i cui elementi sono memorizzati in un array ridimensionabile.
    Quando l'array è pieno la capacità raddoppia, ma non può mai superare
    MAX_CAPACITY.
    """

    DEFAULT_CAPACITY = 25
    MAX_CAPACITY = 10_000

    # Diventa True solo alla fine di __init__
    _integrity_ok = False

    def __init__(self, desired_capacity: Optional[int] = None, entries: Optional[Iterable[T]] = None):
        """
        Costruttore del bag.
        desired_capacity: capacità iniziale (default DEFAULT_CAPACITY).
        entries: elementi iniziali opzionali, aggiunti nell'ordine dato.
        """
        if desired_capacity is None:
            desired_capacity = self.DEFAULT_CAPACITY
        if desired_capacity < 1:
            raise ValueError(f"Bag capacity must be at least 1, got {desired_capacity}")
        self._check_capacity(desired_capacity)

        self._bag: List[Optional[T]] = [None] * desired_capacity
        self._number_of_entries = 0
        self._integrity_ok = True

        if entries is not None:
            for entry in entries:
                self.add(entry)

    # --- Controlli ---

    def _check_integrity(self) -> None:
        """Errore immediato se l'oggetto non è stato inizializzato."""
        if not self._integrity_ok:
            raise BagIntegrityError()

    def _check_capacity(self, capacity: int) -> None:
        if capacity > self.MAX_CAPACITY:
            raise CapacityExceededError(capacity, self.MAX_CAPACITY)

    # --- Capacità ---

    @property
    def capacity(self) -> int:
        """Lunghezza attuale dell'array."""
        self._check_integrity()
        return len(self._bag)

    def is_full(self) -> bool:
        self._check_integrity()
        return self._number_of_entries == len(self._bag)

    def _double_capacity(self) -> None:
        # Precondizione: _check_integrity() già chiamato
        new_length = 2 * len(self._bag)
        self._check_capacity(new_length)
        self._bag = self._bag + [None] * (new_length - len(self._bag))
        logger.debug("Bag capacity doubled to %d", new_length)

    # --- Operazioni del contratto ---

    def size(self) -> int:
        self._check_integrity()
        return self._number_of_entries

    def is_empty(self) -> bool:
        self._check_integrity()
        return self._number_of_entries == 0

    def add(self, new_entry: T) -> bool:
        """Aggiunge in coda; raddoppia l'array se è pieno."""
        self._check_integrity()
        if self.is_full():
            self._double_capacity()
        self._bag[self._number_of_entries] = new_entry
        self._number_of_entries += 1
        return True

    def remove(self, an_entry=NO_ENTRY):
        """
        Senza argomenti rimuove (e ritorna) l'ultimo elemento, None se vuota.
        Con un elemento ne rimuove un'occorrenza: lo slot trovato viene
        sovrascritto con l'ultimo elemento. Ritorna True se rimosso.
        """
        self._check_integrity()
        if an_entry is NO_ENTRY:
            return self._remove_entry(self._number_of_entries - 1)

        index = self._get_index_of(an_entry)
        if index < 0:
            return False
        self._remove_entry(index)
        return True

    def _remove_entry(self, given_index: int) -> Optional[T]:
        """Rimuove e ritorna l'elemento in given_index (None se non esiste)."""
        if self.is_empty() or given_index < 0:
            return None
        last_index = self._number_of_entries - 1
        result = self._bag[given_index]
        self._bag[given_index] = self._bag[last_index]
        # Nessun riferimento residuo nello slot liberato
        self._bag[last_index] = None
        self._number_of_entries -= 1
        return result

    def _get_index_of(self, an_entry: T) -> int:
        """Indice della prima occorrenza, -1 se assente."""
        for index in range(self._number_of_entries):
            if an_entry == self._bag[index]:
                return index
        return -1

    def clear(self) -> None:
        self._check_integrity()
        while not self.is_empty():
            self._remove_entry(self._number_of_entries - 1)

    def frequency_of(self, an_entry: T) -> int:
        self._check_integrity()
        return sum(1 for index in range(self._number_of_entries) if an_entry == self._bag[index])

    def contains(self, an_entry: T) -> bool:
        self._check_integrity()
        return self._get_index_of(an_entry) > -1

    def to_list(self) -> List[T]:
        """Nuova lista con gli elementi in ordine di slot."""
        self._check_integrity()
        return self._bag[:self._number_of_entries]

    # --- Algebra dei multinsiemi ---

    def _new_result_bag(self, entries_needed: int) -> Self:
        """Bag vuota dello stesso tipo, già grande abbastanza per entries_needed."""
        capacity = min(max(self.DEFAULT_CAPACITY, entries_needed), self.MAX_CAPACITY)
        return type(self)(capacity)

    def _fill_bag(self, other_bag: BagInterface[T]) -> None:
        for index in range(self._number_of_entries):
            other_bag.add(self._bag[index])

    def union(self, other_bag: BagInterface[T]) -> Self:
        self._check_integrity()
        union_bag = self._new_result_bag(self._number_of_entries + other_bag.size())
        self._fill_bag(union_bag)
        for entry in other_bag.to_list():
            union_bag.add(entry)
        return union_bag

    def intersection(self, other_bag: BagInterface[T]) -> Self:
        self._check_integrity()
        intersection_bag = self._new_result_bag(self._number_of_entries)

        # Copia di lavoro: ogni corrispondenza consuma un'occorrenza
        temp_holding_bag = self._new_result_bag(self._number_of_entries)
        self._fill_bag(temp_holding_bag)

        for entry in other_bag.to_list():
            if temp_holding_bag.contains(entry):
                intersection_bag.add(entry)
                temp_holding_bag.remove(entry)
        return intersection_bag

    def difference(self, other_bag: BagInterface[T]) -> Self:
        self._check_integrity()
        difference_bag = self._new_result_bag(self._number_of_entries)
        self._fill_bag(difference_bag)

        for entry in other_bag.to_list():
            if difference_bag.contains(entry):
                difference_bag.remove(entry)
        return difference_bag


if __name__ == "__main__":
    # Test rapido
    bag = ResizeableArrayBag(entries=[2, 2, 2, 1, 3, 4, 5, 6, 7])
    print(bag.intersection(ResizeableArrayBag(entries=[6, 6, 2, 2, 8, 4, 11, 22, 33, 9])))
