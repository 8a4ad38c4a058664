# linked_bag.py

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from typing_extensions import Self

from bag_interface import BagInterface, NO_ENTRY

T = TypeVar("T")


class Node(Generic[T]):
    """Nodo della catena: un elemento e il riferimento al nodo successivo."""

    def __init__(self, data: T, next_node: Optional["Node[T]"] = None):
        self.data = data
        self.next_node = next_node


class LinkedBag(BagInterface[T]):
    """
    Bag i cui elementi sono memorizzati in una catena di nodi.
    Non si riempie mai (il limite è la memoria disponibile).
    """

    def __init__(self, entries: Optional[Iterable[T]] = None):
        """Costruttore: bag vuota, opzionalmente riempita con 'entries'."""
        self._first_node: Optional[Node[T]] = None
        self._number_of_entries = 0
        if entries is not None:
            for entry in entries:
                self.add(entry)

    def _nodes(self) -> Iterator[Node[T]]:
        """Scorre la catena dalla testa alla coda."""
        current_node = self._first_node
        while current_node is not None:
            yield current_node
            current_node = current_node.next_node

    def _get_reference_to(self, an_entry: T) -> Optional[Node[T]]:
        """Primo nodo che contiene l'elemento, oppure None."""
        for node in self._nodes():
            if an_entry == node.data:
                return node
        return None

    def size(self) -> int:
        return self._number_of_entries

    def is_empty(self) -> bool:
        return self._first_node is None

    def add(self, new_entry: T) -> bool:
        """Aggiunge l'elemento in testa alla catena, O(1)."""
        self._first_node = Node(new_entry, self._first_node)
        self._number_of_entries += 1
        return True

    def remove(self, an_entry=NO_ENTRY):
        """
        Senza argomenti rimuove (e ritorna) l'elemento in testa, None se vuota.
        Con un elemento: copia il dato della testa nel nodo trovato e poi
        elimina la testa. Ritorna True se la rimozione è avvenuta.
        """
        if an_entry is NO_ENTRY:
            return self._remove_first()

        node = self._get_reference_to(an_entry)
        if node is None:
            return False
        # Se node è la testa il dato viene sovrascritto con se stesso
        node.data = self._first_node.data
        self._remove_first()
        return True

    def _remove_first(self) -> Optional[T]:
        if self.is_empty():
            return None
        result = self._first_node.data
        self._first_node = self._first_node.next_node
        self._number_of_entries -= 1
        return result

    def clear(self) -> None:
        while not self.is_empty():
            self._remove_first()

    def frequency_of(self, an_entry: T) -> int:
        return sum(1 for node in self._nodes() if an_entry == node.data)

    def contains(self, an_entry: T) -> bool:
        return self._get_reference_to(an_entry) is not None

    def to_list(self) -> List[T]:
        """Nuova lista dalla testa alla coda (ordine inverso di inserimento)."""
        return [node.data for node in self._nodes()]

    # --- Algebra dei multinsiemi ---

    def _fill_bag(self, other_bag: BagInterface[T]) -> None:
        """Aggiunge a other_bag tutto il contenuto di questa bag."""
        for node in self._nodes():
            other_bag.add(node.data)

    def union(self, other_bag: BagInterface[T]) -> Self:
        union_bag = type(self)()
        self._fill_bag(union_bag)
        for entry in other_bag.to_list():
            union_bag.add(entry)
        return union_bag

    def intersection(self, other_bag: BagInterface[T]) -> Self:
        intersection_bag = type(self)()

        # Copia di lavoro: ogni corrispondenza consuma un'occorrenza
        temp_holding_bag: LinkedBag[T] = LinkedBag()
        self._fill_bag(temp_holding_bag)

        for entry in other_bag.to_list():
            if temp_holding_bag.contains(entry):
                intersection_bag.add(entry)
                temp_holding_bag.remove(entry)
        return intersection_bag

    def difference(self, other_bag: BagInterface[T]) -> Self:
        difference_bag = type(self)()
        self._fill_bag(difference_bag)

        for entry in other_bag.to_list():
            if difference_bag.contains(entry):
                difference_bag.remove(entry)
        return difference_bag


if __name__ == "__main__":
    # Test rapido
    bag = LinkedBag(["a", "b", "c"])
    print(bag.union(LinkedBag(["b", "b", "d", "e"])))
