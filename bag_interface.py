from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar, overload

from typing_extensions import Self

T = TypeVar("T")

# Valore di default di remove(): distingue "nessun argomento" da remove(None)
NO_ENTRY = object()


class BagInterface(ABC, Generic[T]):
    """Contratto comune di un multinsieme (bag): gli elementi possono ripetersi."""

    @abstractmethod
    def size(self) -> int:
        """Numero di elementi attualmente nella bag."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """True se la bag non contiene elementi."""
        pass

    @abstractmethod
    def add(self, new_entry: T) -> bool:
        """Aggiunge un'occorrenza dell'elemento. Ritorna True."""
        pass

    @overload
    def remove(self) -> Optional[T]: ...

    @overload
    def remove(self, an_entry: T) -> bool: ...

    @abstractmethod
    def remove(self, an_entry=NO_ENTRY):
        """
        Metodo smart:
         - senza argomenti rimuove un elemento non specificato e lo ritorna
           (None se la bag è vuota);
         - con un elemento ne rimuove una sola occorrenza e ritorna True se
           la rimozione è avvenuta.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Svuota la bag, che resta utilizzabile."""
        pass

    @abstractmethod
    def frequency_of(self, an_entry: T) -> int:
        """Quante volte l'elemento compare nella bag (0 se assente)."""
        pass

    @abstractmethod
    def contains(self, an_entry: T) -> bool:
        """True se l'elemento compare almeno una volta."""
        pass

    @abstractmethod
    def to_list(self) -> List[T]:
        """Nuova lista con tutti gli elementi (vuota se la bag è vuota)."""
        pass

    # --- Algebra dei multinsiemi (nessuno dei due operandi viene modificato) ---

    @abstractmethod
    def union(self, other_bag: "BagInterface[T]") -> Self:
        """Nuova bag: per ogni valore, somma delle occorrenze nelle due bag."""
        pass

    @abstractmethod
    def intersection(self, other_bag: "BagInterface[T]") -> Self:
        """Nuova bag: per ogni valore, il minimo delle occorrenze."""
        pass

    @abstractmethod
    def difference(self, other_bag: "BagInterface[T]") -> Self:
        """Nuova bag: per ogni valore, max(0, occorrenze qui - occorrenze in other_bag)."""
        pass

    # --- Protocolli Python, derivati dal contratto ---

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, an_entry) -> bool:
        return self.contains(an_entry)

    def __iter__(self) -> Iterator[T]:
        # Iteriamo su una copia: la bag può essere modificata durante il ciclo
        return iter(self.to_list())

    def __str__(self) -> str:
        items = "".join(f"{entry} " for entry in self.to_list())
        return f"bag contains {self.size()} items(s):\n{items}\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
