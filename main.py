# main.py
# Dimostrazione: unione, intersezione e differenza con entrambe le implementazioni.
# Stampa le bag con la stessa resa testuale di str(bag).

from typing import Callable, List, Sequence, Tuple

from bag_interface import BagInterface
from linked_bag import LinkedBag
from resizeable_array_bag import ResizeableArrayBag


# ============================================================
# CONFIGURAZIONE
# ============================================================

STRING_CONTENTS: Tuple[List[str], List[str]] = (["a", "b", "c"], ["b", "b", "d", "e"])

INTEGER_CONTENTS: Tuple[List[int], List[int]] = (
    [2, 2, 2, 1, 3, 4, 5, 6, 7],
    [6, 6, 2, 2, 8, 4, 11, 22, 33, 9],
)

IMPLEMENTATIONS: List[Tuple[str, Callable[[], BagInterface]]] = [
    ("LINKEDBAG", LinkedBag),
    ("RESIZEABLEARRAYBAG", ResizeableArrayBag),
]

SECTION_LINE = "-" * 63


# ============================================================
# SUPPORTO
# ============================================================

def show_items(content: Sequence) -> None:
    print("set of items: " + "".join(f"{item} " for item in content))


def add_items(a_bag: BagInterface, content: Sequence) -> None:
    for item in content:
        a_bag.add(item)


def through_wringer(bag1: BagInterface, bag2: BagInterface) -> None:
    """Stampa le due bag e i risultati delle tre operazioni."""
    print("First " + str(bag1), end="")
    print("Second " + str(bag2), end="")
    print("\n" + "=" * 63)

    everything = bag1.union(bag2)
    print("UNION OF THE BAGS\nThe new " + str(everything), end="")
    print("\n" + SECTION_LINE)

    common_items = bag1.intersection(bag2)
    print("INTERSECTION OF THE BAGS\nThe new " + str(common_items), end="")
    print("\n" + SECTION_LINE)

    left_over1 = bag1.difference(bag2)
    print("DIFFERENCE OF FIRST BAG WITH SECOND BAG\nThe new " + str(left_over1), end="")
    print("\n" + SECTION_LINE)

    left_over2 = bag2.difference(bag1)
    print("DIFFERENCE OF SECOND BAG WITH FIRST BAG\nThe new " + str(left_over2), end="")
    print("\n" + "/" * 62 + "\n")


# ============================================================
# DEMO
# ============================================================

def run_demo(name: str, bag_factory: Callable[[], BagInterface]) -> None:
    print(f"======================== {name} TEST ========================\n")

    for first_content, second_content in (STRING_CONTENTS, INTEGER_CONTENTS):
        first_bag = bag_factory()
        second_bag = bag_factory()

        print("First ", end="")
        show_items(first_content)
        print("Second ", end="")
        show_items(second_content)

        print("\n==> Placing items inside the bags ==>\n")
        add_items(first_bag, first_content)
        add_items(second_bag, second_content)

        through_wringer(first_bag, second_bag)


def main() -> None:
    for name, bag_factory in IMPLEMENTATIONS:
        run_demo(name, bag_factory)


if __name__ == "__main__":
    main()
