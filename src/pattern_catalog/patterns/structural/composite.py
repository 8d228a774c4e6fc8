"""Composite: price a computer as the sum of its parts."""
from typing import List, Tuple


class Equipment:
    """A priced piece of equipment."""

    def __init__(self, price: int, name: str):
        self._price = price
        self.name = name

    @property
    def price(self) -> int:
        return self._price

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, price={self.price})"


class Composite(Equipment):
    """Equipment assembled from other equipment; its price is the sum of its parts."""

    def __init__(self, name: str):
        super().__init__(0, name)
        self._equipments: List[Equipment] = []

    @property
    def price(self) -> int:
        return sum(equipment.price for equipment in self._equipments)

    @property
    def equipments(self) -> Tuple[Equipment, ...]:
        return tuple(self._equipments)

    def add(self, equipment: Equipment) -> "Composite":
        self._equipments.append(equipment)
        return self


class PersonalComputer(Composite):
    def __init__(self):
        super().__init__("PC")


class Processor(Equipment):
    def __init__(self):
        super().__init__(1070, "Processor")


class HardDrive(Equipment):
    def __init__(self):
        super().__init__(250, "Hard Drive")


class Memory(Equipment):
    def __init__(self):
        super().__init__(280, "Memory")


def demo() -> None:
    pc = PersonalComputer().add(Processor()).add(HardDrive()).add(Memory())
    print(pc.price)
