"""Memento: save and restore an originator's state."""
from typing import List

from pattern_catalog.domain.base.value_object import ValueObject


class Memento(ValueObject):
    state: str


class Originator:
    def __init__(self, state: str):
        self.state = state

    def create_memento(self) -> Memento:
        return Memento(state=self.state)

    def restore(self, memento: Memento) -> None:
        self.state = memento.state


class CareTaker:
    """Keeps saved mementos in the order they were saved."""

    def __init__(self):
        self._memento_list: List[Memento] = []

    def save_state(self, state: Memento) -> None:
        self._memento_list.append(state)

    def restore(self, index: int) -> Memento:
        """Get the memento saved at position ``index``; raises IndexError if there is none."""
        if not 0 <= index < len(self._memento_list):
            raise IndexError(f"No memento saved at index {index}")
        return self._memento_list[index]

    def __len__(self) -> int:
        return len(self._memento_list)


def demo() -> None:
    originator = Originator("initial state")
    care_taker = CareTaker()
    care_taker.save_state(originator.create_memento())

    originator.state = "State #1"
    originator.state = "State #2"
    care_taker.save_state(originator.create_memento())

    originator.state = "State #3"
    print(f"Current State: {originator.state}")

    originator.restore(care_taker.restore(1))
    print(f"Second saved state: {originator.state}")

    originator.restore(care_taker.restore(0))
    print(f"First saved state: {originator.state}")
