"""Decorator: add drinks to a coffee machine without changing it."""
from abc import ABC, abstractmethod


class CoffeeMachine(ABC):
    @abstractmethod
    def make_small_coffee(self) -> None:
        """Brew a small coffee."""

    @abstractmethod
    def make_large_coffee(self) -> None:
        """Brew a large coffee."""


class NormalCoffeeMachine(CoffeeMachine):
    def make_small_coffee(self) -> None:
        print("Normal: Making small coffee")

    def make_large_coffee(self) -> None:
        print("Normal: Making large coffee")


class EnhancedCoffeeMachine(CoffeeMachine):
    """Wraps any coffee machine; base drinks are delegated unchanged."""

    def __init__(self, coffee_machine: CoffeeMachine):
        self.coffee_machine = coffee_machine

    def make_small_coffee(self) -> None:
        self.coffee_machine.make_small_coffee()

    def make_large_coffee(self) -> None:
        self.coffee_machine.make_large_coffee()

    def make_coffee_with_milk(self) -> None:
        print("Enhanced: Making coffee with milk")
        self.coffee_machine.make_small_coffee()
        print("Enhanced: Adding milk")

    def make_double_large_coffee(self) -> None:
        print("Enhanced: Making double large coffee")
        self.coffee_machine.make_large_coffee()
        self.coffee_machine.make_large_coffee()


def demo() -> None:
    normal_machine = NormalCoffeeMachine()
    enhanced_machine = EnhancedCoffeeMachine(normal_machine)

    enhanced_machine.make_coffee_with_milk()
    enhanced_machine.make_double_large_coffee()
