"""Command: queue order operations and run them later."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class OrderCommand(ABC):
    @abstractmethod
    def execute(self) -> None:
        """Perform the operation."""


class OrderAddCommand(OrderCommand):
    def __init__(self, order_id: int):
        self.order_id = order_id

    def execute(self) -> None:
        print(f"Adding order with id: {self.order_id}")


class OrderPayCommand(OrderCommand):
    def __init__(self, order_id: int):
        self.order_id = order_id

    def execute(self) -> None:
        print(f"Paying for order with id: {self.order_id}")


class CommandProcessor:
    """FIFO queue of commands."""

    def __init__(self):
        self._queue: List[OrderCommand] = []

    def add_to_queue(self, order_command: OrderCommand) -> "CommandProcessor":
        self._queue.append(order_command)
        return self

    def process_commands(self) -> "CommandProcessor":
        """Execute every queued command in order, then empty the queue."""
        logger.debug("Processing commands", count=len(self._queue))
        for command in self._queue:
            command.execute()
        self._queue.clear()
        return self

    def __len__(self) -> int:
        return len(self._queue)


def demo() -> None:
    (
        CommandProcessor()
        .add_to_queue(OrderAddCommand(1))
        .add_to_queue(OrderAddCommand(2))
        .add_to_queue(OrderPayCommand(2))
        .add_to_queue(OrderPayCommand(1))
        .process_commands()
    )
