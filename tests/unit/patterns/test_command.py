"""Tests for the order command queue."""
from unittest.mock import Mock

from pattern_catalog.patterns.behavioral.command import (
    CommandProcessor,
    OrderAddCommand,
    OrderCommand,
    OrderPayCommand,
    demo,
)


class TestCommandProcessor:
    """Test queuing and processing of commands."""

    def test_commands_run_in_insertion_order(self, capsys):
        """Test FIFO execution."""
        (
            CommandProcessor()
            .add_to_queue(OrderAddCommand(1))
            .add_to_queue(OrderAddCommand(2))
            .add_to_queue(OrderPayCommand(2))
            .add_to_queue(OrderPayCommand(1))
            .process_commands()
        )

        assert capsys.readouterr().out.splitlines() == [
            "Adding order with id: 1",
            "Adding order with id: 2",
            "Paying for order with id: 2",
            "Paying for order with id: 1",
        ]

    def test_commands_not_run_until_processed(self):
        """Test that queuing alone executes nothing."""
        command = Mock(spec=OrderCommand)
        processor = CommandProcessor().add_to_queue(command)

        command.execute.assert_not_called()
        assert len(processor) == 1

    def test_processing_empties_queue(self):
        """Test that each command runs once."""
        command = Mock(spec=OrderCommand)
        processor = CommandProcessor().add_to_queue(command)

        processor.process_commands()
        processor.process_commands()

        command.execute.assert_called_once_with()
        assert len(processor) == 0

    def test_empty_queue_processes_nothing(self, capsys):
        """Test processing with nothing queued."""
        CommandProcessor().process_commands()
        assert capsys.readouterr().out == ""

    def test_demo_output(self, capsys):
        """Test the demonstration output."""
        demo()
        assert len(capsys.readouterr().out.splitlines()) == 4
