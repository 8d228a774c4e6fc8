"""Behavioral patterns: chain of responsibility, command, listener, mediator, memento, state, strategy, visitor."""
