"""Strategy: a printer whose formatting is supplied by the caller."""
from typing import Callable

StringFormatter = Callable[[str], str]


class UpperCaseFormatter:
    def __call__(self, string: str) -> str:
        return string.upper()


class LowerCaseFormatter:
    def __call__(self, string: str) -> str:
        return string.lower()


class PrefixFormatter:
    def __init__(self, prefix: str = "Prefix: "):
        self.prefix = prefix

    def __call__(self, string: str) -> str:
        return f"{self.prefix}{string}"


class Printer:
    """Prints strings through any callable formatting strategy."""

    def __init__(self, string_formatter_strategy: StringFormatter):
        self._string_formatter_strategy = string_formatter_strategy

    def print_string(self, string: str) -> str:
        formatted = self._string_formatter_strategy(string)
        print(formatted)
        return formatted


def demo() -> None:
    input_string = "LOREM ipsum DOLOR sit amet"

    lower_case_printer = Printer(LowerCaseFormatter())
    lower_case_printer.print_string(input_string)

    upper_case_printer = Printer(UpperCaseFormatter())
    upper_case_printer.print_string(input_string)

    prefix_printer = Printer(lambda s: f"Prefix: {s}")
    prefix_printer.print_string(input_string)
