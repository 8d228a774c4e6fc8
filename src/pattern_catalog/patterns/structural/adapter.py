"""Adapter: expose a Celsius thermometer through a Fahrenheit interface."""
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Protocol

_SCALE = Decimal("0.01")


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(_SCALE, rounding=ROUND_HALF_EVEN)


def _to_decimal(value: float) -> Decimal:
    return _quantize(Decimal(repr(value)))


def convert_celsius_to_fahrenheit(celsius: float) -> float:
    """Convert at two decimal places, rounding half to even."""
    return float(_quantize(_to_decimal(celsius) * 9 / 5) + 32)


def convert_fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert at two decimal places, rounding half to even."""
    return float(_quantize((_to_decimal(fahrenheit) - 32) * 5 / 9))


class Temperature(Protocol):
    temperature: float


class CelsiusTemperature:
    """Adaptee: stores the temperature in degrees Celsius."""

    def __init__(self, temperature: float):
        self.temperature = temperature

    def __repr__(self) -> str:
        return f"CelsiusTemperature({self.temperature})"


class FahrenheitTemperature:
    """Adapter: reads and writes the wrapped Celsius value in Fahrenheit."""

    def __init__(self, celsius_temperature: CelsiusTemperature):
        self._celsius_temperature = celsius_temperature

    @property
    def temperature(self) -> float:
        return convert_celsius_to_fahrenheit(self._celsius_temperature.temperature)

    @temperature.setter
    def temperature(self, temperature_in_f: float) -> None:
        self._celsius_temperature.temperature = convert_fahrenheit_to_celsius(temperature_in_f)

    def __repr__(self) -> str:
        return f"FahrenheitTemperature({self.temperature})"


def demo() -> None:
    celsius_temperature = CelsiusTemperature(0.0)
    fahrenheit_temperature = FahrenheitTemperature(celsius_temperature)

    celsius_temperature.temperature = 36.6
    print(f"{celsius_temperature.temperature} C -> {fahrenheit_temperature.temperature} F")

    fahrenheit_temperature.temperature = 100.0
    print(f"{fahrenheit_temperature.temperature} F -> {celsius_temperature.temperature} C")
