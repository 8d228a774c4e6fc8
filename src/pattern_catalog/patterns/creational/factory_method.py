"""Factory Method: map a country to its currency."""
from dataclasses import dataclass
from typing import List, Tuple, Type

from pattern_catalog.domain.base.value_object import ValueObject
from pattern_catalog.domain.core.exceptions import UnsupportedTypeError


class Country:
    """Base of the country hierarchy known to the currency factory."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class USA(Country):
    pass


class Spain(Country):
    pass


@dataclass(frozen=True)
class Greece(Country):
    some_property: str = ""


@dataclass(frozen=True)
class Canada(Country):
    some_property: str = ""


class Currency(ValueObject):
    code: str


class CurrencyFactory:
    """Creates the currency used in a country."""

    _CURRENCY_CODES: List[Tuple[Type[Country], str]] = [
        (Greece, "EUR"),
        (Spain, "EUR"),
        (USA, "USD"),
        (Canada, "CAD"),
    ]

    @classmethod
    def currency_for_country(cls, country: Country) -> Currency:
        """
        Get the currency of ``country``.

        Raises:
            UnsupportedTypeError: If the country has no known currency
        """
        for country_type, code in cls._CURRENCY_CODES:
            if isinstance(country, country_type):
                return Currency(code=code)

        raise UnsupportedTypeError(
            f"No currency known for {country!r}",
            requested=country,
            supported=[t.__name__ for t, _ in cls._CURRENCY_CODES],
        )


def demo() -> None:
    greece_currency = CurrencyFactory.currency_for_country(Greece("")).code
    print(f"Greece currency: {greece_currency}")

    usa_currency = CurrencyFactory.currency_for_country(USA()).code
    print(f"USA currency: {usa_currency}")

    canada_currency = CurrencyFactory.currency_for_country(Canada("")).code
    print(f"Canada currency: {canada_currency}")
