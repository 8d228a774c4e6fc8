"""Abstract Factory: choose the factory for a family of plants by plant type."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.domain.core.exceptions import UnsupportedTypeError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Plant:
    """Product created by a plant factory."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class OrangePlant(Plant):
    pass


class ApplePlant(Plant):
    pass


class PlantFactory(ABC):
    """Creates plants of a single kind."""

    @abstractmethod
    def make_plant(self) -> Plant:
        """Create a new plant."""

    @staticmethod
    def create_factory(plant_type: Type[Plant]) -> "PlantFactory":
        """
        Get the factory that produces ``plant_type``.

        Raises:
            UnsupportedTypeError: If no factory produces that plant type
        """
        factory_class = _FACTORIES.get(plant_type)
        if factory_class is None:
            raise UnsupportedTypeError(
                f"No plant factory for {getattr(plant_type, '__name__', plant_type)}",
                requested=getattr(plant_type, "__name__", plant_type),
                supported=[t.__name__ for t in _FACTORIES],
            )
        logger.debug("Selected plant factory", factory=factory_class.__name__)
        return factory_class()


class AppleFactory(PlantFactory):
    def make_plant(self) -> Plant:
        return ApplePlant()


class OrangeFactory(PlantFactory):
    def make_plant(self) -> Plant:
        return OrangePlant()


_FACTORIES: Dict[Type[Plant], Type[PlantFactory]] = {
    OrangePlant: OrangeFactory,
    ApplePlant: AppleFactory,
}


def demo() -> None:
    plant_factory = PlantFactory.create_factory(OrangePlant)
    plant = plant_factory.make_plant()
    print(f"Created plant: {plant}")
