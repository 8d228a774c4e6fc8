"""Flyweight: race car clients share one car object per car type."""
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type

from pattern_catalog.domain.core.exceptions import UnsupportedTypeError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class RaceCar(ABC):
    """Intrinsic, shareable car state."""

    def __init__(self):
        self.name: Optional[str] = None
        self.speed = 0
        self.horse_power = 0

    @abstractmethod
    def move_car(self, current_x: int, current_y: int, new_x: int, new_y: int) -> None:
        """Move the car between two positions supplied by the client."""


class FlyWeightMidgetCar(RaceCar):
    # Number of instances ever constructed
    num = 0

    def __init__(self):
        super().__init__()
        FlyWeightMidgetCar.num += 1

    def move_car(self, current_x: int, current_y: int, new_x: int, new_y: int) -> None:
        print(f"New location of {self.name} is X{new_x} - Y{new_y}")


# key -> (car class, name, speed, horse power)
_CAR_TYPES: Dict[str, Tuple[Type[RaceCar], str, int, int]] = {
    "Midget": (FlyWeightMidgetCar, "Midget Car", 140, 400),
}


class CarFactory:
    """Creates each car type once and hands out the shared instance."""

    def __init__(self):
        self._flyweights: Dict[str, RaceCar] = {}
        self._lock = threading.Lock()

    def get_race_car(self, key: str) -> RaceCar:
        """
        Get the shared car for ``key``.

        Raises:
            UnsupportedTypeError: If ``key`` is not a known car type
        """
        with self._lock:
            if key in self._flyweights:
                return self._flyweights[key]

            if key not in _CAR_TYPES:
                raise UnsupportedTypeError("Unsupported car type.", requested=key, supported=list(_CAR_TYPES))

            car_class, name, speed, horse_power = _CAR_TYPES[key]
            race_car = car_class()
            race_car.name = name
            race_car.speed = speed
            race_car.horse_power = horse_power

            self._flyweights[key] = race_car
            logger.debug("Created flyweight", key=key)
            return race_car

    def __len__(self) -> int:
        return len(self._flyweights)


car_factory = CarFactory()


class RaceCarClient:
    """Extrinsic state: the position of one participant's car."""

    def __init__(self, name: str, factory: Optional[CarFactory] = None):
        self.race_car = (factory if factory is not None else car_factory).get_race_car(name)
        self.current_x = 0
        self.current_y = 0

    def move_car(self, new_x: int, new_y: int) -> None:
        self.race_car.move_car(self.current_x, self.current_y, new_x, new_y)
        self.current_x = new_x
        self.current_y = new_y


def demo() -> None:
    factory = CarFactory()
    instances_before = FlyWeightMidgetCar.num

    race_cars = [
        RaceCarClient("Midget", factory),
        RaceCarClient("Midget", factory),
        RaceCarClient("Midget", factory),
    ]
    race_cars[0].move_car(29, 3112)
    race_cars[1].move_car(39, 2002)
    race_cars[2].move_car(49, 1985)
    print(f"Midget Car Instances: {FlyWeightMidgetCar.num - instances_before}")
