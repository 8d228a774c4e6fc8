"""Tests for the race car flyweight."""
import pytest

from pattern_catalog.domain.core.exceptions import UnsupportedTypeError
from pattern_catalog.patterns.structural.flyweight import (
    CarFactory,
    FlyWeightMidgetCar,
    RaceCarClient,
    demo,
)


class TestCarFactory:
    """Test sharing of car objects."""

    def setup_method(self):
        """Set up test fixtures."""
        self.factory = CarFactory()

    def test_midget_car_attributes(self):
        """Test the intrinsic state of a Midget car."""
        race_car = self.factory.get_race_car("Midget")

        assert isinstance(race_car, FlyWeightMidgetCar)
        assert (race_car.name, race_car.speed, race_car.horse_power) == ("Midget Car", 140, 400)

    def test_same_key_returns_same_car(self):
        """Test that a car type is created once."""
        instances_before = FlyWeightMidgetCar.num

        first = self.factory.get_race_car("Midget")
        second = self.factory.get_race_car("Midget")

        assert first is second
        assert FlyWeightMidgetCar.num - instances_before == 1
        assert len(self.factory) == 1

    def test_unknown_car_type_is_rejected(self):
        """Test that unsupported keys raise and are not cached."""
        with pytest.raises(UnsupportedTypeError, match="Unsupported car type."):
            self.factory.get_race_car("Formula")

        assert len(self.factory) == 0


class TestRaceCarClient:
    """Test clients holding extrinsic state."""

    def test_clients_share_car_but_not_position(self, capsys):
        """Test that three clients share one car and keep their own positions."""
        factory = CarFactory()
        instances_before = FlyWeightMidgetCar.num

        clients = [RaceCarClient("Midget", factory) for _ in range(3)]
        clients[0].move_car(29, 3112)
        clients[1].move_car(39, 2002)

        assert clients[0].race_car is clients[1].race_car is clients[2].race_car
        assert FlyWeightMidgetCar.num - instances_before == 1
        assert (clients[0].current_x, clients[0].current_y) == (29, 3112)
        assert (clients[2].current_x, clients[2].current_y) == (0, 0)
        assert capsys.readouterr().out.splitlines() == [
            "New location of Midget Car is X29 - Y3112",
            "New location of Midget Car is X39 - Y2002",
        ]

    def test_client_uses_given_empty_factory(self):
        """Test that a fresh factory passed in is filled, not replaced by the default."""
        factory = CarFactory()

        client = RaceCarClient("Midget", factory)

        assert len(factory) == 1
        assert client.race_car is factory.get_race_car("Midget")

    def test_unknown_client_car_fails(self):
        """Test that the client propagates factory errors."""
        with pytest.raises(UnsupportedTypeError):
            RaceCarClient("Formula", CarFactory())

    def test_demo_reports_single_instance(self, capsys):
        """Test the demonstration output."""
        demo()
        assert capsys.readouterr().out.splitlines()[-1] == "Midget Car Instances: 1"
