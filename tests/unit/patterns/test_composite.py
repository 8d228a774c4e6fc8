"""Tests for the equipment composite."""
from pattern_catalog.patterns.structural.composite import (
    Composite,
    Equipment,
    HardDrive,
    Memory,
    PersonalComputer,
    Processor,
    demo,
)


class TestEquipmentComposite:
    """Test prices of composed equipment."""

    def test_personal_computer_price_is_sum_of_parts(self):
        """Test the PC example totals 1600."""
        pc = PersonalComputer().add(Processor()).add(HardDrive()).add(Memory())

        assert pc.name == "PC"
        assert pc.price == 1600

    def test_empty_composite_costs_nothing(self):
        """Test that a composite without parts is free."""
        assert PersonalComputer().price == 0

    def test_nested_composites_are_summed(self):
        """Test recursion through composites of composites."""
        rack = Composite("Rack")
        rack.add(PersonalComputer().add(Processor())).add(PersonalComputer().add(Memory()))
        rack.add(Equipment(99, "Cable"))

        assert rack.price == 1070 + 280 + 99

    def test_price_follows_later_additions(self):
        """Test that the price is computed on access."""
        pc = PersonalComputer()
        pc.add(Processor())
        assert pc.price == 1070

        pc.add(HardDrive())
        assert pc.price == 1320

    def test_add_returns_composite(self):
        """Test fluent additions."""
        pc = PersonalComputer()
        assert pc.add(Memory()) is pc
        assert [e.name for e in pc.equipments] == ["Memory"]

    def test_leaf_prices(self):
        """Test the fixed prices of parts."""
        assert (Processor().price, HardDrive().price, Memory().price) == (1070, 250, 280)

    def test_demo_prints_price(self, capsys):
        """Test the demonstration output."""
        demo()
        assert capsys.readouterr().out == "1600\n"
