"""Tests for the factory method pattern."""
import pytest
from enum import Enum
from patterns import CarFactory, CarType, Car, Lamborghini, Ferrari, EnumFactory
from utils import FactoryError


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class Paint:
    def __init__(self, shade: str = "matte"):
        self.shade = shade


class TestCarFactory:
    """Tests for CarFactory."""

    @pytest.mark.parametrize("car_type, expected", [
        (CarType.LAMBORGHINI, Lamborghini),
        (CarType.FERRARI, Ferrari),
    ])
    def test_create_each_type(self, car_type, expected):
        """Test every car type builds its mapped class."""
        car = CarFactory.create(car_type)
        assert type(car) is expected
        assert isinstance(car, Car)
        assert car.run() == expected.__name__

    def test_create_returns_new_instances(self):
        """Test the factory constructs a fresh car per call."""
        assert CarFactory.create(CarType.FERRARI) is not CarFactory.create(CarType.FERRARI)

    def test_create_from_value(self):
        """Test creating from the enumeration's value."""
        assert isinstance(CarFactory.create("lamborghini"), Lamborghini)

    def test_unknown_value(self):
        """Test a value outside the enumeration is rejected."""
        with pytest.raises(FactoryError) as exc_info:
            CarFactory.create("tesla")

        assert exc_info.value.details['available_types'] == ['lamborghini', 'ferrari']

    def test_every_car_type_is_mapped(self):
        """Test the car mapping covers the whole enumeration."""
        CarFactory.verify_exhaustive()
        assert set(CarFactory.list_available()) == set(CarType)

    def test_run_logs_type(self, caplog):
        """Test running a car logs its type name."""
        with caplog.at_level("INFO"):
            CarFactory.create(CarType.FERRARI).run()

        assert "Ferrari" in caplog.messages


class TestEnumFactory:
    """Tests for the EnumFactory base."""

    def test_missing_mapping_detected(self):
        """Test an enum member without a mapping fails verification."""
        class PaintFactory(EnumFactory):
            discriminant = Color

        PaintFactory.register(Color.RED, Paint)

        with pytest.raises(FactoryError) as exc_info:
            PaintFactory.verify_exhaustive()

        assert exc_info.value.details['missing'] == ['blue']

        with pytest.raises(FactoryError):
            PaintFactory.create(Color.BLUE)

    def test_kwargs_forwarded(self):
        """Test keyword arguments reach the implementation."""
        class PaintFactory(EnumFactory):
            discriminant = Color

        PaintFactory.register(Color.RED, Paint)
        PaintFactory.register(Color.BLUE, Paint)

        assert PaintFactory.create(Color.BLUE, shade="gloss").shade == "gloss"

    def test_register_rejects_foreign_member(self):
        """Test only members of the factory's enumeration can be registered."""
        class PaintFactory(EnumFactory):
            discriminant = Color

        with pytest.raises(FactoryError):
            PaintFactory.register(CarType.FERRARI, Paint)

    def test_registries_are_separate(self):
        """Test subclasses do not share registrations."""
        class PaintFactory(EnumFactory):
            discriminant = Color

        PaintFactory.register(Color.RED, Paint)

        assert PaintFactory.list_available() == [Color.RED]
        assert Color.RED not in CarFactory.list_available()

    @pytest.mark.parametrize("factory", [
        EnumFactory,
        type("UnboundFactory", (EnumFactory,), {}),
    ])
    def test_missing_discriminant(self, factory):
        """Test a factory without an enumeration reports a FactoryError."""
        with pytest.raises(FactoryError):
            factory.create("red")
        with pytest.raises(FactoryError):
            factory.register(Color.RED, Paint)
        with pytest.raises(FactoryError):
            factory.verify_exhaustive()
