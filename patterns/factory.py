"""
Factory Method pattern: a closed enumeration mapped to concrete implementations.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union
from utils.logging_config import get_logger
from utils.exceptions import FactoryError

logger = get_logger(__name__)


class EnumFactory:
    """
    Factory keyed by the members of a closed enumeration.

    Subclasses set ``discriminant`` to an ``Enum`` type and get their own
    registry. ``verify_exhaustive`` checks that every member is mapped.
    """

    discriminant: Optional[Type[Enum]] = None
    _registry: Dict[Enum, Type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def _enum(cls) -> Type[Enum]:
        enum_type = cls.discriminant
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise FactoryError(
                f"{cls.__name__} has no discriminant Enum",
                details={'factory': cls.__name__}
            )
        return enum_type

    @classmethod
    def register(cls, member: Enum, implementation: Type):
        """Map an enum member to the class that implements it."""
        enum_type = cls._enum()
        if not isinstance(member, enum_type):
            raise FactoryError(
                f"{member!r} is not a {enum_type.__name__}",
                details={'factory': cls.__name__}
            )
        if member in cls._registry:
            logger.warning(
                f"Replacing {cls._registry[member].__name__} for {member} in {cls.__name__}"
            )
        cls._registry[member] = implementation
        logger.debug(f"Registered {implementation.__name__} for {member} in {cls.__name__}")

    @classmethod
    def create(cls, discriminant: Union[Enum, Any], **kwargs) -> Any:
        """Create the implementation mapped to ``discriminant``.

        Accepts an enum member or one of the enumeration's values.
        """
        enum_type = cls._enum()
        try:
            member = enum_type(discriminant)
        except ValueError:
            raise FactoryError(
                f"Unknown {enum_type.__name__}: {discriminant!r}",
                details={'available_types': [m.value for m in enum_type]}
            ) from None

        implementation = cls._registry.get(member)
        if implementation is None:
            raise FactoryError(
                f"No implementation registered for {member} in {cls.__name__}",
                details={'available_types': [m.value for m in cls._registry]}
            )

        return implementation(**kwargs)

    @classmethod
    def verify_exhaustive(cls):
        """Raise FactoryError unless every enum member has an implementation."""
        missing = [member for member in cls._enum() if member not in cls._registry]
        if missing:
            raise FactoryError(
                f"{cls.__name__} has no implementation for "
                f"{', '.join(str(m) for m in missing)}",
                details={'missing': [m.value for m in missing]}
            )

    @classmethod
    def list_available(cls) -> List[Enum]:
        """List all mapped enum members."""
        return list(cls._registry.keys())


class CarType(Enum):
    """Kinds of car the CarFactory can build."""
    LAMBORGHINI = "lamborghini"
    FERRARI = "ferrari"


class Car(ABC):
    """Capability shared by every car."""

    @abstractmethod
    def run(self) -> str:
        """Drive the car, returning the name of the concrete type."""
        pass


class CarFactory(EnumFactory):
    """Factory for creating cars."""
    discriminant = CarType


def register_car(car_type: CarType):
    """Decorator for registering car implementations."""
    def decorator(cls):
        CarFactory.register(car_type, cls)
        return cls
    return decorator


@register_car(CarType.LAMBORGHINI)
class Lamborghini(Car):

    def run(self) -> str:
        name = type(self).__name__
        logger.info(name)
        return name


@register_car(CarType.FERRARI)
class Ferrari(Car):

    def run(self) -> str:
        name = type(self).__name__
        logger.info(name)
        return name


CarFactory.verify_exhaustive()
