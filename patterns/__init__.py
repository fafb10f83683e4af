"""
Creational and structural design patterns.
"""
from .factory import (
    EnumFactory,
    CarFactory,
    CarType,
    Car,
    Lamborghini,
    Ferrari,
    register_car
)
from .singleton import (
    Singleton,
    SingletonMeta,
    Database,
    get_database
)
from .builder import (
    Builder,
    WebService,
    WebServiceBuilder
)
from .decorator import (
    Computer,
    DesktopComputer,
    ProcessorUpgrade,
    GraphicCardUpgrade,
    decorate
)
from .flyweight import (
    FlyweightFactory,
    CarModel,
    car_models,
    get_car_model
)

__all__ = [
    'EnumFactory',
    'CarFactory',
    'CarType',
    'Car',
    'Lamborghini',
    'Ferrari',
    'register_car',
    'Singleton',
    'SingletonMeta',
    'Database',
    'get_database',
    'Builder',
    'WebService',
    'WebServiceBuilder',
    'Computer',
    'DesktopComputer',
    'ProcessorUpgrade',
    'GraphicCardUpgrade',
    'decorate',
    'FlyweightFactory',
    'CarModel',
    'car_models',
    'get_car_model',
]
