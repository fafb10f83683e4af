"""Example script that walks through every pattern in the catalog."""
import sys
from pathlib import Path

from config import get_config, get_config_manager, load_config
from patterns import (
    CarFactory,
    get_database,
    WebServiceBuilder,
    DesktopComputer,
    ProcessorUpgrade,
    GraphicCardUpgrade,
    decorate,
    get_car_model,
    car_models
)
from utils import ErrorContext, LoggerFactory, get_logger

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "catalog.yaml"

UPGRADES = {
    'processor': ProcessorUpgrade,
    'graphic_card': GraphicCardUpgrade,
}

logger = get_logger(__name__)


def run_factory():
    """Create one car of each configured type and drive it."""
    for car_type in get_config('factory.car_types', ['lamborghini', 'ferrari']):
        CarFactory.create(car_type).run()


def run_singleton():
    """Write through the shared database."""
    get_database().write()


def run_builder():
    """Build a web service from configuration and issue its request."""
    settings = get_config('builder', {})
    service = (
        WebServiceBuilder()
        .with_header(settings.get('header', ''))
        .with_url_and_param(url=settings.get('url', ''), param=settings.get('param', ''))
        .with_token(settings.get('token', ''))
        .with_content_type(settings.get('content_type', ''))
        .build()
    )
    service.request()


def run_decorator():
    """Upgrade a desktop computer and print what it costs."""
    names = get_config('decorator.upgrades', ['processor', 'graphic_card'])
    desktop = decorate(DesktopComputer(), *(UPGRADES[name] for name in names))
    logger.info(desktop.summary())


def run_flyweight():
    """Fetch car models by key and show how many were actually created."""
    for key in get_config('flyweight.keys', ['BMW', 'Audi', 'BMW']):
        model = get_car_model(key)
        logger.info(f"{key} -> {model!r} (id={id(model)})")
    logger.info(f"Car model pool: {car_models.stats()}")


def main(config_path: str = str(DEFAULT_CONFIG)) -> int:
    manager = get_config_manager()
    manager.clear()
    load_config(config_path)
    manager.load_from_env()
    LoggerFactory.configure_from_dict(get_config('logging', {}))

    failures = 0
    for name, demo in [
        ('factory method', run_factory),
        ('singleton', run_singleton),
        ('builder', run_builder),
        ('decorator', run_decorator),
        ('flyweight', run_flyweight),
    ]:
        with ErrorContext(name, raise_on_error=False) as context:
            demo()
        if context.error is not None:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
