"""
Decorator pattern: upgrades that wrap a computer and keep its interface.

Each upgrade holds the computer it wraps and derives its own cost and
description from it, so layers compose by nesting:

    desktop = GraphicCardUpgrade(ProcessorUpgrade(DesktopComputer()))
"""
from abc import ABC, abstractmethod
from typing import Callable
from utils.logging_config import get_logger
from utils.exceptions import DecoratorError

logger = get_logger(__name__)


class Computer(ABC):
    """Capability shared by computers and their upgrades."""

    @property
    @abstractmethod
    def cost(self) -> float:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    def summary(self) -> str:
        return f"{self.description}, ${self.cost}"


class DesktopComputer(Computer):
    """The computer being decorated."""

    @property
    def cost(self) -> float:
        return 300.0

    @property
    def description(self) -> str:
        return "Desktop Computer"


def _check_inner(computer, upgrade: str) -> Computer:
    if computer is None:
        raise DecoratorError(f"{upgrade} needs a computer to wrap")
    if not isinstance(computer, Computer):
        raise DecoratorError(
            f"{upgrade} can only wrap a Computer, got {type(computer).__name__}",
            details={'actual_type': type(computer).__name__}
        )
    return computer


class ProcessorUpgrade(Computer):
    """Adds a core i7 processor."""

    def __init__(self, computer: Computer):
        self._computer = _check_inner(computer, type(self).__name__)

    @property
    def computer(self) -> Computer:
        return self._computer

    @property
    def cost(self) -> float:
        return self._computer.cost + 100

    @property
    def description(self) -> str:
        return self._computer.description + ", core i7"


class GraphicCardUpgrade(Computer):
    """Adds an NVIDIA GTX 1080 graphics card."""

    def __init__(self, computer: Computer):
        self._computer = _check_inner(computer, type(self).__name__)

    @property
    def computer(self) -> Computer:
        return self._computer

    @property
    def cost(self) -> float:
        return self._computer.cost + 50

    @property
    def description(self) -> str:
        return self._computer.description + ", NVIDIA GTX 1080"


def decorate(computer: Computer, *upgrades: Callable[[Computer], Computer]) -> Computer:
    """Wrap ``computer`` with each upgrade in turn, first upgrade innermost."""
    for upgrade in upgrades:
        computer = upgrade(computer)
        logger.debug(f"Applied {type(computer).__name__}: {computer.summary()}")
    return computer
