"""
Builder pattern for complex object construction.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from typing import Any, Iterable
from utils.logging_config import get_logger
from utils.exceptions import BuilderError

logger = get_logger(__name__)


class Builder(ABC):
    """Abstract builder base class."""

    @abstractmethod
    def reset(self):
        """Reset the builder."""
        pass

    @abstractmethod
    def build(self) -> Any:
        """Build and return the final product."""
        pass


@dataclass(frozen=True)
class WebService:
    """A fully configured web service request."""
    header: str = ""
    url: str = ""
    param: str = ""
    token: str = ""
    content_type: str = ""

    def request(self) -> str:
        """Issue the request, returning the line that describes it."""
        line = f"{self.url} + {self.param} + {self.header} + {self.token}"
        logger.info(line)
        return line


class WebServiceBuilder(Builder):
    """
    Fluent builder for WebService.

    Every ``with_*`` call returns the builder, so calls chain in any order and
    the last call for an attribute wins. ``build`` may be called once; call
    ``reset`` to start another draft.

    Args:
        required: Attribute names that must be non-empty when ``build`` runs
    """

    def __init__(self, required: Iterable[str] = ()):
        known = {f.name for f in fields(WebService)}
        self.required = tuple(required)
        unknown = [name for name in self.required if name not in known]
        if unknown:
            raise BuilderError(
                f"Unknown required attributes: {', '.join(unknown)}",
                details={'known': sorted(known)}
            )
        self.logger = get_logger(self.__class__.__name__)
        self.reset()

    def reset(self):
        """Start a fresh draft."""
        self._draft = WebService()
        self._built = False
        return self

    def _update(self, **changes):
        if self._built:
            raise BuilderError(
                "Builder already built; call reset() before configuring again",
                details={'attributes': sorted(changes)}
            )
        self._draft = replace(self._draft, **changes)
        self.logger.debug(f"Set {', '.join(sorted(changes))}")
        return self

    def with_header(self, header: str):
        return self._update(header=header)

    def with_url_and_param(self, url: str, param: str):
        return self._update(url=url, param=param)

    def with_token(self, token: str):
        return self._update(token=token)

    def with_content_type(self, content_type: str):
        return self._update(content_type=content_type)

    def build(self) -> WebService:
        """Build and return the web service."""
        if self._built:
            raise BuilderError("Builder already built; call reset() to build again")

        missing = [name for name in self.required if not getattr(self._draft, name)]
        if missing:
            raise BuilderError(
                f"Missing required attributes: {', '.join(missing)}",
                details={'missing': missing}
            )

        self._built = True
        self.logger.info(f"Built web service for '{self._draft.url}'")
        return self._draft
