"""Aspects: hooks run before and after a request handler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class Aspect(ABC):
    """A pair of hooks around request handling.

    Returning False from a hook signals that processing should not go on.
    """

    @abstractmethod
    def before(self, req: Any, resp: Any) -> bool:
        """Run before the handler."""

    @abstractmethod
    def after(self, req: Any, resp: Any) -> bool:
        """Run after the reply has been sent."""


class GlobalAspect:
    """The process-wide list of aspects applied to every route."""

    _instance: ClassVar[GlobalAspect | None] = None

    aspect_list: list[Aspect]

    def __init__(self) -> None:
        raise TypeError("GlobalAspect is a singleton; use GlobalAspect.get_instance()")

    @classmethod
    def get_instance(cls) -> GlobalAspect:
        """Return the single shared instance, creating it on first use."""
        if cls._instance is None:
            instance = object.__new__(cls)
            instance.aspect_list = []
            cls._instance = instance
        return cls._instance

    def __copy__(self):
        raise TypeError("GlobalAspect cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("GlobalAspect cannot be copied")