"""Scheme registry — every layout scheme is a generator registered via decorator.

Usage:
    @scheme(id="rectangular", description="Vertical bands")
    def rectangular(raster: Raster, params: LayoutParams) -> Iterator[Segment]:
        ...

Adding a new layout = creating one module under engine/schemes with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from fukuda.engine.errors import InvalidParameter

if TYPE_CHECKING:
    from fukuda.engine.config import LayoutParams
    from fukuda.engine.geometry import Segment
    from fukuda.engine.raster import Raster

logger = logging.getLogger(__name__)

SchemeFn = Callable[["Raster", "LayoutParams"], Iterator["Segment"]]


@dataclass
class SchemeSpec:
    id: str
    fn: SchemeFn
    description: str = ""


class SchemeRegistry:
    """Registry of layout schemes keyed by id."""

    def __init__(self) -> None:
        self._schemes: dict[str, SchemeSpec] = {}

    def register(self, spec: SchemeSpec) -> None:
        if spec.id in self._schemes:
            raise ValueError(f"Duplicate scheme ID: {spec.id}")
        self._schemes[spec.id] = spec
        logger.debug("Registered scheme %s", spec.id)

    def get(self, scheme_id: str) -> SchemeSpec:
        try:
            return self._schemes[scheme_id]
        except KeyError:
            known = ", ".join(sorted(self._schemes)) or "none"
            raise InvalidParameter(f"Unknown scheme {scheme_id!r} (known: {known})") from None

    def all(self) -> list[SchemeSpec]:
        return sorted(self._schemes.values(), key=lambda s: s.id)

    def ids(self) -> list[str]:
        return sorted(self._schemes)

    @property
    def count(self) -> int:
        return len(self._schemes)


# Module-level singleton
_registry = SchemeRegistry()


_SCHEMES_PACKAGE = "fukuda.engine.schemes"
_schemes_loaded = False


def _load_schemes() -> None:
    """Import every module under engine/schemes so @scheme decorators fire."""
    global _schemes_loaded
    if _schemes_loaded:
        return
    package = importlib.import_module(_SCHEMES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_SCHEMES_PACKAGE}.{module_name}")
    _schemes_loaded = True


def get_registry() -> SchemeRegistry:
    _load_schemes()
    return _registry


def scheme(
    *,
    id: str,
    description: str = "",
):
    """Decorator to register a layout scheme generator."""

    def decorator(fn: SchemeFn):
        spec = SchemeSpec(id=id, fn=fn, description=description)
        _registry.register(spec)
        return fn

    return decorator
