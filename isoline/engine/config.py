"""Extraction options: output mode and pluggable interpolation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Callable

logger = logging.getLogger(__name__)

# camelCase spellings accepted from callers
_ALIASES = {
    "linearRing": "linear_ring",
    "successCallback": "success_callback",
}

_FLAGS = ("polygons", "linear_ring", "verbose")
_CALLABLES = ("success_callback", "interpolate", "interpolate_a", "interpolate_b")


@dataclass
class IsoOptions:
    """Controls what an extraction call returns."""

    # Per-cell polygons instead of stitched paths
    polygons: bool = False
    # Repeat the first point of every ring at its end
    linear_ring: bool = True
    # Log progress at INFO instead of DEBUG
    verbose: bool = False
    # Called with the result before it is returned
    success_callback: Callable[[list], None] | None = None

    # Crossing interpolation; None = linear. Contours call
    # interpolate(a, b, threshold), bands call fn(a, b, min_v, max_v)
    interpolate: Callable[..., float] | None = None
    interpolate_a: Callable[..., float] | None = None
    interpolate_b: Callable[..., float] | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None, **overrides: Any) -> IsoOptions:
        """Build options from loosely typed input.

        Unknown keys are ignored; values of the wrong type fall back to the
        default for that option.
        """
        merged: dict[str, Any] = {}
        for source in (values or {}, overrides):
            for key, value in source.items():
                merged[_ALIASES.get(key, key)] = value

        known = {f.name for f in fields(cls)}
        accepted: dict[str, Any] = {}
        for key, value in merged.items():
            if key not in known or value is None:
                continue
            if key in _FLAGS and not isinstance(value, bool):
                logger.debug("Ignoring option %s=%r (expected bool)", key, value)
                continue
            if key in _CALLABLES and not callable(value):
                logger.debug("Ignoring option %s=%r (expected callable)", key, value)
                continue
            accepted[key] = value
        return cls(**accepted)

    def merged(self, **overrides: Any) -> IsoOptions:
        """Copy with keyword overrides applied through the same coercion."""
        if not overrides:
            return self
        base = {f.name: getattr(self, f.name) for f in fields(self)}
        return IsoOptions.from_mapping(base, **overrides)


def resolve_options(options: IsoOptions | Mapping[str, Any] | None, **overrides: Any) -> IsoOptions:
    if isinstance(options, IsoOptions):
        return options.merged(**overrides)
    if options is not None and not isinstance(options, Mapping):
        logger.debug("Ignoring options of type %s", type(options).__name__)
        options = None
    return IsoOptions.from_mapping(options, **overrides)
