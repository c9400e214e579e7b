"""Depth guard — bounds nested-structure recursion.

Self-referential schemas (``google.protobuf.Struct`` → ``Value`` → ``Struct``
…) are valid input, so their unfolding is truncated rather than rejected.

Budget accounting::

    root structure             budget = max_depth
    enter nested structure     budget - 1      (stop when budget is already 0)
    enter overridden path      budget = depth_overrides[path]
    scalars / lists / maps     no cost

A truncated structure is reported as absent; it is not an error.
"""

from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import Mapping, Optional

from .core import ConfigurationError
from .paths import is_valid_path

logger = logging.getLogger(__name__)

#: Budget used when none (or a negative one) is configured.
DEFAULT_MAX_DEPTH = 99

# Budget standing in for "no limit"; never reaches zero in practice.
_UNBOUNDED = sys.maxsize


class DepthGuard:
    """Remaining-budget bookkeeping for one walker configuration.

    The guard itself holds no traversal state: the current budget travels on
    the call stack and ``enter`` returns the budget for the child.

    Args:
        max_depth: Number of nested structure crossings allowed below the
                   root.  ``None`` → unbounded; negative → ``DEFAULT_MAX_DEPTH``.
        overrides: ``path → budget`` applied whenever that exact path is
                   entered, regardless of the budget consumed on the way.
    """

    def __init__(
            self,
            max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
            overrides: Optional[Mapping[str, int]] = None,
    ) -> None:
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, int)):
            raise ConfigurationError(f"max_depth must be an int or None, got {max_depth!r}")
        if max_depth is None:
            self._max_depth = _UNBOUNDED
        elif max_depth < 0:
            self._max_depth = DEFAULT_MAX_DEPTH
        else:
            self._max_depth = max_depth

        checked: dict[str, int] = {}
        for path, depth in (overrides or {}).items():
            if not is_valid_path(path):
                raise ConfigurationError(f"invalid depth override path: {path!r}")
            if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
                raise ConfigurationError(
                    f"depth override for {path!r} must be a non-negative int, got {depth!r}"
                )
            checked[path] = depth
        self._overrides = MappingProxyType(checked)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def overrides(self) -> Mapping[str, int]:
        return self._overrides

    @property
    def unbounded(self) -> bool:
        return self._max_depth == _UNBOUNDED

    def initial(self) -> int:
        """Budget of the root structure."""
        return self._max_depth

    def enter(self, path: str, budget: int) -> Optional[int]:
        """Return the child's budget for entering the structure at *path*.

        ``None`` means the structure must not be traversed.  The budget is
        checked before it is decremented, so it never becomes negative.
        """
        override = self._overrides.get(path)
        if override is not None:
            return override
        if budget <= 0:
            logger.debug("depth budget exhausted at %r; truncating", path)
            return None
        return budget - 1
