from __future__ import annotations

"""
Configuration Domain Management.

Holds the runtime defaults of the indexer and the option object consumed
by the tree walker. Defaults are built once at the boundary and partial
caller overrides are merged on top of them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from tree_indexer.domain.constants import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_SKIP_EXTENSIONS,
    DEFAULT_SKIP_NAMES,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Walker
        "skip_names": sorted(DEFAULT_SKIP_NAMES),
        "skip_extensions": sorted(DEFAULT_SKIP_EXTENSIONS),
        "respect_gitignore": True,

        # Classifier
        "max_file_size": DEFAULT_MAX_FILE_SIZE,
    }


# -----------------------------------------------------------------------------
# Walker Options
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TreeBuilderOptions:
    """
    Exclusion settings applied by the tree walker.

    Attributes:
        skip_names: Entry names excluded at any depth.
        skip_extensions: Name suffixes excluded at any depth.
        respect_gitignore: Load and apply the root '.gitignore'.
    """
    skip_names: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SKIP_NAMES)
    skip_extensions: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SKIP_EXTENSIONS)
    respect_gitignore: bool = True

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> "TreeBuilderOptions":
        """
        Build options from a partial mapping, keeping defaults for absent keys.

        Keys set to None are treated as absent.

        Args:
            overrides: Subset of 'skip_names', 'skip_extensions', 'respect_gitignore'.

        Returns:
            TreeBuilderOptions: Fully populated options.
        """
        if not overrides:
            return cls()

        skip_names = overrides.get("skip_names")
        skip_extensions = overrides.get("skip_extensions")
        respect_gitignore = overrides.get("respect_gitignore")

        return cls(
            skip_names=_as_frozenset(skip_names, DEFAULT_SKIP_NAMES),
            skip_extensions=_as_frozenset(skip_extensions, DEFAULT_SKIP_EXTENSIONS),
            respect_gitignore=True if respect_gitignore is None else bool(respect_gitignore),
        )


def resolve_options(
        options: Optional[Any] = None,
) -> TreeBuilderOptions:
    """
    Normalize the accepted option shapes into a TreeBuilderOptions instance.

    Args:
        options: None, an existing TreeBuilderOptions, or a partial mapping.

    Returns:
        TreeBuilderOptions: Options ready for the walker.
    """
    if options is None:
        return TreeBuilderOptions()
    if isinstance(options, TreeBuilderOptions):
        return options
    if isinstance(options, Mapping):
        return TreeBuilderOptions.from_mapping(options)
    raise TypeError(
        f"Invalid tree options: expected mapping or TreeBuilderOptions, received {type(options).__name__}."
    )


def _as_frozenset(value: Optional[Iterable[str]], fallback: FrozenSet[str]) -> FrozenSet[str]:
    if value is None:
        return fallback
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(value)
