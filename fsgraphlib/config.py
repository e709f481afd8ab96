"""Configuration for fsgraphlib scans.

The origin path is handed to the adapter directly; everything else that
shapes a directory scan lives in ScanConfig so it can be changed without
touching the scan algorithm.
"""

import os
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List


DEFAULT_EXCLUDED_DIRECTORIES: FrozenSet[str] = frozenset({".git", ".vscode", "target"})


@dataclass(frozen=True)
class ScanConfig:
    """Policy applied by the directory scan iterators.

    Attributes:
        excluded_directories: Subdirectory names treated as non-existent by
            the subdirectory scan. Matching is exact and case-sensitive.
    """

    excluded_directories: FrozenSet[str] = field(
        default_factory=lambda: DEFAULT_EXCLUDED_DIRECTORIES
    )

    def __post_init__(self):
        # A bare string is one name, not an iterable of characters.
        if isinstance(self.excluded_directories, str):
            object.__setattr__(
                self, "excluded_directories", frozenset({self.excluded_directories})
            )
        elif not isinstance(self.excluded_directories, frozenset):
            object.__setattr__(
                self, "excluded_directories", frozenset(self.excluded_directories)
            )

    def is_excluded(self, name: str) -> bool:
        """Check whether a subdirectory name is hidden from traversal."""
        return name in self.excluded_directories

    def with_excluded(self, *names: str) -> "ScanConfig":
        """Return a copy with additional excluded directory names."""
        return replace(
            self, excluded_directories=self.excluded_directories.union(names)
        )

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in sorted(self.excluded_directories, key=repr):
            if not isinstance(name, str) or not name:
                errors.append(f"excluded directory name must be a non-empty string, got {name!r}")
                continue
            if os.sep in name or (os.altsep and os.altsep in name):
                errors.append(f"excluded directory name {name!r} contains a path separator")

        return errors
