"""
Temp file bookkeeping.

Every file an adapter creates as a side effect (downloads, local copies of
remote streams, generated masks) is registered here and deleted once on
teardown.
"""

import os
from typing import Iterator, List, Optional, Tuple

from ..core.errors import TempCleanupFailure
from ..logger import get_logger

logger = get_logger("temp_files")


class TempFileRegistry:
    """Ordered list of temp paths owned by one adapter instance."""

    def __init__(self):
        self._paths: List[str] = []

    def register(self, path: str) -> str:
        """Register a path for deletion at cleanup. Returns the path."""
        self._paths.append(path)
        logger.debug("Registered temp file %s", path)
        return path

    @property
    def paths(self) -> List[str]:
        return list(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def cleanup(self) -> Optional[TempCleanupFailure]:
        """
        Delete every registered file.

        Each entry is attempted even if an earlier one fails. Files that are
        already gone count as removed. The registry is emptied afterwards.

        Returns:
            TempCleanupFailure describing the failed entries, or None
        """
        failures: List[Tuple[str, OSError]] = []
        paths, self._paths = self._paths, []

        for path in paths:
            try:
                os.unlink(path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Could not delete temp file %s: %s", path, e)
                failures.append((path, e))

        if failures:
            return TempCleanupFailure(failures)
        return None
