"""Re-run a scan whenever files under the repository change."""

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from watchfiles import watch

from .logging_config import get_logger

logger = get_logger(__name__)

# Debounce: collect changes for this long before re-scanning
DEBOUNCE_MS = 200

IGNORED_DIRS = frozenset({"node_modules", ".git"})


class _RepositoryFilter:
    """watchfiles filter: everything except dependency and VCS directories.

    Dot-directories such as .github and .claude hold context files, so they
    stay watched.
    """

    def __call__(self, change: int, path: str) -> bool:
        return not any(part in IGNORED_DIRS for part in Path(path).parts)


def watch_repository(
    root_dir: str,
    on_change: Callable[[list[str]], None],
    stop_event: Optional[threading.Event] = None,
) -> None:
    """
    Block, calling ``on_change`` with the changed paths after each debounced batch.

    Returns when ``stop_event`` is set or the user interrupts.

    Args:
        root_dir: Repository root to watch
        on_change: Callback receiving the changed absolute paths
        stop_event: Optional event that ends the watch loop
    """
    root = str(Path(root_dir).resolve())
    logger.info(f"Watching {root} for changes")

    for changes in watch(
        root,
        stop_event=stop_event,
        debounce=DEBOUNCE_MS,
        watch_filter=_RepositoryFilter(),
        raise_interrupt=False,
    ):
        changed_files = sorted(path for _change, path in changes)
        logger.debug(f"Detected {len(changed_files)} changed file(s)")
        on_change(changed_files)
