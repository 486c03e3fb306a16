"""Watch mode: rebuild the routes file when pages are added or removed.

Polls the pages directory with ``anyio.sleep`` between scans, running
each scan in a worker thread.  Only the set of page paths matters to the
route table, so edits to existing pages never trigger a rebuild.  Every
rebuild recompiles the whole tree.  Filesystem errors during a poll are
logged and retried on the next poll.
"""

import logging

import anyio
import anyio.to_thread

from pageroutes.config import RoutesConfig
from pageroutes.discovery import discover_page_files
from pageroutes.render import create_environment, write_routes

logger = logging.getLogger("pageroutes.watch")


class RouteWatcher:
    """Keeps ``config.output_path`` in sync with the pages directory.

    Usage::

        watcher = RouteWatcher(RoutesConfig(pages_dir="src/pages"))
        anyio.run(watcher.run)
    """

    __slots__ = ("_env", "_known", "config")

    def __init__(self, config: RoutesConfig) -> None:
        self.config = config
        self._env = create_environment()
        self._known: frozenset[str] | None = None

    def snapshot(self) -> frozenset[str]:
        """Current set of page files."""
        return frozenset(discover_page_files(self.config.pages_root, self.config.extension))

    def build(self) -> bool:
        """Write the routes file and remember the page set it was built from.

        The page set is only remembered once the write succeeds, so a
        failed build is retried by the next poll.
        """
        current = self.snapshot()
        changed = write_routes(self.config, self._env)
        self._known = current
        return changed

    def poll_once(self) -> bool:
        """Rebuild if pages were added or removed since the last scan.

        Returns:
            ``True`` if the page set changed and the routes were rebuilt.
        """
        current = self.snapshot()
        previous = self._known
        if previous is None:
            self.build()
            return True
        if current == previous:
            return False

        for path in sorted(current - previous):
            logger.info("File %s has been added", path)
        for path in sorted(previous - current):
            logger.info("File %s has been removed", path)
        self.build()
        return True

    def poll_safely(self) -> bool:
        """:meth:`poll_once`, logging filesystem errors instead of raising.

        A missing pages directory (branch switch, rename) or a failed
        write leaves the last known page set in place for the next poll.
        """
        try:
            return self.poll_once()
        except OSError as exc:
            logger.warning("Route rebuild failed, retrying on next poll: %s", exc)
            return False

    async def run(self, max_polls: int | None = None) -> None:
        """Build once, then poll every ``config.watch_interval`` seconds.

        Args:
            max_polls: Stop after this many polls (``None`` runs until
                cancelled).
        """
        await anyio.to_thread.run_sync(self.build)
        logger.info("Watching %s for page changes", self.config.pages_root)
        polls = 0
        try:
            while max_polls is None or polls < max_polls:
                await anyio.sleep(self.config.watch_interval)
                await anyio.to_thread.run_sync(self.poll_safely)
                polls += 1
        finally:
            logger.info("Stopped watching %s", self.config.pages_root)
