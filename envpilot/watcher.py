"""
File watcher that reloads the environment store when its backing file changes.

The observer watches the file's parent directory rather than the file itself
so that a file replaced at the same path keeps being observed.
"""

from __future__ import annotations

import logging
import os
import pathlib
import threading
from typing import Callable, Optional, Tuple

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .errors import WatchError

logger = logging.getLogger(__name__)


class EnvFileChangeHandler(FileSystemEventHandler):
    """
    Forwards write events for one file to ``on_change``.

    Backends report attribute changes (chmod, chown) as modifications too, so
    an event only counts when the file's mtime or size differs from the last
    one seen.
    """

    def __init__(self, path: str | pathlib.Path, on_change: Callable[[], None]) -> None:
        super().__init__()
        self.path = os.path.abspath(path)
        self._on_change = on_change
        self._signature = self._stat_signature()

    def _stat_signature(self) -> Optional[Tuple[int, int]]:
        try:
            st = os.stat(self.path)
        except OSError:
            return None
        return st.st_mtime_ns, st.st_size

    def is_target(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        src_path = os.fsdecode(event.src_path)
        return os.path.abspath(src_path) == self.path

    def on_modified(self, event: FileSystemEvent) -> None:
        if not self.is_target(event):
            return
        signature = self._stat_signature()
        if signature is None or signature == self._signature:
            logger.debug("Ignoring metadata-only event for %s", self.path)
            return
        self._signature = signature
        logger.info("Environment file changed: %s", self.path)
        self._on_change()


class EnvWatcher:
    """
    Background reloader for a single env file.

    ``reload`` runs on one worker thread. Requests that arrive while a reload
    is running collapse into a single follow-up reload.
    """

    def __init__(self, path: str | pathlib.Path, reload: Callable[[], None]) -> None:
        self.path = pathlib.Path(os.path.abspath(path))
        self._reload = reload
        self._pending = threading.Event()
        self._stopping = threading.Event()
        self._observer: Optional[Observer] = None
        self._worker: Optional[threading.Thread] = None
        self.handler = EnvFileChangeHandler(self.path, self.request_reload)

    def start(self) -> None:
        observer = Observer()
        try:
            observer.schedule(self.handler, str(self.path.parent), recursive=False)
            observer.start()
        except OSError as exc:
            raise WatchError(f"Error starting file watcher for {self.path}: {exc}") from exc
        self._observer = observer
        self._worker = threading.Thread(
            target=self._run,
            name=f"envpilot-reload-{self.path.name}",
            daemon=True,
        )
        self._worker.start()
        logger.debug("Watching %s for changes", self.path)

    def request_reload(self) -> None:
        self._pending.set()

    def _run(self) -> None:
        while True:
            self._pending.wait()
            if self._stopping.is_set():
                return
            self._pending.clear()
            try:
                self._reload()
            except Exception as exc:
                logger.error("Error reloading %s, keeping previous values: %s", self.path, exc)
            else:
                logger.info("Reloaded environment from %s", self.path)

    @property
    def is_alive(self) -> bool:
        return (
            self._observer is not None
            and self._observer.is_alive()
            and self._worker is not None
            and self._worker.is_alive()
        )

    def stop(self) -> None:
        self._stopping.set()
        self._pending.set()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None
        if self._worker is not None:
            self._worker.join()
            self._worker = None
