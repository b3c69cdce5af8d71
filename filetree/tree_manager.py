from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent
from .provider import ChildProvider
import asyncio
from concurrent.futures import Future
import logging
import os
from typing import Awaitable, Callable, Dict, Optional

def describe_change(event: FileSystemEvent) -> Dict[str, str]:
    """Turn a watchdog event into the notice sent to tree views"""
    src_path = os.fsdecode(event.src_path)
    change = {
        "type": "tree_changed",
        "event": event.event_type,
        "path": src_path,
        "directory": os.path.dirname(src_path),
    }
    dest_path = getattr(event, "dest_path", "")
    if dest_path:
        dest_path = os.fsdecode(dest_path)
        change["dest_path"] = dest_path
        change["dest_directory"] = os.path.dirname(dest_path)
    return change

def log_delivery_failure(future: Future):
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logging.warning("Could not deliver tree change: %s", error)

class TreeManager:
    """
    Owns the provider for one root and, optionally, a watchdog observer on it.

    The observer only tells listeners which directory changed so they can
    expand it again; listings themselves are never kept.
    """
    def __init__(self, root: str):
        self.provider = ChildProvider(root)
        self.observer = None
        self.update_callback = None
        self.loop = None

    @property
    def root(self) -> str:
        return self.provider.root_path

    def watch(self, callback: Callable[[Dict[str, str]], Awaitable[None]],
              loop: Optional[asyncio.AbstractEventLoop] = None):
        """Start watching the root; callback is awaited on loop for every change"""
        self.update_callback = callback
        self.loop = loop or asyncio.get_running_loop()

        class Handler(FileSystemEventHandler):
            def on_any_event(self2, event: FileSystemEvent):
                if event.event_type in ("opened", "closed", "closed_no_write"):
                    return
                self.notify(describe_change(event))

        self.stop()

        observer = Observer()
        observer.schedule(Handler(), self.root, recursive=True)
        observer.start()
        # Only a started observer is kept, so stop() never joins a dead thread
        self.observer = observer
        logging.info("Watching %s for changes", self.root)

    def notify(self, change: Dict[str, str]):
        """Hand a change notice to the listener; safe to call from the observer thread"""
        if not self.update_callback or not self.loop or self.loop.is_closed():
            return
        future = asyncio.run_coroutine_threadsafe(self.update_callback(change), self.loop)
        future.add_done_callback(log_delivery_failure)

    def stop(self):
        if self.observer:
            self.observer.stop()
            self.observer.join()
            self.observer = None
