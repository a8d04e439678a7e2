"""
List Worker Definitions

A ListWorker applies a per-item test (process_item) to a list of work
items and returns the items that pass.  ParallelListWorker does the same
using a pool of threads.
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional


class PalFilterException(Exception):
    """base class for palfilter exceptions"""

class InvalidArgument(PalFilterException, ValueError):
    """raised when an argument is absent or out of range"""

logger = logging.getLogger(__name__)

# environment variables for default ParallelListWorker settings:
WORKERS_ENV = 'PALFILTER_WORKERS'
CHUNK_SIZE_ENV = 'PALFILTER_CHUNK_SIZE'

DEFAULT_CHUNK_SIZE = 1024


def _env_int(name: str, default: int) -> int:
    """
    return positive integer from environment variable `name`,
    or `default` if unset or unusable.
    """
    value = os.environ.get(name)
    if not value:
        return default
    try:
        n = int(value)
    except ValueError:
        n = 0
    if n < 1:
        logger.notice("ignoring %s=%r: using %d", name, value, default)
        return default
    return n

def default_workers() -> int:
    """worker thread count: from PALFILTER_WORKERS, else CPU count"""
    return _env_int(WORKERS_ENV, os.cpu_count() or 1)

def default_chunk_size() -> int:
    """items per pool task: from PALFILTER_CHUNK_SIZE, else 1024"""
    return _env_int(CHUNK_SIZE_ENV, DEFAULT_CHUNK_SIZE)


class ListWorker:
    """
    Base class for workers that filter lists of work items.
    Subclasses override process_item.
    """

    def __init__(self, process_name: str, descr: str):
        self.process_name = process_name
        self.descr = descr

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.process_name}>"

    def check_items(self, items: Optional[Iterable]):
        if items is None:
            raise InvalidArgument(f"{self.process_name}: items must not be None")

    def process_list(self, items: Optional[Iterable]) -> List:
        """
        return new list of the items for which process_item is true,
        in input order (duplicates kept).
        """
        self.check_items(items)
        results = []
        for item in items:
            if self.process_item(item):
                results.append(item)
        logger.debug("%s: %d results", self.process_name, len(results))
        return results

    def process_item(self, item) -> bool:
        raise PalFilterException("ListWorker.process_item not overridden")


class ParallelListWorker(ListWorker):
    """
    ListWorker that splits its input into chunks and runs
    process_item on them in a thread pool.
    Result order is NOT defined.
    """

    def __init__(self, process_name: str, descr: str,
                 max_workers: Optional[int] = None,
                 chunk_size: Optional[int] = None):
        super().__init__(process_name, descr)
        self.max_workers = self._check_setting(
            'max_workers', max_workers, default_workers)
        self.chunk_size = self._check_setting(
            'chunk_size', chunk_size, default_chunk_size)

    def _check_setting(self, name: str, value: Optional[int],
                       default: Callable[[], int]) -> int:
        if value is None:
            return default()
        if value < 1:
            raise InvalidArgument(
                f"{self.process_name}: {name} must be >= 1, got {value}")
        return value

    def process_list(self, items: Optional[Iterable]) -> List:
        self.check_items(items)
        items = list(items)   # private snapshot: workers only read it

        bag = []              # shared by all workers, under bag_lock
        bag_lock = threading.Lock()

        def process_chunk(start: int) -> None:
            found = [item for item in items[start:start+self.chunk_size]
                     if self.process_item(item)]
            if found:
                with bag_lock:
                    bag.extend(found)

        starts = range(0, len(items), self.chunk_size)
        logger.debug("%s: %d items in %d chunks, %d workers",
                     self.process_name, len(items), len(starts),
                     self.max_workers)
        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix=self.process_name) as pool:
            # list() waits for every chunk, and re-raises any worker exception
            list(pool.map(process_chunk, starts))

        with bag_lock:
            results = list(bag)
        logger.debug("%s: %d results", self.process_name, len(results))
        return results
