"""
Tests for ListWorker/ParallelListWorker and their configuration.
"""

import os
import threading

import pytest

from palfilter.logging import NOTICE
from palfilter.palindrome import PalindromeWorker, ParallelPalindromeWorker
from palfilter.worker import (
    CHUNK_SIZE_ENV,
    DEFAULT_CHUNK_SIZE,
    default_chunk_size,
    default_workers,
    InvalidArgument,
    ListWorker,
    PalFilterException,
    ParallelListWorker,
    WORKERS_ENV,
)


class EvenWorker(ListWorker):
    def process_item(self, item):
        return item % 2 == 0


class ThreadRecordingWorker(ParallelListWorker):
    """records which threads ran process_item"""

    def __init__(self, *args, **kw):
        super().__init__(*args, **kw)
        self.threads = set()
        self.lock = threading.Lock()

    def process_item(self, item):
        with self.lock:
            self.threads.add(threading.current_thread().name)
        return item > 0


class BrokenWorker(ParallelListWorker):
    def process_item(self, item):
        if item == 13:
            raise RuntimeError("unlucky")
        return True


class TestListWorker:
    """Test the sequential base class."""

    def test_process_item_not_overridden(self):
        with pytest.raises(PalFilterException):
            ListWorker("base", "no process_item").process_list([1])

    def test_empty_list_needs_no_process_item(self):
        assert ListWorker("base", "no process_item").process_list([]) == []

    def test_subclass_filters_in_order(self):
        worker = EvenWorker("even", "even numbers")
        assert worker.process_list([5, 4, 3, 2, 2, 1, 0]) == [4, 2, 2, 0]

    def test_none_message_names_worker(self):
        with pytest.raises(InvalidArgument, match="even"):
            EvenWorker("even", "even numbers").process_list(None)

    def test_repr(self):
        assert repr(PalindromeWorker()) == "<PalindromeWorker: palindrome>"


class TestParallelListWorker:
    """Test the thread pool worker."""

    def test_explicit_settings(self):
        worker = ParallelPalindromeWorker(max_workers=3, chunk_size=17)
        assert worker.max_workers == 3
        assert worker.chunk_size == 17

    def test_runs_in_pool_threads(self):
        worker = ThreadRecordingWorker("rec", "recording",
                                       max_workers=4, chunk_size=1)
        result = worker.process_list(range(-50, 50))
        assert sorted(result) == list(range(1, 50))
        assert worker.threads
        assert all(name.startswith("rec") for name in worker.threads)

    def test_worker_exception_propagates(self):
        worker = BrokenWorker("broken", "raises", max_workers=2, chunk_size=4)
        with pytest.raises(RuntimeError, match="unlucky"):
            worker.process_list(range(20))

    def test_none_raises_before_pool(self):
        worker = ThreadRecordingWorker("rec", "recording", max_workers=2)
        with pytest.raises(InvalidArgument):
            worker.process_list(None)
        assert worker.threads == set()

    @pytest.mark.parametrize("settings", [
        {"chunk_size": -1},
        {"chunk_size": 0},
        {"max_workers": -1},
        {"max_workers": 0},
    ])
    def test_bad_settings_raise(self, settings):
        name = next(iter(settings))
        with pytest.raises(InvalidArgument, match=name):
            ParallelPalindromeWorker(**settings)

    def test_bad_setting_ignores_env(self, monkeypatch):
        monkeypatch.setenv(CHUNK_SIZE_ENV, "10")
        with pytest.raises(InvalidArgument):
            ParallelPalindromeWorker(chunk_size=0)


class TestConfiguration:
    """Test environment variable defaults."""

    def test_workers_from_env(self, monkeypatch):
        monkeypatch.setenv(WORKERS_ENV, "6")
        assert default_workers() == 6
        assert ParallelPalindromeWorker().max_workers == 6

    def test_workers_default_cpu_count(self, monkeypatch):
        monkeypatch.delenv(WORKERS_ENV, raising=False)
        assert default_workers() == (os.cpu_count() or 1)

    @pytest.mark.parametrize("value", ["", "zero", "0", "-3"])
    def test_workers_bad_env_falls_back(self, monkeypatch, value):
        monkeypatch.setenv(WORKERS_ENV, value)
        assert default_workers() == (os.cpu_count() or 1)

    def test_bad_env_logged_at_notice(self, monkeypatch, caplog):
        monkeypatch.setenv(CHUNK_SIZE_ENV, "-1")
        with caplog.at_level(NOTICE, logger="palfilter.worker"):
            assert default_chunk_size() == DEFAULT_CHUNK_SIZE
        assert CHUNK_SIZE_ENV in caplog.text

    def test_chunk_size_from_env(self, monkeypatch):
        monkeypatch.setenv(CHUNK_SIZE_ENV, "10")
        assert ParallelPalindromeWorker().chunk_size == 10

    def test_argument_overrides_env(self, monkeypatch):
        monkeypatch.setenv(WORKERS_ENV, "6")
        monkeypatch.setenv(CHUNK_SIZE_ENV, "10")
        worker = ParallelPalindromeWorker(max_workers=2, chunk_size=5)
        assert (worker.max_workers, worker.chunk_size) == (2, 5)
