import os
import sys
from pathlib import Path
from typing import List, Optional, Set

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import artwork_gallery
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from artwork_gallery.errors import NetworkError
from artwork_gallery.remote.data import Artwork, Page, PaginationMeta
from artwork_gallery.utils.worker import TaskRunner


def make_artworks(count: int, first_id: int = 1000) -> List[Artwork]:
    """Build `count` artworks with consecutive ids starting from `first_id`."""
    return [
        Artwork(id=first_id + i, title=f"Artwork {i}", artist_display=f"Artist {i % 3}",
                place_of_origin="France", date_start=str(1800 + i), date_end=str(1810 + i))
        for i in range(count)
    ]


class FakeFetcher:
    """In-memory stand-in for `PageFetcher` serving a fixed collection."""

    def __init__(self, records: List[Artwork], page_size: int = 10, fail_on: Optional[Set[int]] = None):
        self.records = list(records)
        self.page_size = page_size
        self.fail_on = set(fail_on or ())
        self.calls: List[tuple] = []

    def fetch(self, page_number: int, page_size: Optional[int] = None) -> Page:
        page_size = page_size or self.page_size
        self.calls.append((page_number, page_size))
        if page_number in self.fail_on:
            raise NetworkError(page_number, "connection refused")
        offset = PaginationMeta.compute_offset(page_number, page_size)
        total = len(self.records)
        meta = PaginationMeta(
            total=total,
            limit=page_size,
            offset=offset,
            total_pages=PaginationMeta.compute_total_pages(total, page_size),
            current_page=page_number,
        )
        return Page(number=page_number, page_size=page_size,
                    records=tuple(self.records[offset:offset + page_size]), meta=meta)

    @property
    def pages_requested(self) -> List[int]:
        return [page_number for page_number, _ in self.calls]


class DeferredRunner:
    """Runner that keeps tasks pending until the test completes them, in any order."""

    def __init__(self):
        self.tasks = []

    def start(self, function, on_result=None, on_error=None, **kwargs):
        self.tasks.append((function, on_result, on_error, kwargs))
        return len(self.tasks)

    def pending(self) -> int:
        return len(self.tasks)

    def complete(self, index: int = 0) -> None:
        function, on_result, on_error, kwargs = self.tasks.pop(index)
        TaskRunner.dispatch(TaskRunner.run(function, kwargs), on_result, on_error)


@pytest.fixture
def artworks_25():
    """A collection of 25 artworks."""
    return make_artworks(25)


@pytest.fixture
def fetcher_25(artworks_25):
    """Fetcher over 25 artworks, 10 per page."""
    return FakeFetcher(artworks_25, page_size=10)


@pytest.fixture
def deferred_runner():
    return DeferredRunner()
