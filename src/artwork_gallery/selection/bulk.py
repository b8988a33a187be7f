# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Author: Artwork Gallery contributors
# Version: 1.0
# Date: October 2026
# License: GNU Affero General Public License v3.0 (AGPL-3.0)
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
# -----------------------------------------------------------------------------

import logging

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from artwork_gallery.errors import InvalidBulkRequest, NetworkError
from artwork_gallery.remote.fetcher import PageFetcher


logger = logging.getLogger(__name__)



@dataclass(frozen=True)
class BulkSelectionResult:
    """
    The outcome of a "select the first N rows" walk.

    Attributes:
        ids (Tuple[int, ...]): The collected identifiers, in collection order.
        requested (int): The number of rows that was requested.
        complete (bool): True if `requested` identifiers were collected.
        error (Optional[NetworkError]): The fetch failure that stopped the walk, if any.
        pages_fetched (int): The number of pages successfully fetched during the walk.
    """

    ids: Tuple[int, ...]
    requested: int
    complete: bool
    error: Optional[NetworkError] = None
    pages_fetched: int = 0

    @property
    def missing(self) -> int:
        """The number of requested rows that were not collected."""
        return self.requested - len(self.ids)

    def describe(self) -> str:
        """A message for the user about this outcome."""
        if self.complete:
            return f"Selected {len(self.ids)} rows."
        if self.error is not None:
            return (f"Selected only {len(self.ids)} of {self.requested} rows: page {self.error.page_number} "
                    f"could not be fetched ({self.error.reason}).")
        return f"Selected only {len(self.ids)} of {self.requested} rows: there are no more artworks."



def validate_bulk_request(requested: Any, total: Optional[int] = None) -> int:
    """
    Check a "select the first N rows" request before any network activity.

    Args:
        requested (Any): The number of rows given by the user (it might be `None` or not an integer).
        total (Optional[int]): The known number of records. If `None`, only positivity is checked.

    Returns:
        int: The validated number of rows.

    Raises:
        InvalidBulkRequest: If `requested` is not an integer within `[1, total]`.
    """

    if isinstance(requested, bool) or not isinstance(requested, int):
        raise InvalidBulkRequest(requested, total)
    if requested < 1 or (total is not None and requested > total):
        raise InvalidBulkRequest(requested, total)
    return requested



class BulkRangeSelector:
    """
    Resolve "select the first N rows" into a walk across consecutive remote pages.

    The walk starts from the displayed page and fetches one page at a time (page `k + 1` is requested
    only after page `k` is processed), so identifiers are collected in collection order and the remote
    source never receives concurrent requests from a walk. The walk stops when N identifiers are
    collected, when a page is shorter than the page size (i.e., the collection is exhausted), or when a
    fetch fails. A failure is not retried and it does not discard what was collected so far.
    """

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher


    def select(self, start_page: int, page_size: int, target_count: int,
               on_page: Optional[Callable[[int, int], None]] = None) -> BulkSelectionResult:
        """
        Walk the remote pages and collect the identifiers of the first `target_count` records from `start_page`.

        Args:
            start_page (int): The 1-based page to start from, i.e., the displayed page.
            page_size (int): The page size in effect.
            target_count (int): The number of identifiers to collect.
            on_page (Optional[Callable[[int, int], None]]): Called after each fetched page with the page number
                and the number of identifiers collected so far.

        Returns:
            BulkSelectionResult: The collected identifiers and whether the walk completed.

        Raises:
            InvalidBulkRequest: If `target_count` is not positive (no page is fetched).
            ValueError: If `start_page` or `page_size` is not positive.
        """

        validate_bulk_request(target_count)
        if start_page < 1:
            raise ValueError(f"Page numbers start from 1, got `{start_page}`.")
        if page_size < 1:
            raise ValueError(f"Page size should be positive, got `{page_size}`.")

        remaining = target_count
        page_number = start_page
        collected: List[int] = []
        pages_fetched = 0

        logger.info("Selecting %d rows from page %d (page size %d).", target_count, start_page, page_size)
        while remaining > 0:
            try:
                page = self.fetcher.fetch(page_number, page_size)
            except NetworkError as e:
                logger.warning("Bulk selection stopped at page %d with %d of %d rows: %s",
                               page_number, len(collected), target_count, e)
                return BulkSelectionResult(tuple(collected), target_count, complete=False, error=e,
                                           pages_fetched=pages_fetched)
            pages_fetched += 1

            take = min(remaining, len(page.records))
            collected.extend(record.id for record in page.records[:take])
            remaining -= take
            if on_page is not None:
                on_page(page_number, len(collected))

            if len(page.records) < page_size and remaining > 0:
                logger.warning("Bulk selection reached the end of the collection at page %d with %d of %d rows.",
                               page_number, len(collected), target_count)
                return BulkSelectionResult(tuple(collected), target_count, complete=False,
                                           pages_fetched=pages_fetched)
            page_number += 1

        logger.info("Bulk selection collected %d rows from %d pages.", len(collected), pages_fetched)
        return BulkSelectionResult(tuple(collected), target_count, complete=True, pages_fetched=pages_fetched)
