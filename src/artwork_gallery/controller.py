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

from enum import Enum
from typing import Any, FrozenSet, Iterable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from artwork_gallery.errors import InvalidBulkRequest, NetworkError
from artwork_gallery.remote.data import Artwork, Page, PaginationMeta
from artwork_gallery.remote.fetcher import PageFetcher
from artwork_gallery.selection.bulk import BulkRangeSelector, BulkSelectionResult, validate_bulk_request
from artwork_gallery.selection.reconciler import PageSelectionReconciler
from artwork_gallery.selection.selection_set import SelectionSet
from artwork_gallery.utils.worker import TaskRunner


logger = logging.getLogger(__name__)



class GalleryState(Enum):
    """The states of a gallery session."""

    IDLE = "idle" # Nothing in flight, the last fetch succeeded
    LOADING = "loading" # A page fetch is in flight
    BULK_SELECTING = "bulk_selecting" # A "select N rows" walk is in flight
    ERROR = "error" # The last page fetch failed



class GalleryController(QObject):
    """
    Own the state of a gallery session (i.e., displayed page, page size, total records and selection) and
    drive the `PageFetcher` and the `BulkRangeSelector` on user requests.

    The controller receives three input messages from the GUI:
        - `on_page_change(first_index, page_size)`: fetch the page that contains `first_index`,
        - `on_selection_toggled(checked_records)`: reconcile the checkboxes of the displayed page,
        - `on_bulk_select_requested(n)`: select the first `n` rows from the displayed page.
    and it reports changes through Qt signals. Network work runs through a runner (`TaskRunner` by default),
    whose callbacks are invoked on the controller's thread, which is the only writer of the state.

    Requests are neither cancelled nor coalesced: when many fetches are in flight, each one applies its
    result when it completes, so the one that completes last determines the displayed page (last-write-wins).
    """

    FETCH_ERROR_MESSAGE = "Failed to fetch artworks"

    state_changed = pyqtSignal(object) # GalleryState
    page_loaded = pyqtSignal(object) # Page
    selection_changed = pyqtSignal(object) # FrozenSet[int]
    error_occurred = pyqtSignal(str)
    bulk_progress = pyqtSignal(int, int) # (page number, rows collected so far)
    bulk_finished = pyqtSignal(object) # BulkSelectionResult
    bulk_rejected = pyqtSignal(str)


    def __init__(self, fetcher: PageFetcher, runner: Any = None, page_size: int = PageFetcher.DEFAULT_PAGE_SIZE,
                 parent: Optional[QObject] = None) -> None:
        """
        Initialize the session with an empty selection, on the first page.

        Args:
            fetcher (PageFetcher): The fetcher of remote pages.
            runner (Any, optional): An object with the `TaskRunner.start` interface. Defaults to a new `TaskRunner`.
            page_size (int): The initial number of rows per page.
            parent (QObject, optional): The parent object of this controller.
        """

        super().__init__(parent)
        if page_size < 1:
            raise ValueError(f"Page size should be positive, got `{page_size}`.")

        self.fetcher = fetcher
        self.runner = runner if runner is not None else TaskRunner(self)
        self.bulk_selector = BulkRangeSelector(fetcher)
        self.reconciler = PageSelectionReconciler()

        # Define class properties (all should be private)
        self._first = 0 # The index of the first row of the displayed page
        self._page_size = page_size
        self._page: Optional[Page] = None # The last page fetched with success
        self._meta: Optional[PaginationMeta] = None
        self._total_records = 0
        self._selection = SelectionSet() # Do not modify it, use the input messages instead
        self._error_message: Optional[str] = None
        self._pending_fetches = 0
        self._pending_bulks = 0
        self._state = GalleryState.IDLE


    # ------------------------------------------------------------------------- Outputs

    @property
    def state(self) -> GalleryState:
        return self._state

    @property
    def page(self) -> Optional[Page]:
        """The displayed page, `None` before the first successful fetch."""
        return self._page

    @property
    def records(self) -> List[Artwork]:
        return list(self._page.records) if self._page is not None else []

    @property
    def meta(self) -> Optional[PaginationMeta]:
        return self._meta

    @property
    def total_records(self) -> int:
        return self._total_records

    @property
    def first_index(self) -> int:
        return self._first

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page_number(self) -> int:
        """The 1-based number of the page containing `first_index`."""
        return self._first // self._page_size + 1

    @property
    def error_message(self) -> Optional[str]:
        """The message of the last failed fetch, `None` after a successful one."""
        return self._error_message

    @property
    def selected_ids(self) -> FrozenSet[int]:
        return self._selection.ids()

    @property
    def selection(self) -> SelectionSet:
        """A copy of the current selection."""
        return self._selection.copy()

    def visible_selection(self) -> List[Artwork]:
        """The selected records of the displayed page, used to render its checkboxes."""
        return self._selection.visible_subset(self._page)

    def is_busy(self) -> bool:
        return self._state in (GalleryState.LOADING, GalleryState.BULK_SELECTING)


    # ------------------------------------------------------------------------- Inputs

    def load(self) -> None:
        """Fetch the first page."""
        self.on_page_change(0, self._page_size)


    def refresh(self) -> None:
        """Fetch the current page again, e.g., to retry after an error."""
        self._fetch_current_page()


    def go_to_page(self, page_number: int) -> None:
        """Fetch the 1-based `page_number` with the current page size."""
        if page_number < 1:
            raise ValueError(f"Page numbers start from 1, got `{page_number}`.")
        self.on_page_change((page_number - 1) * self._page_size, self._page_size)


    def on_page_change(self, first_index: int, page_size: int) -> None:
        """
        Display the page that contains the row `first_index` with `page_size` rows per page.

        The selection is not affected. The state becomes `LOADING` until the fetch completes; on failure
        the previous page and selection are kept and the state becomes `ERROR`.

        Args:
            first_index (int): The 0-based index of the first row of the page, as given by the pager.
            page_size (int): The number of rows per page.
        """

        if first_index < 0:
            raise ValueError(f"The first row index cannot be negative, got `{first_index}`.")
        if page_size < 1:
            raise ValueError(f"Page size should be positive, got `{page_size}`.")
        self._page_size = page_size
        self._first = (first_index // page_size) * page_size # Align to a page boundary
        self._fetch_current_page()


    def on_selection_toggled(self, checked_records: Iterable[Artwork]) -> None:
        """
        Reconcile the checkbox state of the displayed page into the selection.

        Args:
            checked_records (Iterable[Artwork]): All the records of the displayed page that are now checked.
        """

        if self._page is None:
            logger.warning("Ignoring a selection change while no page is displayed.")
            return
        self._selection = self.reconciler.reconcile(self._selection, self._page, checked_records)
        logger.debug("Selection changed on page %d: %d rows selected.", self._page.number, len(self._selection))
        self.selection_changed.emit(self._selection.ids())


    def on_bulk_select_requested(self, n: Any) -> bool:
        """
        Select the first `n` rows starting from the displayed page. The walk across pages runs in background and
        its result replaces the whole selection (also the rows selected by hand), even if it is partial.

        Args:
            n (Any): The number of rows, it should be an integer within `[1, total_records]`.

        Returns:
            bool: True if the walk started, False if the request was rejected (nothing changes).
        """

        try:
            target_count = validate_bulk_request(n, self._total_records)
        except InvalidBulkRequest as e:
            logger.warning("Bulk selection rejected: %s", e)
            self.bulk_rejected.emit(str(e))
            return False

        # Walk from the page on screen, which differs from `_first` after a failed or stale fetch
        if self._page is not None:
            start_page, page_size = self._page.number, self._page.page_size
        else:
            start_page, page_size = self.current_page_number, self._page_size
        self._pending_bulks += 1
        self._update_state()
        self.runner.start(
            self.bulk_selector.select,
            on_result=self._on_bulk_finished,
            on_error=self._on_bulk_failed,
            start_page=start_page,
            page_size=page_size,
            target_count=target_count,
            on_page=self._on_bulk_progress
        )
        return True


    def clear_selection(self) -> None:
        """Deselect all the rows of all the pages."""
        self._selection.clear()
        self.selection_changed.emit(self._selection.ids())


    # ------------------------------------------------------------------------- Callbacks

    def _fetch_current_page(self) -> None:
        page_number = self.current_page_number
        self._pending_fetches += 1
        self._update_state()
        self.runner.start(
            self.fetcher.fetch,
            on_result=self._on_page_fetched,
            on_error=self._on_page_failed,
            page_number=page_number,
            page_size=self._page_size
        )


    def _on_page_fetched(self, page: Page) -> None:
        self._pending_fetches -= 1
        self._page = page
        self._meta = page.meta
        self._total_records = page.meta.total
        self._error_message = None
        logger.info("Displaying page %d of %d (%d artworks).", page.number, page.meta.total_pages, page.meta.total)
        self.page_loaded.emit(page)
        self._update_state()


    def _on_page_failed(self, error: Exception) -> None:
        self._pending_fetches -= 1
        if isinstance(error, NetworkError): # Its message already names the page
            self._error_message = str(error)
        else:
            self._error_message = f"{GalleryController.FETCH_ERROR_MESSAGE}: {error}"
        logger.warning("%s", self._error_message)
        self.error_occurred.emit(self._error_message)
        self._update_state()


    def _on_bulk_progress(self, page_number: int, collected: int) -> None:
        # Invoked on the worker thread, signals are delivered on the controller's thread
        self.bulk_progress.emit(page_number, collected)


    def _on_bulk_finished(self, result: BulkSelectionResult) -> None:
        self._pending_bulks -= 1
        self._selection.replace_with(result.ids)
        if result.complete:
            logger.info("%s", result.describe())
        else:
            logger.warning("%s", result.describe())
        self.selection_changed.emit(self._selection.ids())
        self.bulk_finished.emit(result)
        self._update_state()


    def _on_bulk_failed(self, error: Exception) -> None:
        # Fetch failures are handled by the walk, this is an unexpected error and the selection is kept
        self._pending_bulks -= 1
        logger.error("Bulk selection failed: %r", error)
        self.error_occurred.emit(f"Bulk selection failed: {error}")
        self._update_state()


    def _update_state(self) -> None:
        if self._pending_bulks > 0:
            state = GalleryState.BULK_SELECTING
        elif self._pending_fetches > 0:
            state = GalleryState.LOADING
        elif self._error_message is not None:
            state = GalleryState.ERROR
        else:
            state = GalleryState.IDLE
        if state != self._state:
            logger.debug("Gallery state: %s -> %s.", self._state.value, state.value)
            self._state = state
            self.state_changed.emit(state)
