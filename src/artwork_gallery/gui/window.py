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

from typing import FrozenSet, Optional

from PyQt5.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)
from PyQt5.QtGui import QCloseEvent

from artwork_gallery.config import GalleryConfig
from artwork_gallery.controller import GalleryController, GalleryState
from artwork_gallery.gui.dialog import RowCountDialog
from artwork_gallery.gui.pager import PagerWidget
from artwork_gallery.gui.table import ArtworkTable
from artwork_gallery.remote.data import Page
from artwork_gallery.selection.bulk import BulkSelectionResult


logger = logging.getLogger(__name__)



class GalleryWindow(QMainWindow): # The main GUI view.
    """
    Main GUI application to browse the artworks collection and select rows across pages.

    It is a thin view over `GalleryController`: user actions are forwarded to the controller as input
    messages and the widgets are refreshed from the controller's signals.
    """

    def __init__(self, controller: GalleryController, config: Optional[GalleryConfig] = None):
        """
        Initialize the window with all UI components and connect them to the `controller`.

        Args:
            controller (GalleryController): The session to show.
            config (Optional[GalleryConfig]): The configuration providing the page size options.
        """

        super().__init__()
        self.controller = controller
        self.config = config if config is not None else GalleryConfig()
        self.init_graphic()

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.page_loaded.connect(self._on_page_loaded)
        self.controller.selection_changed.connect(self._on_selection_changed)
        self.controller.error_occurred.connect(self._on_error)
        self.controller.bulk_progress.connect(self._on_bulk_progress)
        self.controller.bulk_finished.connect(self._on_bulk_finished)
        self.controller.bulk_rejected.connect(lambda message: self.show_alert(message, "Invalid Request", QMessageBox.Warning))
        self._on_state_changed(self.controller.state)


    def init_graphic(self) -> None:
        """Create the window layout: selection tools, status line, table and pager."""

        self.setWindowTitle("Artwork Gallery")
        self.resize(1000, 600)

        self.btn_select_rows = QPushButton("Select rows...")
        self.btn_clear_selection = QPushButton("Clear selection")
        self.selection_label = QLabel("Selected: 0")
        self.status_label = QLabel("")
        self.btn_retry = QPushButton("Retry")
        self.table = ArtworkTable()
        self.pager = PagerWidget(self.config.get_page_size_options(), self.controller.page_size)

        self.btn_select_rows.clicked.connect(self.select_rows)
        self.btn_clear_selection.clicked.connect(self.controller.clear_selection)
        self.btn_retry.clicked.connect(self.controller.refresh)
        self.table.checked_changed.connect(self.controller.on_selection_toggled)
        self.pager.page_changed.connect(self.controller.on_page_change)

        tools_layout = QHBoxLayout()
        tools_layout.addWidget(self.btn_select_rows)
        tools_layout.addWidget(self.btn_clear_selection)
        tools_layout.addWidget(self.selection_label)
        tools_layout.addStretch()

        status_layout = QHBoxLayout()
        status_layout.addWidget(self.status_label)
        status_layout.addStretch()
        status_layout.addWidget(self.btn_retry)

        layout = QVBoxLayout()
        layout.addLayout(tools_layout)
        layout.addLayout(status_layout)
        layout.addWidget(self.table)
        layout.addWidget(self.pager)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)


    def select_rows(self) -> None:
        """Ask the number of rows to select and start the bulk selection."""

        total = self.controller.total_records
        if total <= 0:
            self.show_alert("There are no artworks to select yet.", "Nothing to Select", QMessageBox.Information)
            return
        row_count = RowCountDialog.get_row_count(total, self)
        if row_count is not None:
            self.controller.on_bulk_select_requested(row_count)


    @staticmethod
    def show_alert(message: str, title: str = "Error", level: QMessageBox.Icon = None) -> None:
        """
        Show alert dialog with message.

        Args:
            message (str): Alert message to display
            title (str): Dialog title
            level (QMessageBox.Icon): Alert level/icon type
        """

        alert = QMessageBox()
        if level is not None:
            alert.setIcon(level)
        alert.setWindowTitle(title)
        alert.setText(message)
        alert.setStandardButtons(QMessageBox.Ok)
        alert.exec_()


    def _on_state_changed(self, state: GalleryState) -> None:
        busy = state in (GalleryState.LOADING, GalleryState.BULK_SELECTING)
        self.btn_select_rows.setEnabled(state != GalleryState.BULK_SELECTING)
        self.btn_retry.setVisible(state == GalleryState.ERROR)
        self.table.setEnabled(not busy)
        if state == GalleryState.LOADING:
            self.status_label.setText("Loading...")
        elif state == GalleryState.BULK_SELECTING:
            self.status_label.setText("Selecting rows...")
        elif state == GalleryState.ERROR:
            self.status_label.setText(f"Error: {self.controller.error_message}")
        else:
            self.status_label.setText("")


    def _on_page_loaded(self, page: Page) -> None:
        self.table.set_records(page.records, self.controller.visible_selection())
        self.pager.set_state(self.controller.first_index, self.controller.page_size, self.controller.total_records)


    def _on_selection_changed(self, selected_ids: FrozenSet[int]) -> None:
        self.selection_label.setText(f"Selected: {len(selected_ids)}")
        self.table.set_checked(self.controller.visible_selection())


    def _on_error(self, message: str) -> None:
        self.status_label.setText(f"Error: {message}")


    def _on_bulk_progress(self, page_number: int, collected: int) -> None:
        self.status_label.setText(f"Selecting rows... page {page_number} ({collected} rows)")


    def _on_bulk_finished(self, result: BulkSelectionResult) -> None:
        if not result.complete:
            self.show_alert(result.describe(), "Partial Selection", QMessageBox.Warning)


    def closeEvent(self, event: QCloseEvent) -> None:
        """Wait for the background requests before closing, so that no callback reaches a deleted window."""

        wait_for_done = getattr(self.controller.runner, "wait_for_done", None)
        if wait_for_done is not None:
            wait_for_done(5000)
        logger.info("Closing the gallery with %d selected rows.", len(self.controller.selected_ids))
        event.accept()
