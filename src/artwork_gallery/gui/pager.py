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

from typing import Optional, Sequence

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from artwork_gallery.remote.data import PaginationMeta



class PagerWidget(QWidget):
    """
    The pager below the table: first, previous, next and last buttons, the page label and the rows-per-page combo.

    It does not navigate by itself, it emits `page_changed(first_index, page_size)` and waits for `set_state` to be
    called with the new position (i.e., after the controller accepted the request).
    """

    page_changed = pyqtSignal(int, int) # (first_index, page_size)


    def __init__(self, page_size_options: Sequence[int], page_size: int, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._first = 0
        self._page_size = page_size
        self._total = 0

        self.btn_first = QPushButton("<<")
        self.btn_prev = QPushButton("Previous")
        self.btn_next = QPushButton("Next")
        self.btn_last = QPushButton(">>")
        self.page_label = QLabel("Page: --")
        self.rows_label = QLabel("Rows per page:")
        self.rows_selector = QComboBox()
        for option in page_size_options:
            self.rows_selector.addItem(str(option), option)
        self.rows_selector.setCurrentIndex(max(0, self.rows_selector.findData(page_size)))

        self.btn_first.clicked.connect(lambda: self._emit_page(1))
        self.btn_prev.clicked.connect(lambda: self._emit_page(self.current_page() - 1))
        self.btn_next.clicked.connect(lambda: self._emit_page(self.current_page() + 1))
        self.btn_last.clicked.connect(lambda: self._emit_page(self.total_pages()))
        self.rows_selector.currentIndexChanged.connect(self._on_rows_changed)

        layout = QHBoxLayout()
        layout.addWidget(self.btn_first)
        layout.addWidget(self.btn_prev)
        layout.addWidget(self.page_label)
        layout.addWidget(self.btn_next)
        layout.addWidget(self.btn_last)
        layout.addStretch()
        layout.addWidget(self.rows_label)
        layout.addWidget(self.rows_selector)
        self.setLayout(layout)
        self._update_graphic()


    def set_state(self, first_index: int, page_size: int, total: int) -> None:
        """Show the position of the controller without emitting `page_changed`."""

        self._first = first_index
        self._page_size = page_size
        self._total = total
        self.rows_selector.blockSignals(True)
        index = self.rows_selector.findData(page_size)
        if index >= 0:
            self.rows_selector.setCurrentIndex(index)
        self.rows_selector.blockSignals(False)
        self._update_graphic()


    def current_page(self) -> int:
        return self._first // self._page_size + 1


    def total_pages(self) -> int:
        return max(1, PaginationMeta.compute_total_pages(self._total, self._page_size))


    def _emit_page(self, page_number: int) -> None:
        page_number = min(max(1, page_number), self.total_pages())
        self.page_changed.emit(PaginationMeta.compute_offset(page_number, self._page_size), self._page_size)


    def _on_rows_changed(self, index: int) -> None:
        page_size = self.rows_selector.itemData(index)
        if page_size is None or page_size == self._page_size:
            return
        self.page_changed.emit(0, page_size)


    def _update_graphic(self) -> None:
        page = self.current_page()
        last = self.total_pages()
        self.page_label.setText(f"Page {page} of {last} ({self._total} artworks)")
        self.btn_first.setEnabled(page > 1)
        self.btn_prev.setEnabled(page > 1)
        self.btn_next.setEnabled(page < last)
        self.btn_last.setEnabled(page < last)
