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

from typing import Iterable, List, Optional, Sequence

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QAbstractItemView, QHeaderView, QTableWidget, QTableWidgetItem, QWidget

from artwork_gallery.remote.data import Artwork



class ArtworkTable(QTableWidget):
    """The table showing the records of the displayed page, with a checkbox in the first column. When the user
    changes a checkbox, `checked_changed` is emitted with all the records that are now checked (not only the changed
    one), since the controller reconciles the whole page."""

    ID_ROLE = Qt.UserRole + 1 # Item data role storing the artwork identifier

    # The columns after the checkbox one, as (header, `Artwork` field)
    COLUMNS = (
        ("ID", Artwork.JSON_KEY_ID),
        ("Title", Artwork.JSON_KEY_TITLE),
        ("Artist", Artwork.JSON_KEY_ARTIST),
        ("Origin", Artwork.JSON_KEY_ORIGIN),
        ("Date Start", Artwork.JSON_KEY_DATE_START),
        ("Date End", Artwork.JSON_KEY_DATE_END),
    )

    checked_changed = pyqtSignal(object) # List[Artwork]


    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(0, len(ArtworkTable.COLUMNS) + 1, parent)
        self._records: List[Artwork] = []
        self._populating = False

        self.setHorizontalHeaderLabels([""] + [header for header, _ in ArtworkTable.COLUMNS])
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.verticalHeader().setVisible(False)
        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.Stretch)
        self.itemChanged.connect(self._on_item_changed)


    def set_records(self, records: Sequence[Artwork], checked: Iterable[Artwork] = ()) -> None:
        """Show `records` and check the ones in `checked`. It does not emit `checked_changed`."""

        checked_ids = {record.id for record in checked}
        self._populating = True
        try:
            self.setRowCount(0)
            self._records = list(records)
            self.setRowCount(len(self._records))
            for row, record in enumerate(self._records):
                check_item = QTableWidgetItem()
                check_item.setFlags(Qt.ItemIsUserCheckable | Qt.ItemIsEnabled)
                check_item.setCheckState(Qt.Checked if record.id in checked_ids else Qt.Unchecked)
                check_item.setData(ArtworkTable.ID_ROLE, record.id)
                self.setItem(row, 0, check_item)
                for column, (_, field_name) in enumerate(ArtworkTable.COLUMNS, start=1):
                    value = getattr(record, field_name)
                    self.setItem(row, column, QTableWidgetItem("" if value is None else str(value)))
        finally:
            self._populating = False


    def set_checked(self, checked: Iterable[Artwork]) -> None:
        """Update the checkboxes without emitting `checked_changed` (e.g., after a bulk selection)."""

        checked_ids = {record.id for record in checked}
        self._populating = True
        try:
            for row, record in enumerate(self._records):
                self.item(row, 0).setCheckState(Qt.Checked if record.id in checked_ids else Qt.Unchecked)
        finally:
            self._populating = False


    def set_row_checked(self, row: int, checked: bool) -> None:
        """Change the checkbox of `row` as the user would do, i.e., `checked_changed` is emitted."""
        self.item(row, 0).setCheckState(Qt.Checked if checked else Qt.Unchecked)


    def records(self) -> List[Artwork]:
        return list(self._records)


    def checked_records(self) -> List[Artwork]:
        """The records whose checkbox is checked, in page order."""
        return [record for row, record in enumerate(self._records)
                if self.item(row, 0) is not None and self.item(row, 0).checkState() == Qt.Checked]


    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating or item.column() != 0:
            return
        self.checked_changed.emit(self.checked_records())
