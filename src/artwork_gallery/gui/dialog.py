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

from typing import Optional

from PyQt5.QtWidgets import QDialog, QDialogButtonBox, QLabel, QSpinBox, QVBoxLayout, QWidget



class RowCountDialog(QDialog):
    """The dialog to get the number of rows to select, starting from the displayed page. The value is bounded to
    `[1, total]`, where `total` is the number of records in the collection. It returns the number of rows or `None`
    if the user cancelled the dialog. It is used by `GalleryWindow`."""

    def __init__(self, total: int, parent: Optional[QWidget] = None, initial_value: Optional[int] = None):
        """Initialize the dialog's graphic.
            - total: the number of records in the collection, i.e., the maximum number of rows to select
            - parent: the parent widget
            - initial_value: the value shown when the dialog opens (1 if `None`)
        """

        super().__init__(parent)
        self.setWindowTitle("Select Rows")
        self.resize(350, 100)

        layout = QVBoxLayout(self)
        self.label = QLabel("Enter Number of Rows to Select")
        layout.addWidget(self.label)

        self.row_count_input = QSpinBox()
        self.row_count_input.setRange(1, max(1, total))
        self.row_count_input.setValue(initial_value if initial_value is not None else 1)
        layout.addWidget(self.row_count_input)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Ok).setText("Select")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

        self.row_count_input.setFocus()


    def get_value(self) -> int:
        return self.row_count_input.value()


    @staticmethod
    def get_row_count(total: int, parent: Optional[QWidget] = None) -> Optional[int]:
        """Show the dialog and return the number of rows given by the user, or `None` if cancelled."""

        dialog = RowCountDialog(total, parent)
        if dialog.exec_() == QDialog.Accepted:
            return dialog.get_value()
        return None
