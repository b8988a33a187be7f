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

from typing import Iterable

from artwork_gallery.remote.data import Artwork, Page
from artwork_gallery.selection.selection_set import SelectionSet


logger = logging.getLogger(__name__)



class PageSelectionReconciler:
    """
    Merge the checkbox state of the displayed page into the collection-wide `SelectionSet`.

    The table only reports the records that are now checked on the displayed page, not which ones
    changed. Hence, the reconciler should be called once for each checkbox change, with the full
    displayed page and the full checked set:
        1. every checked record is selected,
        2. every record of the displayed page that is not checked is deselected.
    Identifiers that are not on the displayed page are never touched, so selections made on other
    pages persist.
    """

    def reconcile(self, selection: SelectionSet, page: Page, checked_records: Iterable[Artwork]) -> SelectionSet:
        """
        Compute the selection after a checkbox change on `page`.

        Args:
            selection (SelectionSet): The selection before the change. It is not modified.
            page (Page): The displayed page.
            checked_records (Iterable[Artwork]): The records of `page` that the table reports as checked.

        Returns:
            SelectionSet: The updated selection.
        """

        updated = selection.copy()
        page_ids = set(page.ids)

        checked_ids = set()
        for record in checked_records:
            if record.id not in page_ids:
                # The table can only check records of the displayed page
                logger.warning("Ignoring checked artwork %d, it is not on the displayed page %d.", record.id, page.number)
                continue
            checked_ids.add(record.id)
            updated.add(record.id)

        for record_id in page_ids:
            if record_id not in checked_ids:
                updated.remove(record_id)

        return updated
