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

from typing import FrozenSet, Iterable, Iterator, List, Optional

from artwork_gallery.remote.data import Artwork, Page



class SelectionSet:
    """The set of selected record identifiers. Membership is collection-wide: an identifier can be selected while
    its page is not displayed, and changing page never changes the set. It provides methods to add, remove, and
    bulk replace identifiers, and to get the selected records of the displayed page."""

    def __init__(self, ids: Optional[Iterable[int]] = None):
        self._ids = set(ids) if ids is not None else set()

    def contains(self, record_id: int) -> bool:
        """Return True if `record_id` is selected."""
        return record_id in self._ids

    def add(self, record_id: int) -> None:
        """Select `record_id`. Nothing happens if it is already selected."""
        self._ids.add(record_id)

    def remove(self, record_id: int) -> None:
        """Deselect `record_id`. Nothing happens if it is not selected."""
        self._ids.discard(record_id)

    def replace_with(self, ordered_ids: Iterable[int]) -> None:
        """Discard all the selected identifiers and select exactly `ordered_ids`. Duplicates are collapsed and
        their order is not retained."""
        self._ids = set(ordered_ids)

    def visible_subset(self, page: Optional[Page]) -> List[Artwork]:
        """Return the records of `page` that are selected, in page order. It is used to render the checkboxes of the
        displayed page and it costs O(page size), not O(selection size)."""
        if page is None:
            return []
        return [record for record in page.records if record.id in self._ids]

    def clear(self) -> None:
        """Deselect everything."""
        self._ids.clear()

    def ids(self) -> FrozenSet[int]:
        """Return an immutable snapshot of the selected identifiers."""
        return frozenset(self._ids)

    def copy(self) -> "SelectionSet":
        """Return an independent copy of this selection."""
        return SelectionSet(self._ids)

    def __contains__(self, record_id: int) -> bool:
        return self.contains(record_id)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def __eq__(self, other) -> bool:
        if isinstance(other, SelectionSet):
            return self._ids == other._ids
        return NotImplemented

    def __repr__(self):
        return f"SelectionSet({sorted(self._ids)})"
