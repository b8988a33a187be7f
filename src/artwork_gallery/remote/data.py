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

import math

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple



def add_json_keys(cls):
    """A decorator to add JSON key constants to the `Artwork` class. Each key is the name of a field in the dataclass,
    which is the same name used by the remote API."""

    props = [f.name for f in fields(cls)]
    ( # order them according with their definition in `Artwork`
        cls.JSON_KEY_ID,
        cls.JSON_KEY_TITLE,
        cls.JSON_KEY_ORIGIN,
        cls.JSON_KEY_ARTIST,
        cls.JSON_KEY_DATE_START,
        cls.JSON_KEY_DATE_END
    ) = props
    return cls



@add_json_keys
@dataclass(frozen=True)
class Artwork:
    """A record of the remote collection. Only `id` matters for selections, the other fields are displayed in the table."""

    id: int # The unique and stable identifier given by the remote collection
    title: str # The artwork title (empty if not given)
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None


    @staticmethod
    def get_fields_name() -> List[str]:
        """Get the list of field names defined in this dataclass, i.e., the `fields` to request to the remote API."""
        return [f.name for f in fields(Artwork)]


    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Artwork":
        """
        Create an `Artwork` from an item of the `data` list returned by the remote API.

        Args:
            data (Dict[str, Any]): The JSON object describing a single artwork.

        Returns:
            Artwork: The parsed record.

        Raises:
            ValueError: If the object has no valid integer `id`.
        """

        if not isinstance(data, dict) or data.get(Artwork.JSON_KEY_ID) is None:
            raise ValueError(f"Artwork without `{Artwork.JSON_KEY_ID}`: {data!r}")
        return Artwork(
            id = int(data[Artwork.JSON_KEY_ID]),
            title = data.get(Artwork.JSON_KEY_TITLE) or "",
            place_of_origin = Artwork._optional_str(data.get(Artwork.JSON_KEY_ORIGIN)),
            artist_display = Artwork._optional_str(data.get(Artwork.JSON_KEY_ARTIST)),
            date_start = Artwork._optional_str(data.get(Artwork.JSON_KEY_DATE_START)),
            date_end = Artwork._optional_str(data.get(Artwork.JSON_KEY_DATE_END))
        )


    @staticmethod
    def _optional_str(value: Any) -> Optional[str]:
        # The API gives dates as integers
        if value is None:
            return None
        return str(value)


    @staticmethod
    def _limit_str(s: Any, limit: int) -> str:
        """An help function to limit the length of a string to `limit` characters, adding an ellipsis if truncated."""

        if s is None or s == "":
            return ""
        s = str(s)
        if len(s) > limit:
            return f"{s[0:limit]}…"
        return s

    def __str__(self):
        title = Artwork._limit_str(self.title, limit=30)
        artist = Artwork._limit_str(self.artist_display, limit=20)
        return f"Artwork(id={self.id}, title={title}, artist={artist})"



@dataclass(frozen=True)
class PaginationMeta:
    """
    The collection-wide pagination data returned with each page.

    Attributes:
        total (int): The number of records in the whole collection.
        limit (int): The page size used for the request.
        offset (int): The index of the first record of the page, i.e., `(current_page - 1) * limit`.
        total_pages (int): The number of pages, i.e., `ceil(total / limit)`.
        current_page (int): The 1-based number of the page this metadata came with.
    """

    total: int
    limit: int
    offset: int
    total_pages: int
    current_page: int

    KEY_TOTAL = "total"
    KEY_LIMIT = "limit"
    KEY_OFFSET = "offset"
    KEY_TOTAL_PAGES = "total_pages"
    KEY_CURRENT_PAGE = "current_page"


    @staticmethod
    def compute_total_pages(total: int, limit: int) -> int:
        """Return `ceil(total / limit)`, or 0 for an empty collection."""
        if limit <= 0:
            raise ValueError(f"Page size should be positive, got `{limit}`.")
        return math.ceil(total / limit) if total > 0 else 0


    @staticmethod
    def compute_offset(page_number: int, limit: int) -> int:
        """Return the index of the first record in the 1-based `page_number`."""
        return (page_number - 1) * limit


    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]], page_number: int, limit: int) -> "PaginationMeta":
        """
        Create the metadata from the `pagination` object returned by the remote API. Missing values
        are derived from the requested `page_number` and `limit`.

        Args:
            data (Optional[Dict[str, Any]]): The `pagination` JSON object (it can be `None`).
            page_number (int): The requested 1-based page.
            limit (int): The requested page size.

        Returns:
            PaginationMeta: The parsed metadata.
        """

        data = data or {}
        limit = int(data.get(PaginationMeta.KEY_LIMIT) or limit)
        total = int(data.get(PaginationMeta.KEY_TOTAL) or 0)
        offset = data.get(PaginationMeta.KEY_OFFSET)
        total_pages = data.get(PaginationMeta.KEY_TOTAL_PAGES)
        current_page = data.get(PaginationMeta.KEY_CURRENT_PAGE)
        return PaginationMeta(
            total = total,
            limit = limit,
            offset = int(offset) if offset is not None else PaginationMeta.compute_offset(page_number, limit),
            total_pages = int(total_pages) if total_pages is not None else PaginationMeta.compute_total_pages(total, limit),
            current_page = int(current_page) if current_page is not None else page_number
        )



@dataclass(frozen=True)
class Page:
    """
    One page of the remote collection, as fetched by `PageFetcher`. It is discarded when the next page is displayed.

    Attributes:
        number (int): The requested 1-based page number.
        page_size (int): The page size used for the request.
        records (Tuple[Artwork, ...]): The records in server-defined order.
        meta (PaginationMeta): The collection-wide pagination data.
    """

    KEY_DATA = "data"
    KEY_PAGINATION = "pagination"

    number: int
    page_size: int
    records: Tuple[Artwork, ...]
    meta: PaginationMeta


    @property
    def ids(self) -> List[int]:
        """The identifiers of the records of this page, in page order."""
        return [record.id for record in self.records]


    def is_last(self) -> bool:
        """True if the page has fewer records than requested, i.e., the collection is exhausted."""
        return len(self.records) < self.page_size


    def __len__(self) -> int:
        return len(self.records)


    @staticmethod
    def from_payload(payload: Dict[str, Any], page_number: int, page_size: int) -> "Page":
        """
        Create a page from the JSON body returned by the remote API, i.e., `{"data": [...], "pagination": {...}}`.

        Raises:
            ValueError: If the body is not a JSON object, if `data` is not a list or if a record is not valid.
        """

        if not isinstance(payload, dict):
            raise ValueError("Response body is not a JSON object.")
        data = payload.get(Page.KEY_DATA)
        if not isinstance(data, list):
            raise ValueError(f"Response body has no `{Page.KEY_DATA}` list.")
        records = tuple(Artwork.from_dict(item) for item in data)
        meta = PaginationMeta.from_dict(payload.get(Page.KEY_PAGINATION), page_number, page_size)
        return Page(number=page_number, page_size=page_size, records=records, meta=meta)
