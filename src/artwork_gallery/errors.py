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


class GalleryError(Exception):
    """Base class of all the errors raised by the artwork gallery."""



class NetworkError(GalleryError):
    """
    A page of the remote collection could not be fetched.

    It is raised for transport errors, timeouts, non-success HTTP responses and
    response bodies that cannot be parsed into a page.

    Attributes:
        page_number (int): The 1-based page number that was requested.
        reason (str): A human readable description of the failure.
        status_code (Optional[int]): The HTTP status code, if a response was received.
    """

    def __init__(self, page_number: int, reason: str, status_code: Optional[int] = None):
        self.page_number = page_number
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch artworks page {page_number}: {reason}")



class InvalidBulkRequest(GalleryError):
    """
    A "select the first N rows" request is outside `[1, total]`.

    Attributes:
        requested (Any): The requested number of rows, as given by the caller.
        total (Optional[int]): The known number of records in the collection, `None` if not checked.
    """

    def __init__(self, requested, total: Optional[int] = None):
        self.requested = requested
        self.total = total
        if total is None:
            message = f"Invalid number of rows to select: `{requested}` (it should be a positive integer)."
        else:
            message = f"Invalid number of rows to select: `{requested}` (it should be within [1, {total}])."
        super().__init__(message)
