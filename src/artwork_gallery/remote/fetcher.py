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
import requests

from typing import Optional, Sequence

from artwork_gallery.config import GalleryConfig
from artwork_gallery.errors import NetworkError
from artwork_gallery.remote.data import Artwork, Page


logger = logging.getLogger(__name__)



class PageFetcher:
    """
    Request one page of the remote artworks collection at a time.

    Each call of `fetch` performs exactly one HTTP GET and it never retries: the retry policy belongs
    to the caller. Any failure is raised as `NetworkError` with the number of the requested page.
    The fetcher keeps no state about pages (i.e., nothing is cached), so it can be shared between
    the page navigation and the bulk selection walk, which run on different threads. Each request goes
    through `requests.get` unless a session is given, and a given session must not be shared between threads.
    """

    DEFAULT_API_URL = "https://api.artic.edu/api/v1/artworks"
    DEFAULT_PAGE_SIZE = 10
    DEFAULT_TIMEOUT = 10.0

    # Query parameters of the remote API
    PARAM_PAGE = "page"
    PARAM_LIMIT = "limit"
    PARAM_FIELDS = "fields"


    def __init__(self, api_url: str = DEFAULT_API_URL, page_size: int = DEFAULT_PAGE_SIZE,
                 timeout: float = DEFAULT_TIMEOUT, fields: Optional[Sequence[str]] = None,
                 session: Optional[requests.Session] = None, user_agent: Optional[str] = None) -> None:
        """
        Initialize the fetcher.

        Args:
            api_url (str): The collection endpoint.
            page_size (int): The page size used when `fetch` is called without one.
            timeout (float): Seconds to wait for the server before failing.
            fields (Optional[Sequence[str]]): The record fields to request. Defaults to all the `Artwork` fields.
            session (Optional[requests.Session]): The HTTP session to use, e.g., in tests. If `None`, each
                request is sent with `requests.get`.
            user_agent (Optional[str]): The optional `User-Agent` header.
        """

        self.api_url = api_url
        self.page_size = page_size
        self.timeout = timeout
        self.fields = list(fields) if fields is not None else Artwork.get_fields_name()
        self.session = session
        self.headers = {"User-Agent": user_agent} if user_agent else {}


    @staticmethod
    def from_config(config: GalleryConfig, session: Optional[requests.Session] = None) -> "PageFetcher":
        """Create a fetcher from a `GalleryConfig`."""
        return PageFetcher(
            api_url = config.api_url,
            page_size = config.page_size,
            timeout = config.request_timeout,
            fields = config.fields,
            session = session,
            user_agent = config.user_agent
        )


    def build_params(self, page_number: int, page_size: int) -> dict:
        """Build the query parameters to request the 1-based `page_number` with `page_size` records."""
        params = {PageFetcher.PARAM_PAGE: page_number, PageFetcher.PARAM_LIMIT: page_size}
        if self.fields:
            params[PageFetcher.PARAM_FIELDS] = ",".join(self.fields)
        return params


    def fetch(self, page_number: int, page_size: Optional[int] = None) -> Page:
        """
        Fetch a single page of the collection.

        Args:
            page_number (int): The 1-based number of the page.
            page_size (Optional[int]): The number of records per page. Defaults to the fetcher's `page_size`.

        Returns:
            Page: The records of the page with the collection-wide pagination metadata.

        Raises:
            ValueError: If `page_number` or `page_size` is not positive (no request is made).
            NetworkError: On transport errors, timeouts, non-success responses or malformed bodies.
        """

        if page_size is None:
            page_size = self.page_size
        if page_number < 1:
            raise ValueError(f"Page numbers start from 1, got `{page_number}`.")
        if page_size < 1:
            raise ValueError(f"Page size should be positive, got `{page_size}`.")

        logger.debug("Fetching page %d (limit %d) from `%s`.", page_number, page_size, self.api_url)
        try:
            requester = self.session if self.session is not None else requests
            response = requester.get(self.api_url, params=self.build_params(page_number, page_size),
                                     headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise NetworkError(page_number, f"server answered with status `{status_code}`", status_code) from e
        except requests.Timeout as e:
            raise NetworkError(page_number, f"no answer within {self.timeout} seconds") from e
        except requests.RequestException as e:
            raise NetworkError(page_number, str(e)) from e

        try:
            payload = response.json()
        except ValueError as e: # `requests.JSONDecodeError` is a `ValueError`
            raise NetworkError(page_number, f"response is not valid JSON ({e})", response.status_code) from e

        try:
            page = Page.from_payload(payload, page_number, page_size)
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError(page_number, f"unexpected response content ({e})") from e

        logger.debug("Fetched page %d with %d records (total %d).", page_number, len(page), page.meta.total)
        return page


    def close(self) -> None:
        """Release the HTTP connections of the session, if any."""
        if self.session is not None:
            self.session.close()
