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

from dataclasses import dataclass, field
from typing import Tuple

from artwork_gallery.remote.data import Artwork


# The configuration given to the gallery when it starts. It is built in `main.py`
@dataclass
class GalleryConfig:
    """
    Data structure containing the configuration of an artwork gallery session.

    Attributes:
        api_url (str): The endpoint of the remote paginated collection.
        page_size (int): The number of rows shown in a page at start.
        page_size_options (Tuple[int, ...]): The page sizes the user can choose in the pager.
        request_timeout (float): Seconds to wait for a page before failing with `NetworkError`.
        fields (Tuple[str, ...]): The record fields requested to the remote API.
        user_agent (str): The `User-Agent` header sent with every request.
        log_level (str): The level name given to `logging.basicConfig`.
    """

    api_url: str = "https://api.artic.edu/api/v1/artworks"
    page_size: int = 10
    page_size_options: Tuple[int, ...] = (5, 10, 25, 50, 100)
    request_timeout: float = 10.0
    fields: Tuple[str, ...] = field(default_factory=lambda: tuple(Artwork.get_fields_name()))
    user_agent: str = "artwork-gallery/1.0"
    log_level: str = "INFO"


    def validate(self) -> "GalleryConfig":
        """
        Check that the configuration can be used to start a session.

        Returns:
            GalleryConfig: This object, so that calls can be chained.

        Raises:
            ValueError: If the page size, the page size options or the timeout are not positive,
                or if the log level is unknown.
        """

        if self.api_url is None or self.api_url.strip() == "":
            raise ValueError("The API url cannot be empty.")
        if self.page_size <= 0:
            raise ValueError(f"Page size should be positive, got `{self.page_size}`.")
        if any(option <= 0 for option in self.page_size_options):
            raise ValueError(f"Page size options should be positive, got `{self.page_size_options}`.")
        if self.request_timeout <= 0:
            raise ValueError(f"Request timeout should be positive, got `{self.request_timeout}`.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level `{self.log_level}`.")
        return self


    def get_page_size_options(self) -> Tuple[int, ...]:
        """Return the sorted page size options, always including `page_size`."""
        return tuple(sorted(set(self.page_size_options) | {self.page_size}))
