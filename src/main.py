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
import sys

from PyQt5.QtWidgets import QApplication

from artwork_gallery.config import GalleryConfig
from artwork_gallery.controller import GalleryController
from artwork_gallery.gui.window import GalleryWindow
from artwork_gallery.remote.fetcher import PageFetcher


########################################################################
#### Loading Configurations

## The endpoint of the paginated artworks collection
API_URL = "https://api.artic.edu/api/v1/artworks"

## The number of rows shown in a page at start
PAGE_SIZE = 10

## The page sizes that can be chosen in the pager
PAGE_SIZE_OPTIONS = (5, 10, 25, 50, 100)

## Seconds to wait for a page before showing an error
REQUEST_TIMEOUT = 10.0

## The level of the messages printed on the console (e.g., "DEBUG", "INFO", "WARNING")
LOG_LEVEL = "INFO"

########################################################################


def main():
    """
    Entry point of the application.

    Builds the configuration from the constants above, opens the gallery window and loads the first page.
    """

    config = GalleryConfig(
        api_url = API_URL,
        page_size = PAGE_SIZE,
        page_size_options = PAGE_SIZE_OPTIONS,
        request_timeout = REQUEST_TIMEOUT,
        log_level = LOG_LEVEL
    ).validate()
    logging.basicConfig(
        level = config.log_level.upper(),
        format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Start the GUI
    app = QApplication(sys.argv)
    fetcher = PageFetcher.from_config(config)
    controller = GalleryController(fetcher, page_size=config.page_size)
    window = GalleryWindow(controller, config)
    window.show()

    # Initially show the first page
    controller.load()

    exit_code = app.exec_()
    fetcher.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
