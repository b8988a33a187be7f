"""Widget tests for the gallery window, table, pager and row count dialog."""

import pytest

from conftest import FakeFetcher, make_artworks

from artwork_gallery.config import GalleryConfig
from artwork_gallery.controller import GalleryController, GalleryState
from artwork_gallery.gui.dialog import RowCountDialog
from artwork_gallery.gui.pager import PagerWidget
from artwork_gallery.gui.table import ArtworkTable
from artwork_gallery.gui.window import GalleryWindow
from artwork_gallery.utils.worker import ImmediateRunner


@pytest.fixture
def alerts(monkeypatch):
    shown = []
    monkeypatch.setattr(GalleryWindow, "show_alert",
                        staticmethod(lambda message, title="Error", level=None: shown.append((title, message))))
    return shown


@pytest.fixture
def window(qtbot, fetcher_25, alerts):
    controller = GalleryController(fetcher_25, runner=ImmediateRunner(), page_size=10)
    window = GalleryWindow(controller, GalleryConfig(page_size=10))
    qtbot.addWidget(window)
    controller.load()
    return window


class TestArtworkTable:
    def test_emits_full_checked_set(self, qtbot):
        table = ArtworkTable()
        qtbot.addWidget(table)
        records = make_artworks(4)
        table.set_records(records, checked=[records[0]])

        with qtbot.waitSignal(table.checked_changed, timeout=1000) as blocker:
            table.set_row_checked(2, True)

        assert blocker.args == [[records[0], records[2]]]

    def test_populating_does_not_emit(self, qtbot):
        table = ArtworkTable()
        qtbot.addWidget(table)
        records = make_artworks(3)
        with qtbot.assertNotEmitted(table.checked_changed):
            table.set_records(records, checked=records[:2])
            table.set_checked(records[2:])
        assert table.checked_records() == [records[2]]
        assert table.item(1, 2).text() == records[1].title


class TestPagerWidget:
    def test_next_emits_first_index(self, qtbot):
        pager = PagerWidget((5, 10), 10)
        qtbot.addWidget(pager)
        pager.set_state(0, 10, 25)

        with qtbot.waitSignal(pager.page_changed, timeout=1000) as blocker:
            pager.btn_next.click()

        assert blocker.args == [10, 10]
        assert pager.page_label.text() == "Page 1 of 3 (25 artworks)"
        assert not pager.btn_prev.isEnabled()

    def test_rows_change_goes_back_to_first_row(self, qtbot):
        pager = PagerWidget((5, 10), 10)
        qtbot.addWidget(pager)
        pager.set_state(20, 10, 25)

        with qtbot.waitSignal(pager.page_changed, timeout=1000) as blocker:
            pager.rows_selector.setCurrentIndex(pager.rows_selector.findData(5))

        assert blocker.args == [0, 5]

    def test_last_page_disables_next(self, qtbot):
        pager = PagerWidget((10,), 10)
        qtbot.addWidget(pager)
        pager.set_state(20, 10, 25)
        assert not pager.btn_next.isEnabled()
        assert not pager.btn_last.isEnabled()


def test_row_count_dialog_is_bounded(qtbot):
    dialog = RowCountDialog(total=25)
    qtbot.addWidget(dialog)
    dialog.row_count_input.setValue(100)
    assert dialog.get_value() == 25
    assert dialog.row_count_input.minimum() == 1


class TestGalleryWindow:
    def test_shows_first_page(self, window, artworks_25):
        assert window.table.rowCount() == 10
        assert window.table.records() == artworks_25[:10]
        assert window.pager.page_label.text() == "Page 1 of 3 (25 artworks)"
        assert window.status_label.text() == ""

    def test_checks_persist_across_pages(self, window, artworks_25):
        window.table.set_row_checked(1, True)
        window.table.set_row_checked(3, True)
        window.pager.btn_next.click()
        assert window.table.checked_records() == []
        window.pager.btn_prev.click()

        assert window.table.checked_records() == [artworks_25[1], artworks_25[3]]
        assert window.selection_label.text() == "Selected: 2"

    def test_bulk_selection_updates_checkboxes(self, window, monkeypatch, artworks_25, alerts):
        monkeypatch.setattr(RowCountDialog, "get_row_count", staticmethod(lambda total, parent=None: 13))
        window.btn_select_rows.click()

        assert window.selection_label.text() == "Selected: 13"
        assert window.table.checked_records() == artworks_25[:10]
        assert alerts == []

    def test_partial_bulk_selection_alerts(self, window, fetcher_25, monkeypatch, alerts):
        fetcher_25.fail_on.add(2)
        monkeypatch.setattr(RowCountDialog, "get_row_count", staticmethod(lambda total, parent=None: 20))
        window.btn_select_rows.click()

        assert alerts[0][0] == "Partial Selection"
        assert "page 2" in alerts[0][1]
        assert window.selection_label.text() == "Selected: 10"

    def test_fetch_error_shows_retry(self, window, fetcher_25, artworks_25):
        fetcher_25.fail_on.add(3)
        window.pager.btn_last.click()

        assert window.controller.state == GalleryState.ERROR
        assert window.status_label.text().startswith("Error:")
        assert not window.btn_retry.isHidden()
        assert window.table.records() == artworks_25[:10]

        fetcher_25.fail_on.clear()
        window.btn_retry.click()
        assert window.btn_retry.isHidden()
        assert window.table.records() == artworks_25[20:]

    def test_clear_selection(self, window):
        window.table.set_row_checked(0, True)
        window.btn_clear_selection.click()
        assert window.table.checked_records() == []
        assert window.selection_label.text() == "Selected: 0"


def test_select_rows_without_records_alerts(qtbot, alerts):
    controller = GalleryController(FakeFetcher([]), runner=ImmediateRunner())
    window = GalleryWindow(controller)
    qtbot.addWidget(window)
    window.select_rows()
    assert alerts[0][0] == "Nothing to Select"
