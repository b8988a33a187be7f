"""Unit tests for running blocking functions off the GUI thread."""

import threading

from PyQt5.QtCore import QThreadPool

from artwork_gallery.errors import NetworkError
from artwork_gallery.utils.worker import ImmediateRunner, TaskRunner


def failing_fetch(page_number):
    raise NetworkError(page_number, "boom")


class TestOutcomeHelpers:
    def test_run_wraps_returned_value(self):
        outcome = TaskRunner.run(lambda value: value * 2, {"value": 21})
        assert TaskRunner.get_outcome(outcome) == 42
        assert TaskRunner.get_error(outcome) is None

    def test_run_wraps_raised_exception(self):
        outcome = TaskRunner.run(failing_fetch, {"page_number": 3})
        error = TaskRunner.get_error(outcome)
        assert isinstance(error, NetworkError)
        assert error.page_number == 3

    def test_dispatch_calls_only_matching_callback(self):
        results, errors = [], []
        TaskRunner.dispatch(TaskRunner.build_outcome(None), results.append, errors.append)
        TaskRunner.dispatch(TaskRunner.build_error(ValueError("x")), results.append, errors.append)
        assert results == [None]
        assert len(errors) == 1


class TestImmediateRunner:
    def test_invokes_callbacks_before_returning(self):
        results = []
        ImmediateRunner().start(lambda a, b: a + b, on_result=results.append, a=1, b=2)
        assert results == [3]

    def test_errors_go_to_on_error(self):
        errors = []
        ImmediateRunner().start(failing_fetch, on_error=errors.append, page_number=1)
        assert isinstance(errors[0], NetworkError)


class TestTaskRunner:
    def test_result_is_delivered_on_owner_thread(self, qtbot):
        runner = TaskRunner(thread_pool=QThreadPool())
        main_thread = threading.get_ident()
        worker_threads, callback_threads, results = [], [], []

        def work(value):
            worker_threads.append(threading.get_ident())
            return value + 1

        def on_result(value):
            callback_threads.append(threading.get_ident())
            results.append(value)

        with qtbot.waitSignal(runner.finished, timeout=5000):
            runner.start(work, on_result=on_result, value=1)

        assert results == [2]
        assert callback_threads == [main_thread]
        assert worker_threads[0] != main_thread
        assert runner.pending() == 0

    def test_error_is_delivered(self, qtbot):
        runner = TaskRunner(thread_pool=QThreadPool())
        errors = []
        with qtbot.waitSignal(runner.finished, timeout=5000):
            runner.start(failing_fetch, on_error=errors.append, page_number=4)
        assert errors[0].page_number == 4
