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

import itertools
import logging

from typing import Any, Callable, Dict, Optional

from PyQt5.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot


logger = logging.getLogger(__name__)



# Allow running a blocking function without freezing the GUI.
class TaskRunner(QObject):
    """
    Run a blocking function (e.g., a network request) on a `QThreadPool` worker and get back its result on the
    thread that owns the runner (i.e., the GUI thread), where the `on_result` or `on_error` callback is invoked.
    All the callbacks run on the same thread, so the state they modify does not need locks.

    Tasks are never cancelled and they are not de-duplicated: when many tasks are running, their callbacks are
    invoked in the order in which the tasks complete.

    Example:
        ```
        def on_page(page):
            print(f"Got {len(page)} artworks.")

        def on_error(error):
            print(f"Got error: `{error}`.")

        runner = TaskRunner()
        runner.start(fetcher.fetch, on_result=on_page, on_error=on_error, page_number=2)
        ```
    """

    # The key given as output to the asynchronous caller. They are used to identify the output type.
    ERROR_KEY = "error"
    OUTCOME_KEY = "result"

    # Emitted from the worker thread with `(task_id, outcome)`, it is delivered on the runner's thread.
    finished = pyqtSignal(int, object)


    def __init__(self, parent: Optional[QObject] = None, thread_pool: Optional[QThreadPool] = None) -> None:
        """
        Initializes the runner.

        Args:
            parent (QObject, optional): The parent object of this runner. Defaults to None.
            thread_pool (QThreadPool, optional): The pool running the tasks. Defaults to the global pool.
        """

        super().__init__(parent)
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()
        self._callbacks: Dict[int, tuple] = {}
        self._ids = itertools.count(1)
        self.finished.connect(self._on_finished)


    def start(self, function: Callable, on_result: Optional[Callable[[Any], None]] = None,
              on_error: Optional[Callable[[Exception], None]] = None, **kwargs: Any) -> int:
        """
        Start running `function(**kwargs)` on a worker thread.

        Args:
            function (Callable): The blocking function to run.
            on_result (Optional[Callable[[Any], None]]): Called with the returned value.
            on_error (Optional[Callable[[Exception], None]]): Called with the raised exception.
            **kwargs (Any): The keyword arguments given to `function`.

        Returns:
            int: The identifier of the started task.
        """

        task_id = next(self._ids)
        self._callbacks[task_id] = (on_result, on_error)
        self.thread_pool.start(_Task(task_id, function, kwargs, self.finished))
        return task_id


    def pending(self) -> int:
        """The number of started tasks whose callbacks have not been invoked yet."""
        return len(self._callbacks)


    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until all the tasks of the pool are finished (their callbacks are invoked by the event loop)."""
        return self.thread_pool.waitForDone(msecs)


    @pyqtSlot(int, object)
    def _on_finished(self, task_id: int, outcome: Dict[str, Any]) -> None:
        on_result, on_error = self._callbacks.pop(task_id, (None, None))
        TaskRunner.dispatch(outcome, on_result, on_error)


    @staticmethod
    def run(function: Callable, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Run `function(**kwargs)` and wrap its returned value, or the exception it raised, into an outcome."""
        try:
            return TaskRunner.build_outcome(function(**kwargs))
        except Exception as e:
            logger.debug("Task `%s` raised `%r`.", getattr(function, "__name__", function), e)
            return TaskRunner.build_error(e)


    @staticmethod
    def dispatch(outcome: Dict[str, Any], on_result: Optional[Callable[[Any], None]],
                 on_error: Optional[Callable[[Exception], None]]) -> None:
        """Invoke `on_error` if the outcome is an error, `on_result` otherwise."""

        error = TaskRunner.get_error(outcome)
        if error is not None:
            if on_error is not None:
                on_error(error)
            else:
                logger.error("Unhandled error in background task: %s", error)
            return
        if on_result is not None:
            on_result(TaskRunner.get_outcome(outcome))


    @staticmethod
    def build_error(error: Exception) -> Dict[str, Exception]:
        """Builds an error dictionary with the exception raised by a task."""
        return {TaskRunner.ERROR_KEY: error}


    @staticmethod
    def build_outcome(outcome: Any) -> Dict[str, Any]:
        """Builds an outcome dictionary with the value returned by a task."""
        return {TaskRunner.OUTCOME_KEY: outcome}


    @staticmethod
    def get_error(outcome: Dict) -> Optional[Exception]:
        """Retrieves the exception from the given outcome dictionary, if present."""
        return outcome.get(TaskRunner.ERROR_KEY, None)


    @staticmethod
    def get_outcome(outcome: Dict) -> Any:
        """Retrieves the returned value from the given outcome dictionary, `None` if not present."""
        return outcome.get(TaskRunner.OUTCOME_KEY, None)



class _Task(QRunnable):
    """The runnable executed by the pool, it reports its outcome through the runner's `finished` signal."""

    def __init__(self, task_id: int, function: Callable, kwargs: Dict[str, Any], finished) -> None:
        super().__init__()
        self.task_id = task_id
        self.function = function
        self.kwargs = kwargs
        self.finished = finished
        self.setAutoDelete(True)

    def run(self) -> None:
        self.finished.emit(self.task_id, TaskRunner.run(self.function, self.kwargs))



class ImmediateRunner:
    """A runner with the same interface of `TaskRunner` that runs each task inline, on the calling thread.
    Callbacks are invoked before `start` returns. It is used for scripting and tests."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)

    def start(self, function: Callable, on_result: Optional[Callable[[Any], None]] = None,
              on_error: Optional[Callable[[Exception], None]] = None, **kwargs: Any) -> int:
        task_id = next(self._ids)
        TaskRunner.dispatch(TaskRunner.run(function, kwargs), on_result, on_error)
        return task_id

    def pending(self) -> int:
        return 0
