"""Console implementations of the progress and results collaborators."""

import logging
import signal
from typing import Any, Optional

from tqdm import tqdm

from .host import ProgressSink, ResultsChannel

RESULTS_LOGGER = "missing_refs.results"

logger = logging.getLogger(__name__)


class ConsoleProgress(ProgressSink):
    """tqdm bar; Ctrl+C while it is active requests cancellation.

    Use as a context manager so the previous SIGINT handler is restored.
    """

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        self._bar: Optional[tqdm] = None
        self._cancel_requested = False
        self._previous_handler: Any = None

    def __enter__(self) -> "ConsoleProgress":
        self._cancel_requested = False
        self._previous_handler = signal.signal(signal.SIGINT, self._on_interrupt)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.clear()
        if self._previous_handler is not None:
            signal.signal(signal.SIGINT, self._previous_handler)
            self._previous_handler = None

    def request_cancel(self) -> None:
        self._cancel_requested = True

    def show(self, title: str, message: str, progress: float) -> None:
        self._render(title, message, progress)

    def update(self, title: str, message: str, progress: float) -> bool:
        self._render(title, message, progress)
        return self._cancel_requested

    def clear(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def display_dialog(self, title: str, message: str) -> None:
        print(f"{title}: {message}")

    def _render(self, title: str, message: str, progress: float) -> None:
        if not self._enabled:
            return
        if self._bar is None:
            self._bar = tqdm(total=100, unit="%", bar_format="{desc} |{bar}| {percentage:3.0f}%")
        self._bar.set_description_str(f"{title}: {message}", refresh=False)
        self._bar.n = round(min(max(progress, 0.0), 1.0) * 100, 2)
        self._bar.refresh()

    def _on_interrupt(self, signum, frame) -> None:
        logger.warning("Cancellation requested, stopping at the next component.")
        self._cancel_requested = True


class LoggingResults(ResultsChannel):
    """Sends every finding to the ``missing_refs.results`` logger at ERROR."""

    def __init__(self, logger_name: str = RESULTS_LOGGER) -> None:
        self._logger = logging.getLogger(logger_name)
        self.error_count = 0

    def error(self, message: str, node: Any = None) -> None:
        self.error_count += 1
        self._logger.error(message, extra={"node": node})

    def clear(self) -> None:
        self.error_count = 0
