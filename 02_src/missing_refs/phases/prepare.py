"""Initial progress bar and results reset."""

from typing import Any, Dict

from ..host import ProgressSink, ResultsChannel
from ..pipeline import FINDER_TITLE, PipelinePhase


class PrepareSearchPhase(PipelinePhase):
    phase_name = "prepare"

    def __init__(self, progress: ProgressSink, results: ResultsChannel, clear_console: bool = True) -> None:
        self._progress = progress
        self._results = results
        self._clear_console = clear_console

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if self._clear_console:
            self._results.clear()
        self._progress.show(FINDER_TITLE, f"Preparing search in {context['label']}", 0.0)
        return {"progress_offset": 0.0, "cancelled": False}
