"""Terminal dialog phase."""

from typing import Any, Dict

from ..host import ProgressSink
from ..pipeline import FINDER_TITLE, PipelinePhase

CANCELLED_MESSAGE = "Process cancelled. Current results are shown as errors in the console."
FINISHED_MESSAGE = "Finished finding missing references. Results are shown as errors in the console."


class FinishPhase(PipelinePhase):
    phase_name = "finish"

    def __init__(self, progress: ProgressSink) -> None:
        self._progress = progress

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        self._progress.clear()
        cancelled = bool(context.get("cancelled"))
        self._progress.display_dialog(
            FINDER_TITLE, CANCELLED_MESSAGE if cancelled else FINISHED_MESSAGE
        )
        return {"cancelled": cancelled}
