"""Scene pass: walks the active scene or opens listed scenes one at a time."""

import logging
from typing import Any, Dict, Iterator

from ..graph_model import Scene
from ..host import GraphProvider
from ..pipeline import PipelinePhase
from ..reference_walker import ReferenceWalker

logger = logging.getLogger(__name__)


class ScenePassPhase(PipelinePhase):
    phase_name = "scan_scenes"

    def __init__(self, provider: GraphProvider, walker: ReferenceWalker) -> None:
        self._provider = provider
        self._walker = walker

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        weight = float(context["unit_weight"])
        offset = float(context.get("progress_offset", 0.0))
        findings = list(context.get("findings", []))
        scanned = list(context.get("scenes_scanned", []))
        components = int(context.get("components_visited", 0))
        cancelled = False

        for scene in self._scenes(context):
            outcome = self._walker.walk(
                scene.path, scene.roots, weight=weight, start_progress=offset
            )
            findings.extend(outcome.findings)
            components += outcome.components_visited
            scanned.append(scene.path)
            if outcome.cancelled:
                cancelled = True
                break
            offset += weight

        return {
            "progress_offset": offset,
            "cancelled": cancelled,
            "findings": findings,
            "scenes_scanned": scanned,
            "components_visited": components,
        }

    def _scenes(self, context: Dict[str, Any]) -> Iterator[Scene]:
        scene = context.get("active_scene")
        if scene is not None:
            yield scene
        for path in context.get("scene_paths", []):
            logger.debug("Opening scene %s.", path)
            yield self._provider.open_scene(path)
