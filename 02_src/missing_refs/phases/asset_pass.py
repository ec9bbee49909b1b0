"""Asset pass: checks every project asset that loads as a node."""

import logging
from typing import Any, Dict

from ..host import GraphProvider
from ..pipeline import PipelinePhase
from ..reference_walker import ReferenceWalker
from ..reflection import is_project_asset

logger = logging.getLogger(__name__)

ASSET_CONTEXT = "Project"


class AssetPassPhase(PipelinePhase):
    phase_name = "scan_assets"

    def __init__(self, provider: GraphProvider, walker: ReferenceWalker, platform: str | None = None) -> None:
        self._provider = provider
        self._walker = walker
        self._platform = platform

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        paths = [
            path for path in self._provider.all_asset_paths() if is_project_asset(path, self._platform)
        ]
        logger.debug("%d project asset paths to check.", len(paths))
        outcome = self._walker.walk_assets(
            ASSET_CONTEXT,
            paths,
            self._provider.load_asset,
            weight=float(context["unit_weight"]),
            start_progress=float(context.get("progress_offset", 0.0)),
        )
        return {
            "progress_offset": outcome.progress,
            "cancelled": outcome.cancelled,
            "findings": list(context.get("findings", [])) + outcome.findings,
            "assets_scanned": int(context.get("assets_scanned", 0)) + outcome.assets_visited,
            "components_visited": int(context.get("components_visited", 0)) + outcome.components_visited,
        }
