"""Command entry points: one function per search scope.

Every command takes its collaborators explicitly, runs the scan workflow
synchronously and returns a ``ScanReport``. Findings are already delivered to
the results channel by the time the command returns.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .graph_model import Finding
from .host import GraphProvider, ProgressSink, ResultsChannel
from .phases import AssetPassPhase, FinishPhase, PrepareSearchPhase, ScenePassPhase
from .pipeline import ScanState, build_workflow, initial_state
from .reference_walker import ReferenceWalker

logger = logging.getLogger(__name__)


class ScanStatus(str, Enum):
    FINISHED = "finished"
    CANCELLED = "cancelled"


@dataclass
class ScanReport:
    status: ScanStatus
    findings: List[Finding] = field(default_factory=list)
    scenes_scanned: List[str] = field(default_factory=list)
    assets_scanned: int = 0
    components_visited: int = 0

    @property
    def cancelled(self) -> bool:
        return self.status is ScanStatus.CANCELLED


def run_scan(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    state: ScanState,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    walker = ReferenceWalker(progress, results)
    workflow = build_workflow(
        PrepareSearchPhase(progress, results, clear_console=clear_console),
        ScenePassPhase(provider, walker),
        AssetPassPhase(provider, walker, platform=platform),
        FinishPhase(progress),
    )
    final_state = workflow.invoke(state)
    report = ScanReport(
        status=ScanStatus.CANCELLED if final_state.get("cancelled") else ScanStatus.FINISHED,
        findings=list(final_state.get("findings", [])),
        scenes_scanned=list(final_state.get("scenes_scanned", [])),
        assets_scanned=int(final_state.get("assets_scanned", 0)),
        components_visited=int(final_state.get("components_visited", 0)),
    )
    logger.info(
        "Search in %s %s: %d findings in %d scenes and %d assets.",
        state["label"],
        report.status.value,
        len(report.findings),
        len(report.scenes_scanned),
        report.assets_scanned,
    )
    return report


def find_in_current_scene(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    scene = provider.active_scene()
    if scene is None:
        logger.info("No active scene, nothing to search.")
    label = scene.path if scene is not None else "current scene"
    return run_scan(
        provider,
        progress,
        results,
        initial_state(label, active_scene=scene),
        clear_console=clear_console,
        platform=platform,
    )


def find_in_build_scenes(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    paths = [scene.path for scene in provider.build_scenes() if scene.enabled]
    return run_scan(
        provider,
        progress,
        results,
        initial_state("all scenes in build", scene_paths=paths),
        clear_console=clear_console,
        platform=platform,
    )


def find_in_all_scenes(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    paths = [scene.path for scene in provider.build_scenes()]
    return run_scan(
        provider,
        progress,
        results,
        initial_state("all scenes in project", scene_paths=paths),
        clear_console=clear_console,
        platform=platform,
    )


def find_in_assets(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    return run_scan(
        provider,
        progress,
        results,
        initial_state("all assets", include_assets=True),
        clear_console=clear_console,
        platform=platform,
    )


def find_everywhere(
    provider: GraphProvider,
    progress: ProgressSink,
    results: ResultsChannel,
    *,
    clear_console: bool = True,
    platform: str | None = None,
) -> ScanReport:
    paths = [scene.path for scene in provider.build_scenes()]
    return run_scan(
        provider,
        progress,
        results,
        initial_state("everywhere", scene_paths=paths, include_assets=True),
        clear_console=clear_console,
        platform=platform,
    )


COMMANDS = {
    "current": find_in_current_scene,
    "build": find_in_build_scenes,
    "all-scenes": find_in_all_scenes,
    "assets": find_in_assets,
    "everywhere": find_everywhere,
}
