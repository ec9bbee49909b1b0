"""Scan phases and the workflow that chains them."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from .graph_model import Finding, Scene

FINDER_TITLE = "Missing References Finder"


class ScanState(TypedDict):
    label: str
    scene_paths: List[str]
    active_scene: Optional[Scene]
    include_assets: bool
    unit_weight: float
    progress_offset: float
    cancelled: bool
    findings: List[Finding]
    scenes_scanned: List[str]
    assets_scanned: int
    components_visited: int


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


def initial_state(
    label: str,
    scene_paths: List[str] | None = None,
    active_scene: Optional[Scene] = None,
    include_assets: bool = False,
) -> ScanState:
    scene_paths = list(scene_paths or [])
    units = len(scene_paths) + (1 if active_scene is not None else 0) + (1 if include_assets else 0)
    return {
        "label": label,
        "scene_paths": scene_paths,
        "active_scene": active_scene,
        "include_assets": include_assets,
        "unit_weight": 1.0 / units if units else 1.0,
        "progress_offset": 0.0,
        "cancelled": False,
        "findings": [],
        "scenes_scanned": [],
        "assets_scanned": 0,
        "components_visited": 0,
    }


def build_workflow(
    prepare: PipelinePhase,
    scan_scenes: PipelinePhase,
    scan_assets: PipelinePhase,
    finish: PipelinePhase,
):
    """Compile ``prepare -> scan_scenes -> [scan_assets] -> finish``.

    The asset pass is skipped when the state does not ask for it or a scene
    pass was cancelled.
    """
    graph = StateGraph(ScanState)
    graph.add_node(prepare.phase_name, prepare.run)
    graph.add_node(scan_scenes.phase_name, scan_scenes.run)
    graph.add_node(scan_assets.phase_name, scan_assets.run)
    graph.add_node(finish.phase_name, finish.run)
    graph.add_edge(START, prepare.phase_name)
    graph.add_edge(prepare.phase_name, scan_scenes.phase_name)
    graph.add_conditional_edges(
        scan_scenes.phase_name,
        _route_after_scenes,
        {"assets": scan_assets.phase_name, "finish": finish.phase_name},
    )
    graph.add_edge(scan_assets.phase_name, finish.phase_name)
    graph.add_edge(finish.phase_name, END)
    return graph.compile()


def _route_after_scenes(state: ScanState) -> str:
    if state.get("cancelled") or not state.get("include_assets"):
        return "finish"
    return "assets"
