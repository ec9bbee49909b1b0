"""Finder for missing object references in an editor scene/asset graph."""

from .commands import (
    ScanReport,
    ScanStatus,
    find_everywhere,
    find_in_all_scenes,
    find_in_assets,
    find_in_build_scenes,
    find_in_current_scene,
)
from .graph_model import BuildScene, Component, Finding, PropertyRecord, Scene, SceneNode
from .host import ComponentInspectable, GraphProvider, ProgressSink, ResultsChannel
from .reference_walker import ReferenceWalker, TraversalUnit, WalkResult

__all__ = [
    "SceneNode",
    "Component",
    "PropertyRecord",
    "Scene",
    "BuildScene",
    "Finding",
    "ComponentInspectable",
    "GraphProvider",
    "ProgressSink",
    "ResultsChannel",
    "ReferenceWalker",
    "TraversalUnit",
    "WalkResult",
    "ScanReport",
    "ScanStatus",
    "find_in_current_scene",
    "find_in_build_scenes",
    "find_in_all_scenes",
    "find_in_assets",
    "find_everywhere",
]
