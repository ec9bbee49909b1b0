"""Shared fakes: an in-memory provider and recording collaborators."""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from missing_refs.graph_model import BuildScene, Component, PropertyRecord, Scene, SceneNode
from missing_refs.host import GraphProvider, ProgressSink, ResultsChannel


class RecordingProgress(ProgressSink):
    def __init__(self, cancel_at: Optional[int] = None) -> None:
        self.cancel_at = cancel_at
        self.shown: List[Tuple[str, str, float]] = []
        self.updates: List[Tuple[str, str, float]] = []
        self.dialogs: List[Tuple[str, str]] = []
        self.cleared = 0

    def show(self, title: str, message: str, progress: float) -> None:
        self.shown.append((title, message, progress))

    def update(self, title: str, message: str, progress: float) -> bool:
        self.updates.append((title, message, progress))
        return self.cancel_at is not None and len(self.updates) >= self.cancel_at

    def clear(self) -> None:
        self.cleared += 1

    def display_dialog(self, title: str, message: str) -> None:
        self.dialogs.append((title, message))


class RecordingResults(ResultsChannel):
    def __init__(self) -> None:
        self.messages: List[str] = []
        self.nodes: List[Any] = []
        self.clears = 0

    def error(self, message: str, node: Any = None) -> None:
        self.messages.append(message)
        self.nodes.append(node)

    def clear(self) -> None:
        self.clears += 1


class FakeProvider(GraphProvider):
    def __init__(
        self,
        scenes: Optional[Dict[str, Callable[[], List[SceneNode]]]] = None,
        build: Optional[List[BuildScene]] = None,
        assets: Optional[Dict[str, Optional[SceneNode]]] = None,
        active: Optional[str] = None,
    ) -> None:
        self.scenes = scenes or {}
        self.build = build or []
        self.assets = assets or {}
        self.active = active
        self.opened: List[str] = []
        self.loaded: List[str] = []
        self.active_calls = 0

    def active_scene(self) -> Optional[Scene]:
        self.active_calls += 1
        if self.active is None:
            return None
        return Scene(path=self.active, roots=self.scenes[self.active]())

    def open_scene(self, path: str) -> Scene:
        self.opened.append(path)
        self.active = path
        return Scene(path=path, roots=self.scenes[path]())

    def build_scenes(self) -> List[BuildScene]:
        return list(self.build)

    def all_asset_paths(self) -> List[str]:
        return list(self.assets)

    def load_asset(self, path: str) -> Optional[SceneNode]:
        self.loaded.append(path)
        return self.assets.get(path)


def ref(name: str, token: int = 0, present: bool = False) -> PropertyRecord:
    return PropertyRecord(name=name, is_reference=True, value_present=present, identity_token=token)


def value(name: str) -> PropertyRecord:
    return PropertyRecord(name=name, is_reference=False, value_present=True)


def component(type_name: str, *properties: PropertyRecord) -> Component:
    return Component(type_name=type_name, properties=list(properties))


def node(name: str, *components: Component, children: Tuple[SceneNode, ...] = ()) -> SceneNode:
    result = SceneNode(name=name, components=list(components))
    for child in children:
        result.add_child(child)
    return result


@pytest.fixture()
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture()
def results() -> RecordingResults:
    return RecordingResults()
