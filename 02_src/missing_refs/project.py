"""Graph provider backed by a JSON dump of an editor project.

Layout of the dump::

    {
      "active_scene": "Assets/Scenes/Main.unity",
      "build_scenes": [{"path": "Assets/Scenes/Main.unity", "enabled": true}],
      "scenes": {"Assets/Scenes/Main.unity": {"roots": [<node>, ...]}},
      "assets": {"Assets/Prefabs/Enemy.prefab": <node>, "Assets/Art/a.png": {"kind": "texture"}}
    }

A node is ``{"name": ..., "components": [<component> | null], "children": [<node>]}``.
A component is ``{"type": ..., "missing": false, "properties": [<property>]}``;
``null`` or ``"missing": true`` stands for a component whose script is gone.
A property is ``{"name": ..., "type": "reference" | ..., "value": ...,
"instance_id": int, "children": [<property>]}``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .graph_model import BuildScene, Component, PropertyRecord, Scene, SceneNode
from .host import GraphProvider

logger = logging.getLogger(__name__)

NODE_KIND = "game_object"
REFERENCE_TYPE = "reference"


class ProjectLoadError(ValueError):
    pass


class SceneNotFoundError(KeyError):
    pass


class JsonProjectProvider(GraphProvider):
    def __init__(self, payload: Dict[str, Any]) -> None:
        if not isinstance(payload, dict):
            raise ProjectLoadError("Project dump must be a JSON object.")
        self._payload = payload
        self._active_path: Optional[str] = payload.get("active_scene") or None

    @classmethod
    def from_path(cls, path: str | Path) -> "JsonProjectProvider":
        project_path = Path(path)
        if project_path.is_dir():
            project_path = project_path / "project.json"
        try:
            payload = json.loads(project_path.read_text(encoding="utf-8"))
        except OSError as error:
            raise ProjectLoadError(f"Cannot read project dump {project_path}: {error}") from error
        except json.JSONDecodeError as error:
            raise ProjectLoadError(f"Malformed project dump {project_path}: {error.msg}") from error
        logger.debug("Loaded project dump %s.", project_path)
        return cls(payload)

    def active_scene(self) -> Optional[Scene]:
        if not self._active_path:
            return None
        return self._build_scene(self._active_path)

    def open_scene(self, path: str) -> Scene:
        scene = self._build_scene(path)
        self._active_path = path
        return scene

    def build_scenes(self) -> List[BuildScene]:
        scenes: List[BuildScene] = []
        entries = self._payload.get("build_scenes", [])
        if not isinstance(entries, list):
            raise ProjectLoadError('"build_scenes" must be a list.')
        for entry in entries:
            if isinstance(entry, str):
                scenes.append(BuildScene(path=entry))
            elif isinstance(entry, dict) and entry.get("path"):
                scenes.append(BuildScene(path=str(entry["path"]), enabled=bool(entry.get("enabled", True))))
            else:
                raise ProjectLoadError(f"Invalid build scene entry: {entry!r}")
        return scenes

    def all_asset_paths(self) -> List[str]:
        return list(self._section("assets"))

    def load_asset(self, path: str) -> Optional[SceneNode]:
        entry = self._section("assets").get(path)
        if not isinstance(entry, dict) or entry.get("kind", NODE_KIND) != NODE_KIND:
            return None
        return _build_node(entry, parent=None)

    def _build_scene(self, path: str) -> Scene:
        scenes = self._section("scenes")
        if path not in scenes:
            raise SceneNotFoundError(path)
        entry = scenes[path]
        if not isinstance(entry, dict):
            raise ProjectLoadError(f"Invalid scene entry for {path}: {entry!r}")
        roots = [_build_node(root, parent=None) for root in entry.get("roots", [])]
        return Scene(path=path, roots=roots)

    def _section(self, key: str) -> Dict[str, Any]:
        section = self._payload.get(key, {})
        if not isinstance(section, dict):
            raise ProjectLoadError(f'"{key}" must be a JSON object, got {type(section).__name__}.')
        return section


def _build_node(payload: Any, parent: Optional[SceneNode]) -> SceneNode:
    if not isinstance(payload, dict) or "name" not in payload:
        raise ProjectLoadError(f"Invalid node entry: {payload!r}")
    node = SceneNode(name=str(payload["name"]), parent=parent)
    node.components = [_build_component(entry) for entry in payload.get("components", [])]
    node.children = [_build_node(child, parent=node) for child in payload.get("children", [])]
    return node


def _build_component(payload: Any) -> Component:
    if payload is None:
        return Component(type_name="", resolved=False)
    if not isinstance(payload, dict):
        raise ProjectLoadError(f"Invalid component entry: {payload!r}")
    return Component(
        type_name=str(payload.get("type", "")),
        properties=list(_flatten_properties(payload.get("properties", []))),
        resolved=not payload.get("missing", False),
    )


def _flatten_properties(entries: List[Any]) -> Iterator[PropertyRecord]:
    """Depth-first, parent before its nested fields and array elements."""
    for entry in entries:
        if not isinstance(entry, dict) or "name" not in entry:
            raise ProjectLoadError(f"Invalid property entry: {entry!r}")
        try:
            identity_token = int(entry.get("instance_id", 0) or 0)
        except (TypeError, ValueError) as error:
            raise ProjectLoadError(f"Invalid instance_id in property {entry['name']!r}: {error}") from error
        yield PropertyRecord(
            name=str(entry["name"]),
            is_reference=entry.get("type") == REFERENCE_TYPE,
            value_present=entry.get("value") is not None,
            identity_token=identity_token,
        )
        yield from _flatten_properties(entry.get("children", []))
