"""Scene graph data model primitives for the missing references finder."""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .host import ComponentInspectable

MISSING_REFERENCE = "missing_reference"
MISSING_COMPONENT = "missing_component"


@dataclass(frozen=True)
class PropertyRecord:
    name: str
    is_reference: bool
    value_present: bool
    identity_token: int = 0


@dataclass(eq=False)
class Component(ComponentInspectable):
    """In-memory component holding an already flattened property list."""

    type_name: str
    properties: List[PropertyRecord] = field(default_factory=list)
    resolved: bool = True
    open_handles: int = field(default=0, init=False)
    times_opened: int = field(default=0, init=False)

    def resolves(self) -> bool:
        return self.resolved

    @contextmanager
    def open_properties(self) -> Iterator[Tuple[PropertyRecord, ...]]:
        self.open_handles += 1
        self.times_opened += 1
        try:
            yield tuple(self.properties)
        finally:
            self.open_handles -= 1


@dataclass(eq=False)
class SceneNode:
    name: str
    components: List[ComponentInspectable] = field(default_factory=list)
    children: List["SceneNode"] = field(default_factory=list)
    parent: Optional["SceneNode"] = field(default=None, repr=False)

    def add_child(self, child: "SceneNode") -> "SceneNode":
        child.parent = self
        self.children.append(child)
        return child


@dataclass
class Scene:
    path: str
    roots: List[SceneNode] = field(default_factory=list)


@dataclass(frozen=True)
class BuildScene:
    path: str
    enabled: bool = True


@dataclass(frozen=True)
class Finding:
    kind: str
    context: str
    node_path: str
    message: str
    component_type: str = ""
    property_name: str = ""


def full_path(node: SceneNode) -> str:
    """Slash-joined names from the outermost ancestor down to ``node``."""
    names = [node.name]
    seen = {id(node)}
    current = node.parent
    while current is not None and id(current) not in seen:
        names.append(current.name)
        seen.add(id(current))
        current = current.parent
    return "/".join(reversed(names))
