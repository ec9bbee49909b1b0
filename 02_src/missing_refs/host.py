"""Interfaces for the editor collaborators the finder consumes.

A host binding (an editor plugin, a project dump reader, a test fake) supplies
concrete implementations; the walk and the commands only see these seams.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ContextManager, Iterable, List, Optional

if TYPE_CHECKING:
    from .graph_model import BuildScene, PropertyRecord, Scene, SceneNode


class ComponentInspectable(ABC):
    """Reflection access to one attached component."""

    type_name: str

    @abstractmethod
    def resolves(self) -> bool:
        """False when the component's script or asset no longer exists."""
        raise NotImplementedError

    @abstractmethod
    def open_properties(self) -> ContextManager[Iterable["PropertyRecord"]]:
        """Scoped handle yielding every visible property, nested ones included."""
        raise NotImplementedError


class GraphProvider(ABC):
    @abstractmethod
    def active_scene(self) -> Optional["Scene"]:
        raise NotImplementedError

    @abstractmethod
    def open_scene(self, path: str) -> "Scene":
        raise NotImplementedError

    @abstractmethod
    def build_scenes(self) -> List["BuildScene"]:
        raise NotImplementedError

    @abstractmethod
    def all_asset_paths(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def load_asset(self, path: str) -> Optional["SceneNode"]:
        """Return the asset as a node, or None when it is not a node-type asset."""
        raise NotImplementedError


class ProgressSink(ABC):
    @abstractmethod
    def show(self, title: str, message: str, progress: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def update(self, title: str, message: str, progress: float) -> bool:
        """Report progress and return True when the user asked to cancel."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def display_dialog(self, title: str, message: str) -> None:
        raise NotImplementedError


class ResultsChannel(ABC):
    @abstractmethod
    def error(self, message: str, node: Any = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
