"""Pipeline phases for a missing references scan."""

from .asset_pass import AssetPassPhase
from .finish import FinishPhase
from .prepare import PrepareSearchPhase
from .scene_pass import ScenePassPhase

__all__ = [
    "PrepareSearchPhase",
    "ScenePassPhase",
    "AssetPassPhase",
    "FinishPhase",
]
