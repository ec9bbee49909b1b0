"""Tests for property checks, name formatting and asset path rules."""

import pytest

from missing_refs.graph_model import PropertyRecord
from missing_refs.reflection import (
    format_missing_component,
    format_missing_reference,
    is_missing_reference,
    is_project_asset,
    nicify_variable_name,
)


@pytest.mark.parametrize(
    "prop, expected",
    [
        (PropertyRecord("m_Target", True, False, 0), False),
        (PropertyRecord("m_Target", True, False, 1234), True),
        (PropertyRecord("m_Target", True, True, 1234), False),
        (PropertyRecord("m_Speed", False, False, 1234), False),
        (PropertyRecord("m_Target", True, False, -5), True),
    ],
)
def test_is_missing_reference(prop: PropertyRecord, expected: bool) -> None:
    assert is_missing_reference(prop) is expected


@pytest.mark.parametrize(
    "raw, nice",
    [
        ("m_TargetObject", "Target Object"),
        ("targetObject", "Target Object"),
        ("_spawnPoint2", "Spawn Point 2"),
        ("kMaxHP", "Max HP"),
        ("myHTTPServer", "My HTTP Server"),
        ("data", "Data"),
        ("", ""),
    ],
)
def test_nicify_variable_name(raw: str, nice: str) -> None:
    assert nicify_variable_name(raw) == nice


def test_keep_prefix_letter_when_not_a_constant() -> None:
    assert nicify_variable_name("key") == "Key"


@pytest.mark.parametrize(
    "path, platform, expected",
    [
        ("Assets/Prefabs/Enemy.prefab", "darwin", True),
        ("/Applications/Editor/Resources/builtin.asset", "darwin", False),
        ("/opt/editor/Data/builtin.asset", "linux", False),
        ("Packages/com.studio.ui/Button.prefab", "linux", True),
        ("C:/Program Files/Editor/builtin.asset", "win32", False),
        ("Assets/Prefabs/Enemy.prefab", "win32", True),
        ("A", "win32", True),
    ],
)
def test_is_project_asset(path: str, platform: str, expected: bool) -> None:
    assert is_project_asset(path, platform) is expected


def test_message_formats() -> None:
    assert (
        format_missing_reference("Assets/Main.unity", "Player/Gun", "Weapon", "Muzzle Flash")
        == "Missing Ref in: [Assets/Main.unity]Player/Gun. Component: Weapon, Property: Muzzle Flash"
    )
    assert format_missing_component("Player/Gun") == "Missing Component in GO: Player/Gun"
