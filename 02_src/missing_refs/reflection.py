"""Property reflection checks and report formatting."""

import sys

from .graph_model import PropertyRecord

MISSING_REF_TEMPLATE = "Missing Ref in: [{context}]{path}. Component: {component}, Property: {property}"
MISSING_COMPONENT_TEMPLATE = "Missing Component in GO: {path}"


def is_missing_reference(prop: PropertyRecord) -> bool:
    """A reference that was assigned once (nonzero token) but resolves to nothing."""
    return prop.is_reference and not prop.value_present and prop.identity_token != 0


def nicify_variable_name(name: str) -> str:
    """Turn a serialized field name into the label an inspector would show.

    ``m_TargetObject`` -> ``Target Object``, ``kMaxHP`` -> ``Max HP``,
    ``_spawnPoint2`` -> ``Spawn Point 2``.
    """
    if name.startswith("m_"):
        name = name[2:]
    elif name.startswith("_"):
        name = name[1:]
    if len(name) > 1 and name[0] == "k" and name[1].isupper():
        name = name[1:]

    chars = []
    for index, char in enumerate(name):
        if index:
            prev = name[index - 1]
            nxt = name[index + 1] if index + 1 < len(name) else ""
            if char.isupper() and (
                prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower())
            ):
                chars.append(" ")
            elif char.isdigit() and prev.isalpha():
                chars.append(" ")
        chars.append(char)
    nice = "".join(chars)
    return nice[:1].upper() + nice[1:]


def is_project_asset(path: str, platform: str | None = None) -> bool:
    """Tell project-relative asset paths from absolute system/package paths."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return path[1:3] != ":/"
    return not path.startswith("/")


def format_missing_reference(context: str, path: str, component: str, property_name: str) -> str:
    return MISSING_REF_TEMPLATE.format(
        context=context, path=path, component=component, property=property_name
    )


def format_missing_component(path: str) -> str:
    return MISSING_COMPONENT_TEMPLATE.format(path=path)
