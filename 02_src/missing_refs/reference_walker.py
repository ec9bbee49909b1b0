"""Breadth-first walk that checks every component of a node hierarchy."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional, Sequence, Set

from .graph_model import MISSING_COMPONENT, MISSING_REFERENCE, Finding, SceneNode, full_path
from .host import ComponentInspectable, ProgressSink, ResultsChannel
from .reflection import (
    format_missing_component,
    format_missing_reference,
    is_missing_reference,
    nicify_variable_name,
)

logger = logging.getLogger(__name__)


@dataclass
class TraversalUnit:
    node: SceneNode
    expected_progress: float


@dataclass
class WalkResult:
    cancelled: bool = False
    progress: float = 0.0
    findings: List[Finding] = field(default_factory=list)
    nodes_visited: int = 0
    components_visited: int = 0
    assets_visited: int = 0


class ReferenceWalker:
    """Finds missing components and missing references below a root set.

    Progress is advanced before each component and the sink is polled at the
    same point; a cancel request ends the walk right there.
    """

    def __init__(self, progress: ProgressSink, results: ResultsChannel) -> None:
        self._progress = progress
        self._results = results

    def walk(
        self,
        context: str,
        roots: Sequence[SceneNode],
        weight: float = 1.0,
        find_in_children: bool = True,
        start_progress: float = 0.0,
    ) -> WalkResult:
        result = WalkResult(progress=start_progress)
        if not roots:
            logger.debug("Nothing to walk in %s.", context)
            return result

        queue: Deque[TraversalUnit] = deque()
        enqueued: Set[int] = set()
        for root in roots:
            if id(root) in enqueued:
                continue
            enqueued.add(id(root))
            queue.append(TraversalUnit(node=root, expected_progress=weight / len(roots)))

        while queue:
            unit = queue.popleft()
            node = unit.node
            share = self._visit(context, unit, find_in_children, result, label=node.name)
            if share is None:
                logger.info("Search in %s cancelled at %s.", context, full_path(node))
                result.cancelled = True
                return result
            if not find_in_children:
                continue
            for child in node.children:
                if child is node or id(child) in enqueued:
                    continue
                enqueued.add(id(child))
                queue.append(TraversalUnit(node=child, expected_progress=share))

        logger.debug(
            "Walked %s: %d nodes, %d components, %d findings.",
            context,
            result.nodes_visited,
            result.components_visited,
            len(result.findings),
        )
        return result

    def walk_assets(
        self,
        context: str,
        paths: Sequence[str],
        loader: Callable[[str], Optional[SceneNode]],
        weight: float = 1.0,
        start_progress: float = 0.0,
    ) -> WalkResult:
        """Check each loadable asset on its own, without descending into children."""
        result = WalkResult(progress=start_progress)
        if not paths:
            return result

        per_asset = weight / len(paths)
        for index, path in enumerate(paths):
            node = loader(path)
            if node is None:
                continue
            result.progress = start_progress + index * per_asset
            unit = TraversalUnit(node=node, expected_progress=per_asset)
            if self._visit(context, unit, False, result, label=path) is None:
                logger.info("Search in %s cancelled at %s.", context, path)
                result.cancelled = True
                return result
            result.assets_visited += 1

        result.progress = start_progress + weight
        return result

    def _visit(
        self,
        context: str,
        unit: TraversalUnit,
        find_in_children: bool,
        result: WalkResult,
        label: str,
    ) -> Optional[float]:
        """Check one node's components; return the per-slot share, or None if cancelled."""
        node = unit.node
        components = list(node.components)
        slots = len(components) + (len(node.children) if find_in_children else 0)
        share = unit.expected_progress / slots if slots else 0.0
        title = f"Searching missing references in {context}"
        result.nodes_visited += 1

        for component in components:
            result.progress += share
            if self._progress.update(title, label, result.progress):
                return None
            result.components_visited += 1
            self._check_component(context, node, component, result)
        return share

    def _check_component(
        self,
        context: str,
        node: SceneNode,
        component: ComponentInspectable,
        result: WalkResult,
    ) -> None:
        path = full_path(node)
        if component is None or not component.resolves():
            self._report(
                Finding(
                    kind=MISSING_COMPONENT,
                    context=context,
                    node_path=path,
                    message=format_missing_component(path),
                ),
                node,
                result,
            )
            return

        with component.open_properties() as properties:
            for prop in properties or ():
                if not is_missing_reference(prop):
                    continue
                property_name = nicify_variable_name(prop.name)
                self._report(
                    Finding(
                        kind=MISSING_REFERENCE,
                        context=context,
                        node_path=path,
                        component_type=component.type_name,
                        property_name=property_name,
                        message=format_missing_reference(
                            context, path, component.type_name, property_name
                        ),
                    ),
                    node,
                    result,
                )

    def _report(self, finding: Finding, node: SceneNode, result: WalkResult) -> None:
        self._results.error(finding.message, node)
        result.findings.append(finding)
