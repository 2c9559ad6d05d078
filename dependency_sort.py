"""
Dependency ordering for type aliases and interfaces.
Nodes are emitted in batches: every node whose dependencies are all emitted is ready.
Raises CyclicDependency if the remaining nodes can never become ready.
"""
from functools import cmp_to_key
from typing import Iterator, List, Sequence

from spec_model import SpecType


class CyclicDependency(Exception):
    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(f"Cycle detected involving {', '.join(self.names)}")


def _compare_by_dependencies(lhs: SpecType, rhs: SpecType) -> int:
    if rhs.name in lhs.dependencies:
        return 1
    if lhs.name in rhs.dependencies:
        return -1
    return 0


def presort_by_dependencies(nodes: Sequence[SpecType]) -> List[SpecType]:
    """
    Stable sort putting a node after the nodes it directly depends on when both are compared.
    Only gives a readable starting order, the batches below guarantee correctness.
    """
    return sorted(nodes, key=cmp_to_key(_compare_by_dependencies))


def iter_dependency_batches(nodes: Sequence[SpecType]) -> Iterator[List[SpecType]]:
    """
    Yield batches of nodes in dependency order. Within a batch the pre-sorted relative
    order is preserved. The nodes' own dependency lists are left untouched.
    """
    remaining = [(node, [d for d in node.dependencies if d != node.name])
                 for node in presort_by_dependencies(nodes)]
    while remaining:
        ready = [entry for entry in remaining if not entry[1]]
        if not ready:
            raise CyclicDependency([node.name for node, _ in remaining])
        remaining = [entry for entry in remaining if entry[1]]
        ready_names = {node.name for node, _ in ready}
        yield [node for node, _ in ready]
        remaining = [(node, [d for d in deps if d not in ready_names]) for node, deps in remaining]


def sort_by_dependencies(nodes: Sequence[SpecType]) -> List[SpecType]:
    """Flattened emission order of iter_dependency_batches."""
    result = []
    for batch in iter_dependency_batches(nodes):
        result.extend(batch)
    return result
