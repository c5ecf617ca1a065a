"""Rebuild the reporting hierarchy from flat directory records.

Employees only name their supervisor by display name, so the forest is
reconstructed in two ordered passes over the records that pass the
active filter:

1. **Index** — one node per employee, keyed by display name.  When two
   employees share a display name the later one wins the key.
2. **Link** — every node whose supervisor resolves through the index is
   appended to that supervisor's children.  Anything unresolved stays a
   root.

Nodes live in a flat list and refer to each other by position.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from bhr.core.models import Employee, HierarchyNode
from bhr.core.record_filter import RecordFilter, match_all
from bhr.exceptions import SupervisorCycleError


class Directory:
    """The full employee list plus the hierarchy of its filtered subset.

    Parameters
    ----------
    employees:
        Every record returned by the API, in API order.
    nodes:
        One node per filtered-in employee, in the same relative order.
    index:
        Display name → position in *nodes*.
    """

    def __init__(
        self,
        employees: Sequence[Employee],
        nodes: list[HierarchyNode],
        index: dict[str, int],
    ) -> None:
        self.employees: tuple[Employee, ...] = tuple(employees)
        self.nodes: list[HierarchyNode] = nodes
        self._index: dict[str, int] = index

    def __len__(self) -> int:
        return len(self.nodes)

    def lookup(self, display_name: str) -> HierarchyNode | None:
        """Return the indexed node for *display_name*, if any."""
        position = self._index.get(display_name)
        return None if position is None else self.nodes[position]

    def roots(self) -> Iterator[int]:
        """Yield positions of parentless nodes in directory order."""
        for position, node in enumerate(self.nodes):
            if node.is_root:
                yield position

    def children(self, position: int) -> list[HierarchyNode]:
        return [self.nodes[child] for child in self.nodes[position].children]


def build_directory(
    employees: Sequence[Employee],
    record_filter: RecordFilter = match_all,
) -> Directory:
    """Build a :class:`Directory` from *employees* restricted by *record_filter*.

    Raises
    ------
    SupervisorCycleError
        If following supervisor links from some employee leads back to
        that employee.
    """
    nodes: list[HierarchyNode] = []
    index: dict[str, int] = {}

    # Pass 1: index by display name (last write wins).
    for employee in employees:
        if not record_filter(employee):
            continue
        index[employee.display_name] = len(nodes)
        nodes.append(HierarchyNode(employee=employee))

    # Pass 2: attach each node to its supervisor.
    for position, node in enumerate(nodes):
        supervisor = index.get(node.employee.supervisor)
        if supervisor is None:
            continue
        nodes[supervisor].children.append(position)
        node.parent = supervisor

    cycle = _find_cycle(nodes)
    if cycle is not None:
        raise SupervisorCycleError(
            [nodes[position].employee.display_name for position in cycle],
            hint="Fix the supervisor field of one of these employees in BambooHR.",
        )

    return Directory(employees, nodes, index)


def _find_cycle(nodes: list[HierarchyNode]) -> list[int] | None:
    """Return the positions of one supervisor cycle, or ``None``.

    Each node has at most one parent, so walking parent links from any
    node either reaches a root or enters a loop.  Nodes already proven
    to reach a root are not walked again.
    """
    settled: set[int] = set()
    for start in range(len(nodes)):
        path: list[int] = []
        on_path: set[int] = set()
        current: int | None = start
        while current is not None and current not in settled:
            if current in on_path:
                # Report the loop in supervisor → report order.
                loop = path[path.index(current):]
                return loop[::-1]
            on_path.add(current)
            path.append(current)
            current = nodes[current].parent
        settled.update(path)
    return None
