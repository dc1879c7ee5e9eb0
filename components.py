# components.py
# Connected components of an adjacency mapping, used for O(1) reachability checks.

from collections import deque
from typing import Dict, List, Mapping, Sequence


def partition_components(graph: Mapping[str, Sequence[str]]) -> Dict[int, List[str]]:
    """
    Assign every word to a component id (0, 1, 2, ... in discovery order).
    Seeds are taken in sorted word order; members are listed in BFS order.
    """
    groups: Dict[int, List[str]] = {}
    visited = set()

    for seed in sorted(graph):
        if seed in visited:
            continue
        visited.add(seed)
        queue = deque([seed])
        members = []
        while queue:
            current = queue.popleft()
            members.append(current)
            for nb in graph[current]:
                if nb not in visited:
                    visited.add(nb)
                    queue.append(nb)
        groups[len(groups)] = members

    return groups


def component_index(groups: Mapping[int, Sequence[str]]) -> Dict[str, int]:
    """Reverse mapping word -> component id."""
    return {w: gid for gid, members in groups.items() for w in members}


def summarize_components(groups: Mapping[int, Sequence[str]]) -> dict:
    sizes = [len(m) for m in groups.values()]
    return {
        "components": len(sizes),
        "largest": max(sizes, default=0),
        "singletons": sum(1 for s in sizes if s == 1),
    }
