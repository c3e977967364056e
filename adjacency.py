from typing import List, Sequence, Tuple


def build_adjacency(masks: Sequence[int]) -> List[List[int]]:
    """For each word index ``i``, list the indices ``j > i`` whose masks share
    no letter with ``masks[i]``.

    Only later indices are kept so that every unordered tuple is reached in
    exactly one (ascending) order. Entries come out sorted ascending. The
    result is shared read-only by every search branch.
    """
    n = len(masks)
    adjacency = [[] for _ in range(n)]
    for i in range(n):
        mi = masks[i]
        row = adjacency[i]
        for j in range(i + 1, n):
            if not (mi & masks[j]):
                row.append(j)
    return adjacency


def adjacency_stats(adjacency) -> Tuple[int, int]:
    """Return (edge count, largest neighbour list)."""
    edges = 0
    max_degree = 0
    for row in adjacency:
        edges += len(row)
        if len(row) > max_degree:
            max_degree = len(row)
    return edges, max_degree
