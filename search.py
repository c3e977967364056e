from utils import TUPLE_SIZE


def _check_args(start, masks, tuple_size):
    if tuple_size < 1:
        raise ValueError(f"tuple_size must be at least 1, got {tuple_size}")
    if not 0 <= start < len(masks):
        raise IndexError(f"start index {start} out of range for {len(masks)} words")


def search_from(start, adjacency, masks, emit, tuple_size=TUPLE_SIZE, cancel=None):
    """Enumerate every disjoint-letter tuple whose lowest word index is ``start``.

    ``adjacency[i]`` lists the later indices sharing no letter with word ``i``;
    ``masks[i]`` is word ``i``'s letter mask. Each complete tuple is passed to
    ``emit`` as a tuple of ascending indices. ``cancel`` is an optional
    ``threading.Event``; once set, the branch stops before extending further.

    Returns the number of tuples emitted by this branch.
    """
    _check_args(start, masks, tuple_size)

    chosen = [0] * tuple_size
    chosen[0] = start
    found = 0

    def rec(depth, seen):
        nonlocal found
        if cancel is not None and cancel.is_set():
            return
        if depth == tuple_size:
            emit(tuple(chosen))
            found += 1
            return
        # adjacency only guarantees disjointness from the last word;
        # ``seen`` covers every word chosen so far
        for cand in adjacency[chosen[depth - 1]]:
            m = masks[cand]
            if seen & m:
                continue
            chosen[depth] = cand
            rec(depth + 1, seen | m)

    rec(1, masks[start])
    return found


def iter_from(start, adjacency, masks, tuple_size=TUPLE_SIZE):
    """Generator form of :func:`search_from` driven by an explicit stack.

    Yields the same tuples in the same order without recursion. The driver
    uses :func:`search_from`; this is for library callers that want to pull
    solutions lazily or avoid deep recursion with large tuple sizes.
    """
    _check_args(start, masks, tuple_size)
    if tuple_size == 1:
        yield (start,)
        return

    chosen = [start]
    # one frame per chosen word: (union mask so far, iterator over candidates)
    stack = [(masks[start], iter(adjacency[start]))]
    while stack:
        seen, cands = stack[-1]
        for cand in cands:
            m = masks[cand]
            if seen & m:
                continue
            if len(chosen) + 1 == tuple_size:
                yield tuple(chosen) + (cand,)
                continue
            chosen.append(cand)
            stack.append((seen | m, iter(adjacency[cand])))
            break
        else:
            stack.pop()
            chosen.pop()
