import concurrent.futures
import threading
import time

from colorama import Fore
from tqdm import tqdm

from utils import log_with_time, vlog, WORD_LENGTH, TUPLE_SIZE
from encoder import encode_words
from adjacency import build_adjacency, adjacency_stats
from search import search_from
from sink import MemorySink


def progress_bar(total, desc="", disable=False):
    return tqdm(total=total, desc=desc, disable=disable, ascii=" ▖▘▝▗▚▞█",
                bar_format="{desc}: |{bar:20}| {percentage:3.0f}% {n_fmt}/{total_fmt}")


def run_search(adjacency, masks, sink, tuple_size=TUPLE_SIZE, num_threads=None,
               progress=False, cancel=None):
    """Run one search branch per starting word and feed every solution to ``sink``.

    With ``num_threads == 1`` the branches run one after another on the calling
    thread; otherwise they go to a thread pool (``None`` = executor default).
    ``adjacency`` and ``masks`` are shared read-only by all branches; ``sink``
    must serialize its own writes.

    If a branch fails (for instance the sink cannot write) the remaining
    branches are stopped and the error is re-raised here. ``cancel`` is set in
    that case, or can be set by the caller to stop early.

    Returns the total number of solutions emitted.
    """
    n = len(masks)
    stop = cancel if cancel is not None else threading.Event()
    total = 0
    t0 = time.time()

    with progress_bar(n, desc="Building cliques", disable=not progress) as bar:
        if num_threads == 1:
            for start in range(n):
                try:
                    total += search_from(start, adjacency, masks, sink, tuple_size, stop)
                except Exception:
                    stop.set()
                    raise
                bar.update(1)
        else:
            with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as executor:
                futures = [
                    executor.submit(search_from, start, adjacency, masks, sink, tuple_size, stop)
                    for start in range(n)
                ]
                try:
                    for future in concurrent.futures.as_completed(futures):
                        total += future.result()
                        bar.update(1)
                except Exception:
                    stop.set()
                    for f in futures:
                        f.cancel()
                    raise

    vlog(f"Search over {n} starting words", t0)
    return total


def find_cliques(words, word_length=WORD_LENGTH, tuple_size=TUPLE_SIZE, num_threads=1):
    """Return every disjoint-letter tuple from ``words`` as tuples of word text.

    Non-candidate words are ignored. Results are collected in memory, so this
    suits small dictionaries and library callers.
    """
    encoded = encode_words(dict.fromkeys(words), word_length)
    texts = [w.text for w in encoded]
    masks = [w.mask for w in encoded]
    adjacency = build_adjacency(masks)
    sink = MemorySink(texts)
    run_search(adjacency, masks, sink, tuple_size=tuple_size, num_threads=num_threads)
    return sink.as_words()


def log_graph_summary(words, adjacency):
    edges, max_degree = adjacency_stats(adjacency)
    log_with_time(f"Adjacency list: {len(words)} words, {edges} disjoint pairs", color=Fore.CYAN)
    vlog(f"Largest neighbour list: {max_degree}")
