import os
import time

import requests
from colorama import Fore

from utils import log_with_time, vlog, WORD_LENGTH
from encoder import is_candidate


def read_word_list(path):
    """Read whitespace-separated words from ``path``, lowercased."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return [w.lower() for w in f.read().split()]


def download_word_list(url, timeout=30):
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return [w.lower() for w in resp.text.split()]


def filter_words(words, word_length=WORD_LENGTH):
    """Keep candidate words in their original order, dropping repeats."""
    seen = set()
    kept = []
    for w in words:
        if w in seen or not is_candidate(w, word_length):
            continue
        seen.add(w)
        kept.append(w)
    return kept


CACHE_HEADER = "#source "


def source_stamp(source, word_length=WORD_LENGTH):
    """Identify the raw dictionary a cache was built from.

    Files are identified by absolute path, size and modification time; URLs by
    the URL alone.
    """
    if _is_url(source):
        return f"{source} len={word_length}"
    st = os.stat(source)
    return f"{os.path.abspath(source)} size={st.st_size} mtime={st.st_mtime_ns} len={word_length}"


def write_cache(path, stamp, words):
    with open(path, "w", encoding="utf-8") as f:
        f.write(CACHE_HEADER + stamp + "\n")
        for w in words:
            f.write(w + "\n")


def read_cache(path):
    """Return (stamp, words) from a cache file; stamp is None without a header."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        lines = f.read().splitlines()
    stamp = None
    if lines and lines[0].startswith(CACHE_HEADER):
        stamp = lines[0][len(CACHE_HEADER):]
        lines = lines[1:]
    return stamp, [w.strip() for w in lines if w.strip()]


def _is_url(source):
    return source.startswith(("http://", "https://"))


def load_dictionary(source, cache_path=None, word_length=WORD_LENGTH):
    """Return the candidate words for the search.

    ``source`` is a file path or an http(s) URL. A cache at ``cache_path`` is
    reused only when its header names the same source (same path, size and
    mtime for files); otherwise the source is read, filtered and the cache
    rewritten. Failing to write the cache is only a warning.
    """
    t0 = time.time()
    stamp = source_stamp(source, word_length)
    if cache_path and os.path.exists(cache_path):
        cached_stamp, cached = read_cache(cache_path)
        if cached_stamp == stamp:
            words = filter_words(cached, word_length)
            vlog(f"Read cached word list {cache_path}", t0)
            log_with_time(f"✅ {len(words)} words (cached)")
            return words
        log_with_time(f"Cache {cache_path} was built from another dictionary, rebuilding", color=Fore.YELLOW)

    if _is_url(source):
        log_with_time("⟳ Downloading dictionary…")
        raw = download_word_list(source)
    else:
        raw = read_word_list(source)
    words = filter_words(raw, word_length)
    vlog(f"Dictionary loaded and filtered ({len(raw)} -> {len(words)} words)", t0)

    if cache_path:
        try:
            write_cache(cache_path, stamp, words)
            log_with_time(f"Filtered word list cached to {cache_path}", color=Fore.GREEN)
        except OSError as e:
            log_with_time(f"Could not write cache {cache_path}: {e}", color=Fore.YELLOW)
    log_with_time(f"✅ {len(words)} words")
    return words
