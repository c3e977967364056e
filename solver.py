import argparse
import time

import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog, RAW_DICT_FILE, CACHE_FILE, OUTPUT_FILE
from dictionary import load_dictionary
from encoder import encode_words
from adjacency import build_adjacency
from driver import run_search, log_graph_summary
from sink import FileSink, MemorySink, SinkWriteError


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find sets of five 5-letter words with no letter in common"
    )
    parser.add_argument("--dict", default=RAW_DICT_FILE,
                        help=f"Raw dictionary file or http(s) URL (default: {RAW_DICT_FILE})")
    parser.add_argument("--cache", default=CACHE_FILE,
                        help=f"Filtered word list cache (default: {CACHE_FILE})")
    parser.add_argument("--no-cache", action="store_true", help="Do not read or write the filtered word cache")
    parser.add_argument("--output", default=OUTPUT_FILE, help=f"Output file (default: {OUTPUT_FILE})")
    parser.add_argument("--threads", type=int, default=None,
                        help="Number of worker threads, 1 runs sequentially (default: executor default)")
    parser.add_argument("--buffered", action="store_true",
                        help="Collect all solutions in memory and write them at the end")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def run_solver(argv=None):
    args = build_parser().parse_args(argv)
    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if args.threads is not None and args.threads < 1:
        log_with_time(f"--threads must be at least 1, got {args.threads}", color=Fore.RED)
        return 1

    cache_path = None if args.no_cache else args.cache
    try:
        words = load_dictionary(args.dict, cache_path=cache_path)
    except FileNotFoundError:
        log_with_time(f"Could not find dictionary file: {args.dict}", color=Fore.RED)
        return 1
    except (OSError, requests.RequestException) as e:
        log_with_time(f"Error loading dictionary: {e}", color=Fore.RED)
        return 1

    t0 = time.time()
    encoded = encode_words(words)
    texts = [w.text for w in encoded]
    masks = [w.mask for w in encoded]
    log_with_time("Building adjacency list")
    adjacency = build_adjacency(masks)
    vlog("Adjacency list built", t0)
    log_graph_summary(texts, adjacency)

    log_with_time("Building cliques")
    try:
        if args.buffered:
            sink = MemorySink(texts)
            total = run_search(adjacency, masks, sink, num_threads=args.threads, progress=args.progress)
            sink.write_to(args.output)
        else:
            with FileSink(args.output, texts) as sink:
                total = run_search(adjacency, masks, sink, num_threads=args.threads, progress=args.progress)
    except SinkWriteError as e:
        log_with_time(f"Could not record solutions: {e}", color=Fore.RED)
        return 1

    log_with_time(f"Found {total} solution(s), written to {args.output}", color=Fore.GREEN)
    total_elapsed = time.time() - utils.start_time
    print(f"Total time: {int(total_elapsed // 60)}m {total_elapsed % 60:.1f}s")
    return 0
