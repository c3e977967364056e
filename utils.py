# --- utils.py ---

import time
import threading
from colorama import Fore, Style, init

init()

# Fixed problem parameters
WORD_LENGTH = 5
TUPLE_SIZE = 5
ALPHABET_SIZE = 26

# Default file names
RAW_DICT_FILE = "words_alpha.txt"
CACHE_FILE = "words_beta.txt"
OUTPUT_FILE = "words_out.txt"

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
