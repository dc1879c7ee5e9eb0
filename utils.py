# --- utils.py ---

import time
import threading
import json
from colorama import Fore, Style, init
import os

init()

# Word lengths the resolver accepts
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 15

# Lengths the offline builder processes unless told otherwise
DEFAULT_BUILD_LENGTHS = tuple(range(2, 11))

DEFAULT_DATA_DIR = os.path.join(os.getcwd(), 'data')

# Masked letter in a wildcard pattern
PLACEHOLDER = '_'

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()


def normalize_word(raw):
    """Uppercase and strip a word at an API boundary."""
    return raw.strip().upper()


def is_ladder_word(word):
    return bool(word) and word.isascii() and word.isalpha() and word.isupper()


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

def log_ladder_to_file(query, result):
    """Record a resolved query in a dated JSON file in the `logs` directory.
    Each word pair keeps the shortest path seen so far; failures are kept only
    until a path is found for the pair."""
    logs_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)
    log_file = os.path.join(logs_dir, f"ladder_{time.strftime('%Y-%m-%d')}.json")

    log_data = {"queries": {}}
    if os.path.exists(log_file):
        try:
            with open(log_file, 'r') as f:
                log_data = json.load(f)
        except (OSError, ValueError):
            log_with_time(f"Could not read {log_file}; starting a new log.", color=Fore.YELLOW)

    key = f"{query['startWord']}->{query['endWord']}"
    queries = log_data.setdefault("queries", {})
    existing = queries.get(key)

    if result.get("success"):
        if existing and existing.get("success") and existing["length"] <= result["length"]:
            log_with_time(f"Existing ladder for {key} in {log_file} is as short; not updated.", color=Fore.YELLOW)
            return
        queries[key] = result
        log_with_time(f"Updated ladder for {key} in {log_file}", color=Fore.GREEN)
    else:
        if existing and existing.get("success"):
            return
        queries[key] = result
        log_with_time(f"Query {key} logged to {log_file}", color=Fore.GREEN)

    with open(log_file, 'w') as f:
        json.dump(log_data, f, indent=2)
