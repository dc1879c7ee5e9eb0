import argparse
import json
import time

from colorama import Fore, Style

import utils
from utils import (
    DEFAULT_BUILD_LENGTHS,
    DEFAULT_DATA_DIR,
    PRINT_LOCK,
    log_ladder_to_file,
    log_with_time,
)
from components import summarize_components
from dictionary_store import DictionaryStore
from errors import WordLadderError
from preprocess import build_dictionaries
from resolver import Resolver


def print_ladder(path):
    """Print a ladder one word per line, highlighting the letter that changed."""
    with PRINT_LOCK:
        lines = []
        prev = None
        for i, word in enumerate(path):
            cells = []
            for j, ch in enumerate(word):
                if prev is not None and prev[j] != ch:
                    cells.append(Fore.YELLOW + Style.BRIGHT + ch + Style.RESET_ALL)
                else:
                    cells.append(Fore.GREEN + ch + Style.RESET_ALL)
            lines.append(f"{i + 1:>3}. " + " ".join(cells))
            prev = word
        print("\n".join(lines), flush=True)
        print(flush=True)


def parse_lengths(text):
    """Parse "2-10", "4,5,7" or a mix like "2-4,9" into a sorted list of lengths."""
    lengths = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            lo, hi = part.split("-", 1)
            lengths.update(range(int(lo), int(hi) + 1))
        else:
            lengths.add(int(part))
    if not lengths or min(lengths) < 1:
        raise argparse.ArgumentTypeError(f"Invalid length list: {text!r}")
    return sorted(lengths)


def _lengths_arg(text):
    try:
        return parse_lengths(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid length list: {text!r}") from None


def build_parser():
    parser = argparse.ArgumentParser(description="Word ladder engine")
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="Directory holding words-<n>.json artifacts")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Build dictionary artifacts from a word list")
    p_build.add_argument("--source", required=True, help="Path or http(s) URL of a newline-delimited word list")
    p_build.add_argument(
        "--lengths",
        type=_lengths_arg,
        default=list(DEFAULT_BUILD_LENGTHS),
        help='Word lengths to build, e.g. "2-10" or "4,5" (default: 2-10)',
    )
    p_build.add_argument("--workers", type=int, default=None, help="Build lengths in parallel with N processes")
    p_build.add_argument("--skip-header", action="store_true", help="Ignore the first line of the word list")

    p_solve = sub.add_parser("solve", help="Find a shortest ladder between two words")
    p_solve.add_argument("start")
    p_solve.add_argument("end")
    p_solve.add_argument("--json", action="store_true", help="Print the query response as JSON")
    p_solve.add_argument("--log-ladder", action="store_true", help="Save the query and result to a dated JSON log file")

    p_stats = sub.add_parser("stats", help="Summarize a built dictionary")
    p_stats.add_argument("length", type=int)
    return parser


def _run_build(args):
    built, failed = build_dictionaries(
        args.source,
        args.data_dir,
        lengths=args.lengths,
        workers=args.workers,
        skip_header=args.skip_header,
    )
    if failed:
        log_with_time(f"{len(failed)} lengths failed: {sorted(failed)}", color=Fore.RED)
        return 1
    log_with_time(f"✅ Dictionary preprocessing complete ({len(built)} lengths)", color=Fore.GREEN)
    return 0


def _run_solve(args):
    resolver = Resolver(DictionaryStore(args.data_dir))
    result = resolver.resolve(args.start, args.end)
    response = result.to_response()

    if args.log_ladder:
        query = {"startWord": args.start.strip().upper(), "endWord": args.end.strip().upper()}
        log_ladder_to_file(query, response)

    if args.json:
        print(json.dumps(response))
    elif result.ok:
        log_with_time(f"Shortest ladder ({result.length} words):", color=Fore.GREEN)
        print_ladder(result.path)
    else:
        color = Fore.RED if result.failure.category == "unavailable" else Fore.YELLOW
        log_with_time(result.message, color=color)

    if utils.VERBOSE:
        resolver.store.print_cache_summary()
    return 0 if result.ok else 1


def _run_stats(args):
    store = DictionaryStore(args.data_dir)
    artifact = store.load(args.length)
    if artifact is None:
        log_with_time(f"No dictionary for {args.length}-letter words in {args.data_dir}", color=Fore.YELLOW)
        return 1
    stats = summarize_components(artifact.groups)
    edges = sum(len(n) for n in artifact.graph.values()) // 2
    print(f"Words: {len(artifact.words)}")
    print(f"Edges: {edges}")
    print(f"Groups: {stats['components']}")
    print(f"Largest group: {stats['largest']}")
    print(f"Singletons: {stats['singletons']}")
    return 0


def run_ladder(argv=None):
    args = build_parser().parse_args(argv)
    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    commands = {"build": _run_build, "solve": _run_solve, "stats": _run_stats}
    try:
        return commands[args.command](args)
    except WordLadderError as e:
        log_with_time(f"Error: {e}", color=Fore.RED)
        return 1
