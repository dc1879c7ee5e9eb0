# query.py
# Request/response shape consumed by puzzle generation.

from colorama import Fore

from errors import WordLadderError
from resolver import FailureKind, LadderResult
from utils import log_with_time

STATUS_BY_CATEGORY = {
    "bad-input": 400,
    "not-connected": 400,
    "no-path-found": 404,
    "unavailable": 503,
}


def status_for(result: LadderResult) -> int:
    if result.ok:
        return 200
    if result.failure is FailureKind.NO_DICTIONARY:
        return 404
    return STATUS_BY_CATEGORY[result.failure.category]


def handle_word_ladder_request(payload, resolver):
    """
    Answer ``{"startWord": ..., "endWord": ...}``.
    Returns ``(status, body)`` where body is
    ``{"success": True, "path": [...], "length": n}`` or
    ``{"success": False, "error": message, "reason": category}``.
    Engine errors such as a corrupt artifact become a 500 with reason "internal".
    """
    start = payload.get("startWord") if isinstance(payload, dict) else None
    end = payload.get("endWord") if isinstance(payload, dict) else None
    if not isinstance(start, str) or not isinstance(end, str) or not start.strip() or not end.strip():
        result = LadderResult.fail(FailureKind.MISSING_WORDS, "Missing startWord or endWord")
        return 400, result.to_response()

    try:
        result = resolver.resolve(start, end)
    except WordLadderError as e:
        log_with_time(f"Error in word-ladder query {start!r} -> {end!r}: {e}", color=Fore.RED)
        return 500, {"success": False, "error": "Internal server error", "reason": "internal"}
    return status_for(result), result.to_response()
