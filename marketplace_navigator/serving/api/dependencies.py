"""
Shared route dependencies
"""

from typing import Any, Iterable

from fastapi import HTTPException, Request

from marketplace_navigator.navigation import RelationalNavigator


def get_navigator(request: Request) -> RelationalNavigator:
    """Navigator of the loaded session, 503 until the snapshot is available"""
    navigator = getattr(request.app.state, "navigator", None)
    if navigator is None:
        raise HTTPException(status_code=503, detail="Snapshot not loaded")
    return navigator


def parse_identifier(raw: str, known: Iterable[Any] = ()) -> Any:
    """
    Turn a path segment into a record id.
    
    Digit strings may stand for integer or string ids; whichever form occurs
    in `known` wins, the integer form otherwise.
    """
    candidates = [raw]
    if raw.lstrip("-").isdigit():
        candidates.insert(0, int(raw))
    known_ids = set(known)
    for candidate in candidates:
        if candidate in known_ids:
            return candidate
    return candidates[0]
