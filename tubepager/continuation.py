"""Continuation token tracking"""

from typing import Dict, List, Union

from .common import dig
from .constants import CONTINUATION_RENDERER


class _Exhausted:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'EXHAUSTED'

    def __bool__(self) -> bool:
        return False


# No more pages for a tab; distinct from None, which means "not fetched yet"
EXHAUSTED = _Exhausted()

Cursor = Union[str, None, _Exhausted]


def next_continuation(items: List[Dict]) -> Union[str, _Exhausted]:
    """Return the token of the trailing continuation marker, or EXHAUSTED"""
    if not items:
        return EXHAUSTED

    token = dig(items[-1], CONTINUATION_RENDERER, 'continuationEndpoint', 'continuationCommand', 'token')
    if isinstance(token, str) and token:
        return token
    return EXHAUSTED
