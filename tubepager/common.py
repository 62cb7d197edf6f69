"""Helpers for walking loosely-typed InnerTube JSON"""

import re
from typing import Any, Dict, List, Optional


def dig(data: Any, *path) -> Any:
    """
    Follow a path of dict keys and list indexes through raw JSON

    Args:
        data: Raw JSON value
        *path: Keys (str) and list indexes (int), applied in order

    Returns:
        The value at the end of the path, or None if any step is missing
    """
    value = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(value, list) or not -len(value) <= step < len(value):
                return None
            value = value[step]
        else:
            if not isinstance(value, dict):
                return None
            value = value.get(step)
        if value is None:
            return None
    return value


def map_filter(items: List[Dict], key: str) -> List[Dict]:
    return [item[key] for item in items if isinstance(item, dict) and key in item]


def strip_to_int(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    digits = re.sub(r'[^0-9]', '', text)
    return int(digits) if digits else None


def get_text(node: Any) -> Optional[str]:
    if not isinstance(node, dict):
        return None
    if 'simpleText' in node:
        return node['simpleText']
    runs = node.get('runs')
    if isinstance(runs, list) and runs:
        return ''.join(run.get('text', '') for run in runs if isinstance(run, dict))
    return None
