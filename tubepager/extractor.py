"""Raw item list extraction from browse responses"""

import logging
from typing import Any, Dict, List

from .common import dig
from .constants import TAB_INDEX, TabKind
from .errors import ProtocolShapeError

logger = logging.getLogger(__name__)


def _initial_items_path(kind: TabKind) -> tuple:
    return (
        'contents', 'twoColumnBrowseResultsRenderer', 'tabs', TAB_INDEX[kind],
        'tabRenderer', 'content', 'sectionListRenderer', 'contents', 0,
        'itemSectionRenderer', 'contents', 0, 'gridRenderer', 'items',
    )


CONTINUATION_ITEMS_PATH = (
    'onResponseReceivedActions', 0, 'appendContinuationItemsAction', 'continuationItems',
)


def parse_tab_data(kind: TabKind, payload: Dict[str, Any]) -> List[Dict]:
    """
    Get the raw item list of one browse page.

    The first page of a tab nests its items under the tab selected by
    ``kind``. Continuation pages carry them in an append action that does
    not depend on the tab, so ``kind`` is ignored for that shape.

    Raises:
        ProtocolShapeError: neither response shape resolves to a list
    """
    items = dig(payload, *_initial_items_path(kind))
    if isinstance(items, list) and items:
        logger.debug(f"Parsed {kind.value} tab page with {len(items)} raw items")
        return items

    items = dig(payload, *CONTINUATION_ITEMS_PATH)
    if isinstance(items, list):
        logger.debug(f"Parsed {kind.value} continuation page with {len(items)} raw items")
        return items

    keys = sorted(payload.keys()) if isinstance(payload, dict) else type(payload).__name__
    raise ProtocolShapeError(
        f"Unrecognized browse response for {kind.value} tab (top-level keys: {keys})"
    )
