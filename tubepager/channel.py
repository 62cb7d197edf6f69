"""Channel model with paginated videos and playlists"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from .base import Base
from .common import dig, get_text, map_filter, strip_to_int
from .constants import BROWSE_ENDPOINT, TAB_PARAMS, TAB_RENDERER, TabKind
from .continuation import EXHAUSTED, Cursor, next_continuation
from .extractor import parse_tab_data
from .playlist import PlaylistCompact
from .video import VideoCompact

logger = logging.getLogger(__name__)

_ENTITY_TYPES = {
    TabKind.VIDEOS: VideoCompact,
    TabKind.PLAYLISTS: PlaylistCompact,
}


class ChannelCompact(Base):
    """
    A YouTube channel and the videos/playlists loaded from it so far.

    Each tab keeps its own continuation cursor: ``None`` before the first
    page, the last token returned by YouTube, or ``EXHAUSTED`` once a page
    comes back without a continuation marker. ``next_videos`` and
    ``next_playlists`` are the only writers of the cursors and collections.
    """

    def __init__(
        self,
        client=None,
        id: Optional[str] = None,
        name: Optional[str] = None,
        thumbnails: Optional[List[Dict]] = None,
        video_count: Optional[int] = None,
        subscriber_count: Optional[str] = None,
    ):
        super().__init__(client=client, id=id)
        self.name = name
        self.thumbnails = thumbnails or []
        self.video_count = video_count
        self.subscriber_count = subscriber_count

        self._items: Dict[TabKind, list] = {kind: [] for kind in TabKind}
        self._cursors: Dict[TabKind, Cursor] = {kind: None for kind in TabKind}
        self._locks = {kind: threading.Lock() for kind in TabKind}

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/channel/{self.id}"

    @property
    def videos(self) -> Tuple[VideoCompact, ...]:
        return tuple(self._items[TabKind.VIDEOS])

    @property
    def playlists(self) -> Tuple[PlaylistCompact, ...]:
        return tuple(self._items[TabKind.PLAYLISTS])

    @property
    def video_continuation(self) -> Cursor:
        return self._cursors[TabKind.VIDEOS]

    @property
    def playlist_continuation(self) -> Cursor:
        return self._cursors[TabKind.PLAYLISTS]

    def load(self, data: Dict) -> 'ChannelCompact':
        """Load this channel from a raw channelRenderer, dropping anything paginated before"""
        self.id = data.get('channelId')
        self.name = get_text(data.get('title'))
        self.thumbnails = dig(data, 'thumbnail', 'thumbnails') or []
        self.video_count = strip_to_int(get_text(data.get('videoCountText'))) or 0
        self.subscriber_count = get_text(data.get('subscriberCountText'))

        for kind in TabKind:
            with self._locks[kind]:
                self._items[kind] = []
                self._cursors[kind] = None

        return self

    def next_videos(self, count: int = 1) -> List[VideoCompact]:
        """
        Load the next pages of the channel's videos (about 30 per page)
        and append them to ``videos``.

        Args:
            count: How many pages to load, 0 to load all remaining pages

        Returns:
            Only the newly loaded videos
        """
        return self._load_next(TabKind.VIDEOS, count)

    def next_playlists(self, count: int = 1) -> List[PlaylistCompact]:
        """
        Load the next pages of the channel's playlists and append them to ``playlists``.

        Args:
            count: How many pages to load, 0 to load all remaining pages

        Returns:
            Only the newly loaded playlists
        """
        return self._load_next(TabKind.PLAYLISTS, count)

    def _load_next(self, kind: TabKind, count: int) -> list:
        if count < 0:
            raise ValueError(f"count must be 0 (all) or a positive number of pages, got {count}")

        entity_type = _ENTITY_TYPES[kind]
        renderer = TAB_RENDERER[kind]
        batch: list = []
        pages = 0

        with self._locks[kind]:
            try:
                while count == 0 or pages < count:
                    if self._cursors[kind] is EXHAUSTED:
                        break

                    items = self._get_tab_data(kind)
                    pages += 1

                    cursor = next_continuation(items)
                    self._cursors[kind] = cursor

                    contents = map_filter(items, renderer)
                    batch.extend(entity_type(client=self.client).load(raw) for raw in contents)
                    logger.debug(
                        f"Channel {self.id}: {kind.value} page {pages} gave {len(contents)} items"
                        f" ({len(items) - len(contents)} other records)"
                    )

                    if cursor is EXHAUSTED:
                        logger.info(f"🏁 Channel {self.id}: no more {kind.value} to load")
            finally:
                # Keep pages fetched before a failure
                self._items[kind].extend(batch)

        logger.info(
            f"📥 Channel {self.id}: loaded {len(batch)} {kind.value} from {pages} page(s), "
            f"{len(self._items[kind])} total"
        )
        return batch

    def _get_tab_data(self, kind: TabKind) -> List[Dict]:
        data = {'browseId': self.id, 'params': TAB_PARAMS[kind]}
        if self._cursors[kind] is not None:
            data['continuation'] = self._cursors[kind]

        response = self.client.post(BROWSE_ENDPOINT, data)
        return parse_tab_data(kind, response)

    def __repr__(self) -> str:
        return f"ChannelCompact(id={self.id!r}, name={self.name!r})"
