"""Compact playlist entity from a channel's playlists tab"""

from typing import Dict, List, Optional

from .base import Base
from .common import dig, get_text, strip_to_int


class PlaylistCompact(Base):
    def __init__(self, client=None, id: Optional[str] = None, title: Optional[str] = None):
        super().__init__(client=client, id=id)
        self.title = title
        self.thumbnails: List[Dict] = []
        self.video_count: Optional[int] = None

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/playlist?list={self.id}"

    def load(self, data: Dict) -> 'PlaylistCompact':
        self.id = data.get('playlistId')
        self.title = get_text(data.get('title'))
        self.thumbnails = dig(data, 'thumbnail', 'thumbnails') or []
        self.video_count = strip_to_int(
            get_text(data.get('videoCountText')) or get_text(data.get('videoCountShortText'))
        )
        return self

    def __repr__(self) -> str:
        return f"PlaylistCompact(id={self.id!r}, title={self.title!r})"
