"""Compact video entity from a channel's videos tab"""

from typing import Dict, List, Optional

from .base import Base
from .common import dig, get_text, strip_to_int


class VideoCompact(Base):
    def __init__(self, client=None, id: Optional[str] = None, title: Optional[str] = None):
        super().__init__(client=client, id=id)
        self.title = title
        self.thumbnails: List[Dict] = []
        self.published_text: Optional[str] = None
        self.view_count: Optional[int] = None
        self.duration_text: Optional[str] = None

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.id}"

    def load(self, data: Dict) -> 'VideoCompact':
        self.id = data.get('videoId')
        self.title = get_text(data.get('title'))
        self.thumbnails = dig(data, 'thumbnail', 'thumbnails') or []
        self.published_text = get_text(data.get('publishedTimeText'))
        self.view_count = strip_to_int(get_text(data.get('viewCountText')))

        for overlay in data.get('thumbnailOverlays') or []:
            text = get_text(dig(overlay, 'thumbnailOverlayTimeStatusRenderer', 'text'))
            if text:
                self.duration_text = text
                break

        return self

    def __repr__(self) -> str:
        return f"VideoCompact(id={self.id!r}, title={self.title!r})"
