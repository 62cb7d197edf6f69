"""
YouTube Channel Pagination Client

Structure:
    - http_client.py: POST InnerTube requests (context injection, retry, error mapping)
    - extractor.py: Locate raw item lists in first-page and continuation responses
    - continuation.py: Read the next continuation token from a raw item list
    - channel.py: Channel model, tab page fetcher and video/playlist pagination
    - video.py / playlist.py: Compact child entities built from raw renderers
    - config.py / logger_config.py / retry.py: configuration, logging, backoff
"""

from .channel import ChannelCompact
from .constants import TabKind
from .continuation import EXHAUSTED
from .errors import ProtocolShapeError, TransportError, TubePagerError
from .http_client import HTTPClient
from .playlist import PlaylistCompact
from .video import VideoCompact

__all__ = [
    'ChannelCompact',
    'EXHAUSTED',
    'HTTPClient',
    'PlaylistCompact',
    'ProtocolShapeError',
    'TabKind',
    'TransportError',
    'TubePagerError',
    'VideoCompact',
]
