"""InnerTube protocol constants"""

from enum import Enum

I_END_POINT = "/youtubei/v1"
BROWSE_ENDPOINT = f"{I_END_POINT}/browse"

CONTINUATION_RENDERER = "continuationItemRenderer"


class TabKind(Enum):
    VIDEOS = "videos"
    PLAYLISTS = "playlists"


# Opaque tab filters issued by YouTube, must be sent unchanged
TAB_PARAMS = {
    TabKind.VIDEOS: "EgZ2aWRlb3M%3D",
    TabKind.PLAYLISTS: "EglwbGF5bGlzdHMgAQ%3D%3D",
}

# Position of each tab in twoColumnBrowseResultsRenderer.tabs
TAB_INDEX = {
    TabKind.VIDEOS: 1,
    TabKind.PLAYLISTS: 2,
}

TAB_RENDERER = {
    TabKind.VIDEOS: "gridVideoRenderer",
    TabKind.PLAYLISTS: "gridPlaylistRenderer",
}
