from __future__ import annotations

from tests.payloads import playlist_item, video_item
from tubepager.common import dig, get_text, map_filter, strip_to_int
from tubepager.playlist import PlaylistCompact
from tubepager.video import VideoCompact


def test_video_from_grid_renderer() -> None:
    client = object()

    video = VideoCompact(client=client).load(video_item(7)["gridVideoRenderer"])

    assert video.client is client
    assert video.id == "vid007"
    assert video.title == "Video 7"
    assert video.view_count == 1234
    assert video.published_text == "2 days ago"
    assert video.duration_text == "12:34"
    assert video.thumbnails[0]["width"] == 168
    assert video.url == "https://www.youtube.com/watch?v=vid007"


def test_video_missing_optional_fields() -> None:
    video = VideoCompact().load({"videoId": "abc"})

    assert video.id == "abc"
    assert video.title is None
    assert video.view_count is None
    assert video.duration_text is None
    assert video.thumbnails == []


def test_playlist_from_grid_renderer() -> None:
    playlist = PlaylistCompact().load(playlist_item(3)["gridPlaylistRenderer"])

    assert playlist.id == "PL003"
    assert playlist.title == "Playlist 3"
    assert playlist.video_count == 42
    assert playlist.url == "https://www.youtube.com/playlist?list=PL003"


def test_playlist_short_count_text() -> None:
    playlist = PlaylistCompact().load({"playlistId": "PLx", "videoCountShortText": {"simpleText": "9"}})

    assert playlist.video_count == 9


def test_map_filter_keeps_order_and_drops_markers() -> None:
    items = [{"a": 1}, {"marker": {}}, {"a": 2}, "junk", {"b": 3}]

    assert map_filter(items, "a") == [1, 2]  # type: ignore[arg-type]


def test_strip_to_int() -> None:
    assert strip_to_int("1,234,567 views") == 1234567
    assert strip_to_int("No views") is None
    assert strip_to_int(None) is None


def test_get_text() -> None:
    assert get_text({"simpleText": "plain"}) == "plain"
    assert get_text({"runs": [{"text": "a"}, {"text": "b"}]}) == "ab"
    assert get_text({"runs": []}) is None
    assert get_text(None) is None


def test_dig() -> None:
    data = {"a": [{"b": "x"}, {"b": "y"}]}

    assert dig(data, "a", 1, "b") == "y"
    assert dig(data, "a", 5, "b") is None
    assert dig(data, "a", "b") is None
    assert dig(data, "missing", 0) is None
