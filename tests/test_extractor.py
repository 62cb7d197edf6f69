from __future__ import annotations

import pytest

from tests.payloads import continuation_payload, initial_payload, marker, playlist_item, videos
from tubepager.constants import TabKind
from tubepager.errors import ProtocolShapeError, TubePagerError
from tubepager.extractor import parse_tab_data


def test_initial_shape_uses_videos_tab() -> None:
    items = [*videos(0, 3), marker("T1")]

    assert parse_tab_data(TabKind.VIDEOS, initial_payload(1, items)) == items


def test_initial_shape_uses_playlists_tab() -> None:
    items = [playlist_item(0), playlist_item(1)]

    assert parse_tab_data(TabKind.PLAYLISTS, initial_payload(2, items)) == items


def test_initial_shape_for_other_tab_is_not_used() -> None:
    payload = initial_payload(1, videos(0, 3))

    with pytest.raises(ProtocolShapeError):
        parse_tab_data(TabKind.PLAYLISTS, payload)


def test_continuation_shape_ignores_kind() -> None:
    items = [*videos(0, 2), marker("T2")]
    payload = continuation_payload(items)

    assert parse_tab_data(TabKind.VIDEOS, payload) == items
    assert parse_tab_data(TabKind.PLAYLISTS, payload) == items


def test_initial_shape_preferred_over_continuation() -> None:
    initial_items = videos(0, 2)
    payload = initial_payload(1, initial_items)
    payload.update(continuation_payload(videos(100, 5)))

    assert parse_tab_data(TabKind.VIDEOS, payload) == initial_items


def test_empty_initial_list_falls_back_to_continuation() -> None:
    continuation_items = videos(10, 2)
    payload = initial_payload(1, [])
    payload.update(continuation_payload(continuation_items))

    assert parse_tab_data(TabKind.VIDEOS, payload) == continuation_items


def test_empty_continuation_list_is_a_valid_page() -> None:
    assert parse_tab_data(TabKind.VIDEOS, continuation_payload([])) == []


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"responseContext": {}},
        {"onResponseReceivedActions": []},
        {"onResponseReceivedActions": [{"appendContinuationItemsAction": {"continuationItems": "oops"}}]},
        {"contents": {"twoColumnBrowseResultsRenderer": {"tabs": []}}},
        [],
    ],
)
def test_unrecognized_shapes_raise(payload: object) -> None:
    with pytest.raises(ProtocolShapeError) as excinfo:
        parse_tab_data(TabKind.VIDEOS, payload)  # type: ignore[arg-type]

    assert isinstance(excinfo.value, TubePagerError)
    assert "videos" in str(excinfo.value)
