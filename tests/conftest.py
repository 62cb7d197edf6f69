from __future__ import annotations

from typing import Any

import pytest

from tests.payloads import continuation_payload, initial_payload, marker, videos


@pytest.fixture
def three_video_pages() -> list[dict[str, Any]]:
    return [
        initial_payload(1, [*videos(0, 30), marker("T1")]),
        continuation_payload([*videos(30, 30), marker("T2")]),
        continuation_payload(videos(60, 10)),
    ]
