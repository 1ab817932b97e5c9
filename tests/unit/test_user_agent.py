"""Tests for User-Agent parsing."""

import pytest

from patentvault.infrastructure.audit.user_agent import UNKNOWN, parse_user_agent

CHROME_WIN = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
EDGE_WIN = CHROME_WIN + " Edg/120.0.2210.91"
FIREFOX_MAC = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.1; rv:121.0) Gecko/20100101 Firefox/121.0"
SAFARI_IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)
CHROME_ANDROID = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Mobile Safari/537.36"
)


@pytest.mark.parametrize(
    "ua,expected",
    [
        (CHROME_WIN, ("Chrome 120", "Windows")),
        (EDGE_WIN, ("Edge 120", "Windows")),
        (FIREFOX_MAC, ("Firefox 121", "macOS")),
        (SAFARI_IPHONE, ("Safari 17", "iOS")),
        (CHROME_ANDROID, ("Chrome 119", "Android")),
        ("curl/8.4.0", (UNKNOWN, UNKNOWN)),
        ("", (UNKNOWN, UNKNOWN)),
        (None, (UNKNOWN, UNKNOWN)),
    ],
)
def test_parse_user_agent(ua, expected) -> None:
    assert parse_user_agent(ua) == expected
