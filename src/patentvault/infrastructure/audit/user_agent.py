"""Coarse browser and OS detection from a User-Agent string."""

import re

UNKNOWN = "Unknown"

# Order matters: Edge and Opera carry "Chrome", Chrome carries "Safari".
_BROWSERS = [
    ("Edge", re.compile(r"Edg(?:e|A|iOS)?/(\d+)")),
    ("Opera", re.compile(r"(?:OPR|Opera)/(\d+)")),
    ("Firefox", re.compile(r"(?:Firefox|FxiOS)/(\d+)")),
    ("Chrome", re.compile(r"(?:Chrome|CriOS)/(\d+)")),
    ("Safari", re.compile(r"Version/(\d+).*Safari/")),
]

_SYSTEMS = [
    ("iOS", re.compile(r"iPhone|iPad|iPod")),
    ("Android", re.compile(r"Android")),
    ("Windows", re.compile(r"Windows")),
    ("macOS", re.compile(r"Mac OS X|Macintosh")),
    ("ChromeOS", re.compile(r"CrOS")),
    ("Linux", re.compile(r"Linux")),
]


def parse_user_agent(user_agent: str | None) -> tuple[str, str]:
    """Return (browser, os), each "Unknown" when not recognised."""
    if not user_agent:
        return UNKNOWN, UNKNOWN

    browser = UNKNOWN
    for name, pattern in _BROWSERS:
        m = pattern.search(user_agent)
        if m:
            browser = f"{name} {m.group(1)}"
            break

    system = UNKNOWN
    for name, pattern in _SYSTEMS:
        if pattern.search(user_agent):
            system = name
            break

    return browser, system
