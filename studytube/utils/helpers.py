"""
Helper utility functions for the StudyTube application.
"""

import re
from typing import Optional

# Tried in order; the first match wins.
VIDEO_ID_PATTERNS = [
    re.compile(r"youtube\.com/watch\?v=([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])"),
    re.compile(r"youtu\.be/([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])"),
    re.compile(r"youtube\.com/embed/([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])"),
    re.compile(r"youtube\.com/v/([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])"),
]


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Accepts watch?v=, youtu.be/, /embed/ and /v/ URLs.

    Args:
        url: Free-text URL

    Returns:
        The video ID, or None if no pattern matches
    """
    if not url:
        return None

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return None


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    return re.sub(r"\s+", " ", text or "").strip()
