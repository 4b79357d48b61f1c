"""
Video metadata lookup via oEmbed, with noembed as a fallback.
"""

from typing import Any, Dict

import requests

from studytube.core.errors import AllAttemptsFailed
from studytube.core.fallback import first_success
from studytube.models.schemas import VideoMetadata
from studytube.utils.logger import logging

OEMBED_URL = "https://www.youtube.com/oembed"
NOEMBED_URL = "https://noembed.com/embed"


def _get_json(url: str, params: Dict[str, str], timeout: float) -> Dict[str, Any]:
    response = requests.get(url, params=params, timeout=timeout)
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError("Unexpected response body")
    # noembed answers 200 with an "error" field for unknown URLs
    if data.get("error"):
        raise ValueError(data["error"])
    return data


def _duration(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def fetch_from_oembed(video_id: str, youtube_url: str, timeout: float = 15.0) -> VideoMetadata:
    """Look up title and thumbnail through YouTube's oEmbed endpoint."""
    data = _get_json(OEMBED_URL, {"url": youtube_url, "format": "json"}, timeout)
    return VideoMetadata(
        title=data.get("title") or f"Video {video_id}",
        thumbnail_url=data.get("thumbnail_url") or "",
        source="oembed",
    )


def fetch_from_noembed(video_id: str, youtube_url: str, timeout: float = 15.0) -> VideoMetadata:
    """Look up metadata through the noembed service."""
    data = _get_json(NOEMBED_URL, {"url": youtube_url}, timeout)
    return VideoMetadata(
        title=data.get("title") or f"Video {video_id}",
        description=data.get("description") or "",
        thumbnail_url=data.get("thumbnail_url") or "",
        duration=_duration(data.get("duration")),
        source="noembed",
    )


def fetch_video_metadata(video_id: str, youtube_url: str, timeout: float = 15.0) -> VideoMetadata:
    """
    Fetch metadata for a video, never raising.

    Args:
        video_id: YouTube video ID
        youtube_url: URL as submitted by the user
        timeout: Per-request timeout in seconds

    Returns:
        VideoMetadata from the first lookup that answers, or a placeholder
    """
    lookups = [
        ("oembed", lambda: fetch_from_oembed(video_id, youtube_url, timeout)),
        ("noembed", lambda: fetch_from_noembed(video_id, youtube_url, timeout)),
    ]

    try:
        _, metadata = first_success(lookups)
    except AllAttemptsFailed as e:
        logging.warning(f"Metadata lookup failed for video {video_id}: {e}")
        return VideoMetadata(title=f"Video {video_id}")

    logging.info(f"Video title: \"{metadata.title}\" (from {metadata.source})")
    return metadata
