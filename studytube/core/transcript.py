"""
Transcript acquisition from YouTube captions.

Four independent strategies are tried in a fixed order and the first one that
returns a usable transcript wins. When every strategy fails the caller gets
synthetic filler built from the title and description, flagged with the
"synthetic" source.
"""

import html
import xml.etree.ElementTree as ET
from typing import List, Optional, Sequence

import requests
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from studytube.core.errors import AllAttemptsFailed, TranscriptUnavailable
from studytube.core.fallback import first_success
from studytube.core.fallback_content import (
    generate_enhanced_fallback_content,
    generate_fallback_content,
)
from studytube.models.schemas import SYNTHETIC_TRANSCRIPT, TranscriptResult
from studytube.utils.helpers import collapse_whitespace
from studytube.utils.logger import logging

# A strategy only counts as successful above this length
MIN_TRANSCRIPT_LENGTH = 100
# Anything shorter is replaced by the enhanced filler
MIN_USABLE_LENGTH = 50

TIMEDTEXT_URL = "https://www.youtube.com/api/timedtext"
CAPTIONS_API_URL = "https://youtube-transcript-api1.p.rapidapi.com/transcript"
PROXY_URL = "https://api.allorigins.win/get"


def parse_caption_xml(xml_text: str) -> str:
    """
    Extract plain text from timedtext caption XML (srv1 format).

    Raises:
        TranscriptUnavailable: if the XML is malformed or has no text
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise TranscriptUnavailable(f"Malformed caption XML: {e}") from e

    parts = [html.unescape(node.text) for node in root.iter("text") if node.text]
    transcript = collapse_whitespace(" ".join(parts))
    if not transcript:
        raise TranscriptUnavailable("No text content found in captions")
    return transcript


class TranscriptStrategy:
    """Base class for a single way of getting a transcript."""

    name = "strategy"

    def __init__(self, timeout: float = 15.0):
        self.timeout = timeout

    def fetch(self, video_id: str) -> str:
        raise NotImplementedError

    def _get(self, url: str, **kwargs) -> requests.Response:
        try:
            response = requests.get(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TranscriptUnavailable(f"Request to {url} failed: {e}") from e
        if not response.ok:
            raise TranscriptUnavailable(f"{url} returned HTTP {response.status_code}")
        return response

    def _get_json(self, url: str, **kwargs):
        response = self._get(url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise TranscriptUnavailable(f"{url} returned non-JSON content") from e


class CaptionsApiStrategy(TranscriptStrategy):
    """Auxiliary transcript API that returns caption snippets as JSON."""

    name = "captions_api"

    def fetch(self, video_id: str) -> str:
        data = self._get_json(
            CAPTIONS_API_URL,
            params={"videoId": video_id},
            headers={"Accept": "application/json"},
        )
        items = data.get("transcript") if isinstance(data, dict) else None
        if not items:
            raise TranscriptUnavailable("Captions API returned no transcript")

        return " ".join(
            item.get("text") or item.get("snippet") or "" for item in items if isinstance(item, dict)
        ).strip()


class TimedTextStrategy(TranscriptStrategy):
    """Official timedtext endpoint in json3 format."""

    name = "timedtext"

    def fetch(self, video_id: str) -> str:
        data = self._get_json(TIMEDTEXT_URL, params={"v": video_id, "lang": "en", "fmt": "json3"})
        events = data.get("events") if isinstance(data, dict) else None
        if not events:
            raise TranscriptUnavailable("No events in timedtext response")

        transcript = collapse_whitespace(" ".join(
            "".join(seg.get("utf8", "") for seg in event["segs"])
            for event in events
            if event.get("segs")
        ))
        if len(transcript) <= MIN_USABLE_LENGTH:
            raise TranscriptUnavailable("No valid transcript found in timedtext response")
        return transcript


class WatchPageStrategy(TranscriptStrategy):
    """Caption tracks listed on the watch page, fetched with youtube-transcript-api."""

    name = "watch_page"
    languages = ("en", "en-US", "en-GB")

    def fetch(self, video_id: str) -> str:
        try:
            transcript = YouTubeTranscriptApi().fetch(video_id, languages=self.languages)
        except (CouldNotRetrieveTranscript, requests.RequestException) as e:
            raise TranscriptUnavailable(f"No captions found in YouTube page: {e}") from e

        text = collapse_whitespace(" ".join(snippet.text for snippet in transcript if snippet.text))
        if len(text) <= MIN_USABLE_LENGTH:
            raise TranscriptUnavailable("Caption track is too short")
        return text


class ProxyTimedTextStrategy(TranscriptStrategy):
    """Relay the timedtext endpoint through a CORS proxy."""

    name = "proxy_timedtext"

    def fetch(self, video_id: str) -> str:
        target = f"{TIMEDTEXT_URL}?v={video_id}&lang=en&fmt=srv1"
        data = self._get_json(PROXY_URL, params={"url": target})
        contents = data.get("contents") if isinstance(data, dict) else None
        if not contents:
            raise TranscriptUnavailable("Proxy returned no contents")
        return parse_caption_xml(contents)


def default_strategies(timeout: float = 15.0) -> List[TranscriptStrategy]:
    """The four strategies in the order they are tried."""
    return [
        CaptionsApiStrategy(timeout),
        TimedTextStrategy(timeout),
        WatchPageStrategy(timeout),
        ProxyTimedTextStrategy(timeout),
    ]


def extract_transcript(video_id: str, strategies: Sequence[TranscriptStrategy]) -> TranscriptResult:
    """
    Try each strategy in order and return the first usable transcript.

    Raises:
        AllAttemptsFailed: if no strategy produced more than 100 characters
    """
    name, text = first_success(
        [(strategy.name, lambda s=strategy: s.fetch(video_id)) for strategy in strategies],
        accept=lambda text: bool(text) and len(text) > MIN_TRANSCRIPT_LENGTH,
    )
    logging.info(f"Transcript extracted with {name}: {len(text)} chars")
    return TranscriptResult(text=text, source=name)


def acquire_transcript(
    video_id: str,
    title: str,
    description: str = "",
    strategies: Optional[Sequence[TranscriptStrategy]] = None,
    timeout: float = 15.0,
) -> TranscriptResult:
    """
    Get a transcript for a video, falling back to synthetic text.

    The result is never empty. Check `source` (or `is_synthetic`) to tell
    real captions from template filler.
    """
    if strategies is None:
        strategies = default_strategies(timeout)

    logging.info(f"Starting transcript extraction for video: {video_id}")
    try:
        result = extract_transcript(video_id, strategies)
    except AllAttemptsFailed as e:
        logging.warning(f"Transcript extraction failed for {video_id}: {e}")
        logging.info("Generating content based on video metadata only")
        result = TranscriptResult(
            text=generate_fallback_content(title, description),
            source=SYNTHETIC_TRANSCRIPT,
        )

    if len(result.text) < MIN_USABLE_LENGTH:
        logging.info("Using enhanced fallback content generation")
        result = TranscriptResult(
            text=generate_enhanced_fallback_content(title, description, video_id),
            source=SYNTHETIC_TRANSCRIPT,
        )

    return result
