"""
API client for communicating with the StudyTube backend.
"""

import requests
from typing import Any, Dict, List
from urllib.parse import urljoin

from studytube.config import Config


class ApiClient:
    """Client for interacting with the StudyTube API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 300.0):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response; processing can be slow
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> "ApiClient":
        """Client for the API at the configured public URL."""
        return cls(config.public_url)

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def process_video(
        self,
        youtube_url: str,
        flashcard_count: int = 15,
        quiz_question_count: int = 10,
        difficulty: str = "medium",
    ) -> Dict[str, Any]:
        """
        Process a video into flashcards and a quiz.

        Returns:
            The response body; check its "success" field, since failed
            processing answers with HTTP 500 and {"success": false, "error": ...}
        """
        response = requests.post(
            self._url("process-youtube-video"),
            json={
                "youtubeUrl": youtube_url,
                "flashcardCount": flashcard_count,
                "quizQuestionCount": quiz_question_count,
                "difficulty": difficulty,
            },
            timeout=self.timeout,
        )

        if response.status_code == 500:
            return response.json()

        response.raise_for_status()
        return response.json()

    def generate_more(self, youtube_url: str, **options) -> Dict[str, Any]:
        """Request another batch of flashcards and quiz questions for a video."""
        return self.process_video(youtube_url, **options)

    def get_video_data(self, video_id: str) -> Dict[str, Any]:
        """
        Get a stored video with its flashcards and quizzes.

        Args:
            video_id: Video row ID (the "id" of the processed video)

        Returns:
            Dictionary with "video", "flashcards" and "quizzes"
        """
        response = requests.get(self._url(f"videos/{video_id}"), timeout=self.timeout)

        if response.status_code == 404:
            return {"error": "Video not found"}

        response.raise_for_status()
        return response.json()

    def list_videos(self, limit: int = 20) -> List[Dict[str, Any]]:
        """List recently processed videos."""
        response = requests.get(self._url("videos"), params={"limit": limit}, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
