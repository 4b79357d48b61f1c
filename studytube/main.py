"""
Main entry point for the StudyTube application.
"""

import argparse
import asyncio
import json
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.orm import Session

from studytube.api.schemas import ProcessedQuizOut, ProcessVideoResponse, VideoOut
from studytube.config import Config, get_config
from studytube.core.errors import InvalidVideoURL
from studytube.core.generator import ContentGenerator
from studytube.core.metadata import fetch_video_metadata
from studytube.core.transcript import TranscriptStrategy, acquire_transcript
from studytube.db import crud
from studytube.db.database import SessionLocal, init_db
from studytube.models.schemas import Difficulty
from studytube.utils.helpers import extract_video_id
from studytube.utils.logger import logging


async def process_youtube_video(
    db: Session,
    config: Config,
    youtube_url: str,
    flashcard_count: int = 15,
    quiz_question_count: int = 10,
    difficulty: Difficulty = Difficulty.MEDIUM,
    generator: Optional[ContentGenerator] = None,
    strategies: Optional[Sequence[TranscriptStrategy]] = None,
) -> ProcessVideoResponse:
    """
    Process a YouTube video: fetch metadata and transcript, generate a
    summary, flashcards and a quiz, and store everything.

    Args:
        db: Database session
        config: Application configuration
        youtube_url: YouTube video URL
        flashcard_count: Number of flashcards to request
        quiz_question_count: Number of quiz questions to request
        difficulty: Difficulty tier for flashcards and quiz
        generator: Content generator (built from config if None)
        strategies: Transcript strategies (the default four if None)

    Returns:
        ProcessVideoResponse with the stored video, flashcard count and quiz

    Raises:
        InvalidVideoURL: if no video ID can be extracted; nothing is fetched
        PersistenceError: if a database insert fails
    """
    video_id = extract_video_id(youtube_url)
    if not video_id:
        raise InvalidVideoURL("Invalid YouTube URL")

    difficulty = Difficulty(difficulty)
    logging.info(f"Processing video: {video_id}")

    # 1. Metadata and transcript (blocking HTTP, run off the event loop)
    metadata = await asyncio.to_thread(fetch_video_metadata, video_id, youtube_url, config.http_timeout)
    transcript = await asyncio.to_thread(
        acquire_transcript,
        video_id,
        metadata.title,
        metadata.description,
        strategies,
        config.http_timeout,
    )
    logging.info(f"Transcript length: {len(transcript.text)} characters (source: {transcript.source})")

    # 2. Summary
    if generator is None:
        generator = ContentGenerator.from_config(config)
    summary = await generator.generate_summary(transcript.text, metadata.title)
    logging.info(f"Summary generated successfully, length: {len(summary)}")

    # 3. Video row
    video = crud.create_video(db, video_id, youtube_url, metadata, transcript, summary)

    # 4. Flashcards and quiz, generated concurrently
    flashcards, quiz = await asyncio.gather(
        generator.generate_flashcards(transcript.text, metadata.title, flashcard_count, difficulty),
        generator.generate_quiz(transcript.text, metadata.title, quiz_question_count, difficulty),
    )

    # 5. Store generated content
    flashcard_rows = crud.create_flashcards(db, video.id, flashcards.cards, difficulty, flashcards.source)
    quiz_row = crud.create_quiz(db, video.id, metadata.title, difficulty, quiz.questions, quiz.source)

    return ProcessVideoResponse(
        success=True,
        video=VideoOut.model_validate(video),
        flashcards=len(flashcard_rows),
        quiz=ProcessedQuizOut.model_validate(quiz_row),
    )


def run_once(
    url: str,
    flashcard_count: int = 15,
    quiz_question_count: int = 10,
    difficulty: str = "medium",
    config: Optional[Config] = None,
) -> Dict[str, Any]:
    """Process a single video synchronously against the configured database."""
    config = config or get_config()
    config.initialize()
    init_db(config.database_url)

    db = SessionLocal()
    try:
        result = asyncio.run(process_youtube_video(
            db,
            config,
            url,
            flashcard_count=flashcard_count,
            quiz_question_count=quiz_question_count,
            difficulty=Difficulty(difficulty),
        ))
    finally:
        db.close()

    return result.model_dump(mode="json")


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="StudyTube: flashcards and quizzes from YouTube videos")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--flashcards", type=int, default=15, help="Number of flashcards to generate")
    parser.add_argument("--questions", type=int, default=10, help="Number of quiz questions to generate")
    parser.add_argument("--difficulty", default="medium", choices=[d.value for d in Difficulty],
                        help="Difficulty of the generated content")

    args = parser.parse_args()

    result = run_once(args.url, args.flashcards, args.questions, args.difficulty)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
