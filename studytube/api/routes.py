"""
API routes for the StudyTube application.
"""

import traceback
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request
from fastapi.responses import JSONResponse

from studytube.api.schemas import (
    ErrorResponse,
    FlashcardOut,
    ProcessVideoRequest,
    ProcessVideoResponse,
    QuizOut,
    VideoBundleResponse,
    VideoListItem,
    VideoOut,
)
from studytube.config import Config
from studytube.db import crud
from studytube.db.database import DBSession, get_db
from studytube.main import process_youtube_video
from studytube.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["videos"])


def get_app_config(request: Request) -> Config:
    """The configuration the application was created with."""
    return request.app.state.config


@router.post(
    "/process-youtube-video",
    response_model=ProcessVideoResponse,
    responses={500: {"model": ErrorResponse}},
)
async def process_video(
    request: ProcessVideoRequest,
    db: DBSession = Depends(get_db),
    config: Config = Depends(get_app_config),
):
    """
    Process a YouTube video into a summary, flashcards and a quiz.

    - Calling again for the same URL appends a new video row with new
      flashcards and a new quiz
    - Any failure is reported as {"success": false, "error": ...}
    """
    try:
        return await process_youtube_video(
            db=db,
            config=config,
            youtube_url=request.youtube_url,
            flashcard_count=request.flashcard_count,
            quiz_question_count=request.quiz_question_count,
            difficulty=request.difficulty,
        )
    except Exception as e:
        logging.error(f"Error processing video: {str(e)}")
        logging.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e)).model_dump(),
        )


@router.get("/videos", response_model=List[VideoListItem])
async def list_videos(
    limit: int = Query(20, ge=1, le=100),
    db: DBSession = Depends(get_db),
):
    """List the most recently processed videos."""
    return crud.list_videos(db, limit=limit)


@router.get("/videos/{video_id}", response_model=VideoBundleResponse)
async def get_video(
    video_id: str = Path(..., description="Video row ID"),
    db: DBSession = Depends(get_db),
):
    """Get a processed video with all of its flashcards and quizzes."""
    bundle = crud.get_video_bundle(db, video_id)
    if not bundle:
        raise HTTPException(status_code=404, detail="Video not found")

    return VideoBundleResponse(
        video=VideoOut.model_validate(bundle["video"]),
        flashcards=[FlashcardOut.model_validate(card) for card in bundle["flashcards"]],
        quizzes=[QuizOut.model_validate(quiz) for quiz in bundle["quizzes"]],
    )
