"""
Request and response models for the StudyTube API.
"""
import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from studytube.models.schemas import Difficulty


class ProcessVideoRequest(BaseModel):
    """Model for requesting video processing."""
    youtube_url: str = Field(alias="youtubeUrl")
    flashcard_count: int = Field(15, alias="flashcardCount", ge=1, le=100)
    quiz_question_count: int = Field(10, alias="quizQuestionCount", ge=1, le=100)
    difficulty: Difficulty = Difficulty.MEDIUM

    model_config = {"populate_by_name": True}


class VideoOut(BaseModel):
    id: str
    video_id: str
    title: str
    description: Optional[str] = None
    youtube_url: str
    thumbnail_url: Optional[str] = None
    duration: int = 0
    transcript: str
    summary: Optional[str] = None
    transcript_source: str
    created_at: Optional[datetime.datetime] = None

    model_config = {"from_attributes": True}


class FlashcardOut(BaseModel):
    id: int
    video_id: str
    question: str
    answer: str
    difficulty: Difficulty
    generated_by: str
    created_at: Optional[datetime.datetime] = None

    model_config = {"from_attributes": True}


class QuizQuestionOut(BaseModel):
    id: int
    quiz_id: int
    question: str
    options: List[str]
    correct_answer: str
    explanation: Optional[str] = None
    order_index: int

    model_config = {"from_attributes": True}


class ProcessedQuizOut(BaseModel):
    """The quiz part of a processing response."""
    id: int
    generated_by: str
    quiz_questions: List[QuizQuestionOut]

    model_config = {"from_attributes": True}


class QuizOut(ProcessedQuizOut):
    video_id: str
    title: str
    description: Optional[str] = None
    difficulty: Difficulty
    created_at: Optional[datetime.datetime] = None


class ProcessVideoResponse(BaseModel):
    """Model for a successful processing run."""
    success: bool = True
    video: VideoOut
    flashcards: int
    quiz: ProcessedQuizOut


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class VideoBundleResponse(BaseModel):
    """A stored video with everything generated for it."""
    video: VideoOut
    flashcards: List[FlashcardOut]
    quizzes: List[QuizOut]


class VideoListItem(BaseModel):
    id: str
    video_id: str
    title: str
    thumbnail_url: Optional[str] = None
    transcript_source: str
    created_at: Optional[datetime.datetime] = None

    model_config = {"from_attributes": True}
