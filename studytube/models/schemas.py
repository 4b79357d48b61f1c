"""
Data models for the StudyTube application.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Difficulty(str, Enum):
    """Difficulty tier for flashcards and quiz questions."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GenerationSource(str, Enum):
    """Where generated study content came from."""
    LLM = "llm"
    TEMPLATE = "template"


SYNTHETIC_TRANSCRIPT = "synthetic"


class VideoMetadata(BaseModel):
    """Best-effort metadata for a YouTube video."""
    title: str
    description: str = ""
    thumbnail_url: str = ""
    duration: int = 0
    source: str = "placeholder"


class TranscriptResult(BaseModel):
    """Transcript text plus the strategy that produced it."""
    text: str
    source: str

    @property
    def is_synthetic(self) -> bool:
        return self.source == SYNTHETIC_TRANSCRIPT


class FlashcardDraft(BaseModel):
    """A generated flashcard that has not been stored yet."""
    question: str
    answer: str
    difficulty: Difficulty


class QuizQuestionDraft(BaseModel):
    """A generated multiple-choice question that has not been stored yet."""
    question: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: str
    explanation: str


class GeneratedFlashcards(BaseModel):
    cards: List[FlashcardDraft]
    source: GenerationSource


class GeneratedQuiz(BaseModel):
    questions: List[QuizQuestionDraft]
    source: GenerationSource
