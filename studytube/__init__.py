"""
StudyTube.

This application turns YouTube videos into study material: it fetches the
transcript, summarizes it, and generates flashcards and quizzes with an LLM.
"""

from studytube.config import APP_VERSION

__version__ = APP_VERSION
