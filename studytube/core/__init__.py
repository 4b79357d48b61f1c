"""
Core functionality for the StudyTube application.

This package contains modules for fetching video metadata and transcripts,
and for generating summaries, flashcards and quizzes from them.
"""
