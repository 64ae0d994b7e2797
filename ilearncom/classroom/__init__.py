"""
ILearnCom Classroom - Runtime components for content and view state.

This module provides:
- CurriculumStore: Load the packaged curriculum
- Navigator: View transitions and lesson sequencing
- quiz: Answer capture and grading rules
- ClassroomSession: Top-level controller owning the AppState
"""

from .loader import (
    CurriculumStore,
    QuizItem,
)

from .navigator import (
    Navigator,
    SitemapItem,
    SITEMAP,
)

from .quiz import (
    AnswerTypeError,
    Verdict,
    OptionState,
    record_answer,
    submit,
    grade,
    option_state,
)

from .session import ClassroomSession

__all__ = [
    # Loader
    "CurriculumStore",
    "QuizItem",
    # Navigator
    "Navigator",
    "SitemapItem",
    "SITEMAP",
    # Quiz
    "AnswerTypeError",
    "Verdict",
    "OptionState",
    "record_answer",
    "submit",
    "grade",
    "option_state",
    # Session
    "ClassroomSession",
]
