"""
ILearnCom Viewer - Rendering components for the six views.

This module provides:
- Lesson list and lesson page rendering with activity steps
- Quiz question cards and feedback
- AI tutor reply area
"""

from .lesson import (
    get_lesson_css,
    render_week_card,
    render_lesson_header,
    render_section,
    render_section_title,
    render_activity_step,
    render_takeaways,
    render_scroll_to_top,
)

from .quiz import (
    get_quiz_css,
    DIFFICULTY_STYLES,
    quiz_title,
    render_question_header,
    option_label,
    render_matching_pairs,
    render_short_answer_result,
    render_explanation,
    render_feedback,
)

from .tutor import (
    get_tutor_css,
    render_tutor_banner,
    render_tutor_reply,
)

__all__ = [
    # Lesson rendering
    "get_lesson_css",
    "render_week_card",
    "render_lesson_header",
    "render_section",
    "render_section_title",
    "render_activity_step",
    "render_takeaways",
    "render_scroll_to_top",
    # Quiz
    "get_quiz_css",
    "DIFFICULTY_STYLES",
    "quiz_title",
    "render_question_header",
    "option_label",
    "render_matching_pairs",
    "render_short_answer_result",
    "render_explanation",
    "render_feedback",
    # Tutor
    "get_tutor_css",
    "render_tutor_banner",
    "render_tutor_reply",
]
