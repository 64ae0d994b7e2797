"""
ILearnCom Schemas - Pydantic models for the lesson viewer.

This module exports all schema classes for:
- Curriculum: weeks, sections, activity steps, quiz questions
- State: navigation, quiz answers, tutor chat, step illustrations
"""

# Curriculum schemas
from .curriculum import (
    SectionType,
    QuestionType,
    Difficulty,
    CHOICE_TYPES,
    ActivityStep,
    parse_activity_steps,
    LessonSection,
    MatchingPair,
    QuizQuestion,
    CurriculumWeek,
    Curriculum,
)

# State schemas
from .state import (
    AppView,
    NavigationState,
    ChoiceAnswer,
    TextAnswer,
    Answer,
    answer_key,
    QuizState,
    ChatState,
    ImageStatus,
    ImageEntry,
    step_key,
    ImageCacheState,
    AppState,
)

__all__ = [
    # Curriculum
    'SectionType',
    'QuestionType',
    'Difficulty',
    'CHOICE_TYPES',
    'ActivityStep',
    'parse_activity_steps',
    'LessonSection',
    'MatchingPair',
    'QuizQuestion',
    'CurriculumWeek',
    'Curriculum',
    # State
    'AppView',
    'NavigationState',
    'ChoiceAnswer',
    'TextAnswer',
    'Answer',
    'answer_key',
    'QuizState',
    'ChatState',
    'ImageStatus',
    'ImageEntry',
    'step_key',
    'ImageCacheState',
    'AppState',
]
