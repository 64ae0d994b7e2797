"""
CurriculumStore - Read-only access to the packaged curriculum.

Provides:
- Week lookup by number, and the following week
- Quiz question lists for one week or pooled across all weeks
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ilearncom.config import DEFAULT_CURRICULUM_PATH
from ilearncom.schemas import Curriculum, CurriculumWeek, QuizQuestion, answer_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizItem:
    """A question together with the week that owns it."""
    week_number: int
    question: QuizQuestion

    @property
    def key(self) -> str:
        return answer_key(self.week_number, self.question.id)


class CurriculumStore:
    """
    Static curriculum loaded once at startup.

    Week numbers run 1..N without gaps (validated by Curriculum).
    """

    def __init__(self, curriculum: Curriculum):
        self._weeks = list(curriculum.weeks)
        self._by_number = {w.week: w for w in self._weeks}

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "CurriculumStore":
        """
        Load and validate a curriculum JSON file.

        Raises:
            FileNotFoundError: If the file is missing
            pydantic.ValidationError: If the content is malformed
        """
        path = path or DEFAULT_CURRICULUM_PATH
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        curriculum = Curriculum.model_validate(data)
        logger.info(f"Loaded {len(curriculum.weeks)} curriculum weeks from {path}")
        return cls(curriculum)

    @property
    def weeks(self) -> list[CurriculumWeek]:
        return list(self._weeks)

    def __len__(self) -> int:
        return len(self._weeks)

    def find_week(self, number: int) -> Optional[CurriculumWeek]:
        return self._by_number.get(number)

    def get_week(self, number: int) -> CurriculumWeek:
        week = self.find_week(number)
        if week is None:
            raise KeyError(f"No curriculum week {number}")
        return week

    def next_week(self, number: int) -> Optional[CurriculumWeek]:
        """The week numbered ``number + 1``, or None after the last week."""
        return self.find_week(number + 1)

    def quiz_items(self, week_number: Optional[int] = None) -> list[QuizItem]:
        """
        Questions to show on the quiz page.

        Args:
            week_number: A single week, or None for every week's questions
                in curriculum order

        Returns:
            List of QuizItem
        """
        weeks = self._weeks if week_number is None else [self.get_week(week_number)]
        return [
            QuizItem(week_number=week.week, question=question)
            for week in weeks
            for question in week.quiz
        ]
