"""Shared fixtures: a small curriculum and fake Gemini generators."""

import json

import pytest

from ilearncom.ai import InlineImage, ServiceError
from ilearncom.classroom import ClassroomSession, CurriculumStore
from ilearncom.schemas import Curriculum


def make_week(number: int, steps: tuple[str, ...] = ("Plug in", "Switch on")) -> dict:
    """One week with an activity section and one question of each type."""
    activity = [
        {"step": i, "title": title, "desc": f"Do: {title.lower()}"}
        for i, title in enumerate(steps, start=1)
    ]
    return {
        "week": number,
        "title": f"Week {number} title",
        "short_desc": "Short description",
        "subtopics": ["A", "B"],
        "assessment": "Practical check",
        "introduction": "Intro text",
        "sections": [
            {"title": "Reading", "type": "text", "content": "Plain content"},
            {"title": "Hands on", "type": "activity", "content": json.dumps(activity)},
        ],
        "takeaways": ["One", "Two"],
        "quiz": [
            {
                "id": 1,
                "type": "multiple-choice",
                "difficulty": "easy",
                "question": "Pick B",
                "options": ["A", "B", "C"],
                "correct_answer": 1,
                "explanation": "B is right",
            },
            {
                "id": 2,
                "type": "short-answer",
                "difficulty": "medium",
                "question": "Capital of France?",
                "correct_answer": "paris",
                "explanation": "It is Paris",
            },
            {
                "id": 3,
                "type": "matching",
                "difficulty": "hard",
                "question": "Match them",
                "matching_pairs": [{"left": "L", "right": "R"}],
                "explanation": "Pairs",
            },
            {
                "id": 4,
                "type": "scenario",
                "difficulty": "medium",
                "question": "What now?",
                "options": ["Panic", "Check the cable"],
                "correct_answer": 1,
                "explanation": "Check first",
            },
        ],
    }


@pytest.fixture
def curriculum_data() -> dict:
    return {"weeks": [make_week(1), make_week(2), make_week(3)]}


@pytest.fixture
def store(curriculum_data) -> CurriculumStore:
    return CurriculumStore(Curriculum.model_validate(curriculum_data))


class FakeTextGenerator:
    """Records prompts; replies with ``reply`` or raises ``error``."""

    def __init__(self, reply: str | None = "Sure thing, buddy!", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def generate_text(self, prompt: str, system_instruction: str) -> str | None:
        self.calls.append((prompt, system_instruction))
        if self.error:
            raise self.error
        return self.reply


class FakeImageGenerator:
    """Records prompts; returns ``image`` or raises ``error``."""

    def __init__(self, image: InlineImage | None = None, error: Exception | None = None):
        self.image = image
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.during_call = None     # optional hook run while "in flight"

    def generate_image(self, prompt: str, aspect_ratio: str = "16:9") -> InlineImage | None:
        self.calls.append((prompt, aspect_ratio))
        if self.during_call:
            self.during_call()
        if self.error:
            raise self.error
        return self.image


@pytest.fixture
def png() -> InlineImage:
    return InlineImage(data=b"\x89PNG-bytes", mime_type="image/png")


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def image_generator(png) -> FakeImageGenerator:
    return FakeImageGenerator(image=png)


@pytest.fixture
def failing_text_generator() -> FakeTextGenerator:
    return FakeTextGenerator(error=ServiceError("network down"))


@pytest.fixture
def session(store, text_generator, image_generator) -> ClassroomSession:
    return ClassroomSession(store, text_generator, image_generator)
