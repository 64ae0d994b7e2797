"""
Quiz renderer - Question cards and post-submission feedback.

Option colouring and correctness come from ilearncom.classroom.quiz; this
module only turns them into HTML.
"""

import html

from ilearncom.classroom import OptionState, QuizItem, Verdict
from ilearncom.schemas import Difficulty, MatchingPair, QuestionType, QuizQuestion


DIFFICULTY_STYLES = {
    Difficulty.EASY: ("Easy", "quiz-diff-easy"),
    Difficulty.MEDIUM: ("Medium", "quiz-diff-medium"),
    Difficulty.HARD: ("Hard", "quiz-diff-hard"),
}

OPTION_MARKS = {
    OptionState.IDLE: "",
    OptionState.SELECTED: "●",
    OptionState.CORRECT: "✓",
    OptionState.WRONG: "✗",
}


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .quiz-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        margin-bottom: 0.5em;
    }
    .quiz-number {
        font-size: 0.85em;
        font-weight: 700;
        color: #9e9e9e;
        text-transform: uppercase;
        letter-spacing: 0.05em;
    }
    .quiz-diff {
        border-radius: 999px;
        padding: 0.1em 0.8em;
        font-size: 0.8em;
        font-weight: 700;
    }
    .quiz-diff-easy { color: #2e7d32; background: #e8f5e9; }
    .quiz-diff-medium { color: #ef6c00; background: #fff3e0; }
    .quiz-diff-hard { color: #c62828; background: #ffebee; }
    .quiz-question {
        font-size: 1.15em;
        font-weight: 600;
        color: #333;
        line-height: 1.6;
    }
    .quiz-matching-note {
        font-size: 0.9em;
        font-style: italic;
        color: #757575;
    }
    .quiz-pair {
        background: #fafafa;
        border: 1px solid #eee;
        border-radius: 10px;
        padding: 0.6em 1em;
        margin: 0.3em 0;
    }
    .quiz-pair-left {
        font-weight: 700;
        color: #1976D2;
        display: inline-block;
        min-width: 8em;
    }
    .quiz-result {
        border-radius: 10px;
        padding: 0.7em 1em;
        margin-top: 0.6em;
        font-weight: 600;
    }
    .quiz-result-correct { background: #e8f5e9; color: #2e7d32; }
    .quiz-result-incorrect { background: #ffebee; color: #c62828; }
    .quiz-explanation {
        background: #e3f2fd;
        border: 1px solid #bbdefb;
        border-radius: 12px;
        padding: 1em;
        margin-top: 0.8em;
        color: #1565C0;
    }
    </style>
    """


def quiz_title(week_title: str | None, week_number: int | None) -> str:
    if week_number is None:
        return "All questions from every lesson"
    return f"Week {week_number} quiz: {week_title}"


def render_question_header(position: int, question: QuizQuestion) -> str:
    """Render the number, difficulty badge and question text."""
    label, css_class = DIFFICULTY_STYLES[question.difficulty]
    return (
        '<div class="quiz-header">'
        f'<span class="quiz-number">Question {position}</span>'
        f'<span class="quiz-diff {css_class}">{label}</span>'
        '</div>'
        f'<div class="quiz-question">{html.escape(question.question)}</div>'
    )


def option_label(option: str, state: OptionState) -> str:
    """Button label for a choice option."""
    mark = OPTION_MARKS[state]
    return f"{mark} {option}" if mark else option


def render_matching_pairs(pairs: list[MatchingPair]) -> str:
    """Matching questions are shown as a fixed list of pairs."""
    parts = ['<div class="quiz-matching-note">Matching is shown as completed pairs (simulated).</div>']
    for pair in pairs:
        parts.append(
            '<div class="quiz-pair">'
            f'<span class="quiz-pair-left">{html.escape(pair.left)}</span> → '
            f'{html.escape(pair.right)}'
            '</div>'
        )
    return ''.join(parts)


def render_short_answer_result(question: QuizQuestion, verdict: Verdict) -> str:
    css = "quiz-result-correct" if verdict == Verdict.CORRECT else "quiz-result-incorrect"
    return (
        f'<div class="quiz-result {css}">'
        f'Correct answer: {html.escape(str(question.correct_answer))}'
        '</div>'
    )


def render_explanation(question: QuizQuestion) -> str:
    return (
        '<div class="quiz-explanation">'
        '<strong>Here\'s the answer, friend!</strong><br>'
        f'{html.escape(question.explanation)}'
        '</div>'
    )


def render_feedback(item: QuizItem, verdict: Verdict) -> str:
    """Everything shown under a question after submission."""
    parts = []
    if item.question.type == QuestionType.SHORT_ANSWER:
        parts.append(render_short_answer_result(item.question, verdict))
    parts.append(render_explanation(item.question))
    return ''.join(parts)
