"""Quiz answer capture and grading tests."""

import pytest

from ilearncom.classroom import AnswerTypeError, OptionState, Verdict, grade, option_state
from ilearncom.classroom.quiz import record_answer, reset, submit
from ilearncom.schemas import AppView, ChoiceAnswer, QuizQuestion, QuizState, TextAnswer


def short_answer(correct: str = "paris") -> QuizQuestion:
    return QuizQuestion(
        id=2, type="short-answer", difficulty="easy", question="?",
        correct_answer=correct, explanation="",
    )


def multiple_choice() -> QuizQuestion:
    return QuizQuestion(
        id=1, type="multiple-choice", difficulty="easy", question="?",
        options=["a", "b", "c"], correct_answer=1, explanation="",
    )


def matching() -> QuizQuestion:
    return QuizQuestion(
        id=3, type="matching", difficulty="easy", question="?",
        matching_pairs=[{"left": "x", "right": "y"}], explanation="",
    )


class TestGrading:

    def test_short_answer_ignores_case_and_whitespace(self):
        assert grade(short_answer("paris"), TextAnswer(text=" Paris ")) == Verdict.CORRECT

    def test_short_answer_wrong(self):
        assert grade(short_answer("paris"), TextAnswer(text="Pariss")) == Verdict.INCORRECT

    def test_short_answer_correct_answer_trimmed_too(self):
        assert grade(short_answer("  RAM "), TextAnswer(text="ram")) == Verdict.CORRECT

    def test_choice_correct_and_wrong(self):
        q = multiple_choice()
        assert grade(q, ChoiceAnswer(index=1)) == Verdict.CORRECT
        assert grade(q, ChoiceAnswer(index=2)) == Verdict.INCORRECT

    def test_unanswered(self):
        assert grade(multiple_choice(), None) == Verdict.UNANSWERED
        assert grade(short_answer(), None) == Verdict.UNANSWERED

    def test_matching_never_graded(self):
        assert grade(matching(), None) == Verdict.NOT_GRADED


class TestRecordAnswer:

    def test_overwrites_previous_answer(self):
        state = QuizState()
        q = multiple_choice()
        record_answer(state, "w1-q1", q, ChoiceAnswer(index=0))
        record_answer(state, "w1-q1", q, ChoiceAnswer(index=2))
        assert state.answers["w1-q1"] == ChoiceAnswer(index=2)

    def test_rejects_text_for_choice_question(self):
        with pytest.raises(AnswerTypeError):
            record_answer(QuizState(), "w1-q1", multiple_choice(), TextAnswer(text="b"))

    def test_rejects_choice_for_short_answer(self):
        with pytest.raises(AnswerTypeError):
            record_answer(QuizState(), "w1-q2", short_answer(), ChoiceAnswer(index=0))

    def test_rejects_option_out_of_range(self):
        with pytest.raises(AnswerTypeError):
            record_answer(QuizState(), "w1-q1", multiple_choice(), ChoiceAnswer(index=3))

    def test_rejects_any_answer_for_matching(self):
        with pytest.raises(AnswerTypeError):
            record_answer(QuizState(), "w1-q3", matching(), TextAnswer(text="x-y"))

    def test_answers_frozen_after_submit(self):
        state = QuizState()
        q = multiple_choice()
        record_answer(state, "w1-q1", q, ChoiceAnswer(index=0))
        submit(state)

        assert not record_answer(state, "w1-q1", q, ChoiceAnswer(index=1))
        submit(state)

        assert state.submitted
        assert state.answers == {"w1-q1": ChoiceAnswer(index=0)}

    def test_reset_starts_new_attempt(self):
        state = QuizState()
        record_answer(state, "w1-q1", multiple_choice(), ChoiceAnswer(index=0))
        submit(state)
        reset(state)
        assert state.answers == {}
        assert not state.submitted
        assert state.attempt == 1


class TestOptionState:

    def test_before_submit_only_selection_shows(self):
        q = multiple_choice()
        answer = ChoiceAnswer(index=2)
        assert option_state(q, answer, 2, submitted=False) == OptionState.SELECTED
        assert option_state(q, answer, 1, submitted=False) == OptionState.IDLE

    def test_after_submit(self):
        q = multiple_choice()
        answer = ChoiceAnswer(index=2)
        assert option_state(q, answer, 1, submitted=True) == OptionState.CORRECT
        assert option_state(q, answer, 2, submitted=True) == OptionState.WRONG
        assert option_state(q, answer, 0, submitted=True) == OptionState.IDLE

    def test_correct_selection_after_submit(self):
        q = multiple_choice()
        assert option_state(q, ChoiceAnswer(index=1), 1, submitted=True) == OptionState.CORRECT


class TestPooledQuiz:

    def test_same_question_id_in_two_weeks_kept_apart(self, session):
        session.navigate(AppView.QUIZ)
        items = session.quiz_items()
        week1_q1 = next(i for i in items if i.week_number == 1 and i.question.id == 1)
        week2_q1 = next(i for i in items if i.week_number == 2 and i.question.id == 1)

        session.record_answer(week1_q1, ChoiceAnswer(index=1))
        session.record_answer(week2_q1, ChoiceAnswer(index=0))

        assert session.answer_for(week1_q1) == ChoiceAnswer(index=1)
        assert session.answer_for(week2_q1) == ChoiceAnswer(index=0)
        session.submit_quiz()
        assert session.grade(week1_q1) == Verdict.CORRECT
        assert session.grade(week2_q1) == Verdict.INCORRECT

    def test_pooled_quiz_lists_every_week_in_order(self, session):
        session.navigate(AppView.QUIZ)
        weeks = [i.week_number for i in session.quiz_items()]
        assert weeks == sorted(weeks)
        assert len(weeks) == 12
