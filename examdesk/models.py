"""Questions, exams and the console layout of answer options."""

from __future__ import annotations

from dataclasses import dataclass, field

OPTION_COUNT = 4


@dataclass
class Question:
    """A multiple-choice question with four options; ``correct`` is 1-based."""

    qid: int
    text: str
    options: tuple[str, ...]
    correct: int = 1

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"a question needs exactly {OPTION_COUNT} options")
        if not 1 <= self.correct <= OPTION_COUNT:
            raise ValueError(f"correct option must be 1-{OPTION_COUNT}")


@dataclass
class Exam:
    """A scheduled exam referring to questions by their ids."""

    exam_id: int
    title: str
    start_time: int = 0
    end_time: int = 0
    duration: int = 0
    qids: list[int] = field(default_factory=list)

    def is_active(self, now: int) -> bool:
        """True when ``now`` lies within the exam window, both ends included."""
        return self.start_time <= now <= self.end_time


def normalize_title(title: str) -> str:
    """Lower-case a title and drop all whitespace, for comparing titles."""
    return "".join(ch.lower() for ch in title if not ch.isspace())


def format_options(question: Question) -> tuple[str, str]:
    """Lay the four options out in two aligned columns."""
    first, second, third, fourth = question.options
    width = 3 + max(len(first), len(third)) + 6
    return (
        f"1) {first}".ljust(width) + f"2) {second}",
        f"3) {third}".ljust(width) + f"4) {fourth}",
    )


def demo_questions() -> list[Question]:
    """The built-in sample question bank."""
    return [
        Question(1, "What is 2 + 2?", ("3", "4", "5", "22"), 2),
        Question(2, "Capital of France?", ("London", "Berlin", "Paris", "Madrid"), 3),
        Question(
            3,
            "Who created the C language?",
            ("Charles Babbage", "Dennis Ritchie", "Bjarne Stroustrup", "Alan Turing"),
            2,
        ),
        Question(
            4,
            "Which one is an operating system?",
            ("Linux", "Google", "Intel", "Microsoft Office"),
            1,
        ),
    ]