"""Plain-text persistence of the question bank and the exam list."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import Exam, Question, demo_questions, format_options, normalize_title

QUESTIONS_FILE = "questions.txt"
EXAMS_FILE = "exams.txt"
MAX_QUESTIONS = 1000
MAX_EXAMS = 500
MAX_EXAM_QUESTIONS = 200
MAX_TEXT = 511
MAX_FIELD = 255

_WS = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")
_TIMING_FIELD = re.compile(r"\[[ \t\n\v\f\r]*([+-]?[0-9]+)")


class CapacityError(Exception):
    """Raised when a bank has no room left."""


def _clean(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield line.rstrip("\r\n")


def _leading_number(text: str) -> tuple[int, str]:
    digits = _DIGITS.match(text).group()
    return (int(digits) if digits else 0), text[len(digits):]


def _parse_header(line: str) -> tuple[int, str]:
    number, rest = _leading_number(line[1:])
    close = rest.find("]")
    rest = rest[close + 1:] if close >= 0 else ""
    return number, rest.lstrip(_WS)


def _option_pair(line: str, left: str, right: str) -> tuple[str, str] | None:
    left_pos = line.find(left)
    right_pos = line.find(right)
    if left_pos < 0 or right_pos < 0:
        return None
    start = len(line) - len(line[left_pos + 2:].lstrip(_WS))
    if right_pos - start <= 0:
        return None
    first = line[start:right_pos][:MAX_FIELD].rstrip(_WS)
    second = line[right_pos + 2:].lstrip(_WS)[:MAX_FIELD]
    return first, second


def _parse_question(header: str, body: list[str]) -> Question | None:
    qid, text = _parse_header(header)
    top = _option_pair(body[0], "1)", "2)")
    bottom = _option_pair(body[1], "3)", "4)")
    if top is None or bottom is None:
        return None
    marker = body[2].find("[")
    value, _ = _leading_number(body[2][marker + 1:] if marker >= 0 else "")
    correct = value if 1 <= value <= 4 else 1
    return Question(qid, text[:MAX_TEXT], top + bottom, correct)


def parse_questions(lines: Iterable[str]) -> list[Question]:
    """Read question blocks; malformed blocks are skipped."""
    stream = _clean(lines)
    questions: list[Question] = []
    for line in stream:
        if not line.startswith("["):
            continue
        body = list(itertools.islice(stream, 3))
        if len(body) < 3:
            break
        question = _parse_question(line, body)
        if question is not None and len(questions) < MAX_QUESTIONS:
            questions.append(question)
    return questions


def _scan_timing(line: str) -> list[int]:
    values: list[int] = []
    pos = 0
    for field_no in range(4):
        if field_no:
            pos = len(line) - len(line[pos:].lstrip(_WS))
        match = _TIMING_FIELD.match(line, pos)
        if match is None:
            break
        values.append(int(match.group(1)))
        pos = match.end()
        if not line.startswith("]", pos):
            break
        pos += 1
    return values + [0] * (4 - len(values))


def _scan_qids(line: str) -> list[int]:
    marker = line.find("[")
    body = line[marker + 1:] if marker >= 0 else ""
    close = body.find("]")
    if close >= 0:
        body = body[:close]
    qids: list[int] = []
    digits = ""
    for ch in body + ",":
        if ch in "0123456789":
            digits += ch
        elif ch == "," or ch in _WS:
            if digits:
                qids.append(int(digits))
                digits = ""
    return qids[:MAX_EXAM_QUESTIONS]


def parse_exams(lines: Iterable[str]) -> list[Exam]:
    """Read exam blocks: header, timing line and question-id list."""
    stream = _clean(lines)
    exams: list[Exam] = []
    for line in stream:
        if not line.startswith("["):
            continue
        body = list(itertools.islice(stream, 2))
        if len(body) < 2:
            break
        exam_id, title = _parse_header(line)
        start, end, duration, _ = _scan_timing(body[0])
        if len(exams) < MAX_EXAMS:
            exams.append(
                Exam(exam_id, title[:MAX_FIELD], start, end, duration, _scan_qids(body[1]))
            )
    return exams


def format_question_record(question: Question) -> str:
    """The text block stored for one question."""
    first, second = format_options(question)
    return f"[{question.qid}] {question.text}\n{first}\n{second}\n[{question.correct}]\n\n"


def format_exam_record(exam: Exam) -> str:
    """The text block stored for one exam."""
    qids = ",".join(str(qid) for qid in exam.qids)
    return (
        f"[{exam.exam_id}] {exam.title}\n"
        f"[{exam.start_time}] [{exam.end_time}] [{exam.duration}] [{len(exam.qids)}]\n"
        f"[{qids}]\n\n"
    )


def next_qid(questions: Iterable[Question]) -> int:
    """One more than the largest question id, or 1 for an empty bank."""
    return max((q.qid for q in questions), default=0) + 1


class ExamStore:
    """Question bank and exam list kept in two text files in a directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.questions_path = self.directory / QUESTIONS_FILE
        self.exams_path = self.directory / EXAMS_FILE
        self.questions: list[Question] = []
        self.exams: list[Exam] = []

    def load_questions(self) -> list[Question]:
        try:
            with open(self.questions_path, encoding="utf-8") as handle:
                self.questions = parse_questions(handle)
        except FileNotFoundError:
            self.questions = []
        return self.questions

    def load_exams(self) -> list[Exam]:
        try:
            with open(self.exams_path, encoding="utf-8") as handle:
                self.exams = parse_exams(handle)
        except FileNotFoundError:
            self.exams = []
        return self.exams

    def reload(self) -> None:
        """Reread both files into memory."""
        self.load_questions()
        self.load_exams()

    def append_question(self, question: Question) -> None:
        if len(self.questions) >= MAX_QUESTIONS:
            raise CapacityError("Question bank is full.")
        with open(self.questions_path, "a", encoding="utf-8") as handle:
            handle.write(format_question_record(question))
        self.questions.append(question)

    def append_exam(self, exam: Exam) -> None:
        if len(self.exams) >= MAX_EXAMS:
            raise CapacityError("Exam list is full.")
        with open(self.exams_path, "a", encoding="utf-8") as handle:
            handle.write(format_exam_record(exam))
        self.exams.append(exam)

    def rewrite_exams(self) -> None:
        """Replace the exams file with the exams held in memory."""
        with open(self.exams_path, "w", encoding="utf-8") as handle:
            handle.writelines(format_exam_record(exam) for exam in self.exams)

    def find_question(self, qid: int) -> Question | None:
        return next((q for q in self.questions if q.qid == qid), None)

    def find_exam(self, exam_id: int) -> Exam | None:
        return next((e for e in self.exams if e.exam_id == exam_id), None)

    def next_qid(self) -> int:
        return next_qid(self.questions)

    def next_exam_id(self) -> int:
        return max(1, max((e.exam_id for e in self.exams), default=0) + 1)

    def matching_exams(self, title: str) -> list[Exam]:
        """Exams whose titles equal ``title`` ignoring case and whitespace."""
        wanted = normalize_title(title)
        return [e for e in self.exams if normalize_title(e.title) == wanted]

    def ensure_demo(self) -> list[str]:
        """Load both files, creating demo data where a file is missing."""
        messages: list[str] = []
        if self.questions_path.is_file():
            self.load_questions()
            messages.append(f"Loaded {len(self.questions)} questions from {QUESTIONS_FILE}")
        else:
            self.questions = []
            for question in demo_questions():
                self.append_question(question)
            messages.append(f"Demo questions created and saved to {QUESTIONS_FILE}")

        if self.exams_path.is_file():
            self.load_exams()
            messages.append(f"Loaded {len(self.exams)} exams from {EXAMS_FILE}")
        elif self.questions:
            qids = [q.qid for q in self.questions[:4]]
            self.append_exam(Exam(1, "Mid Term Exam", 1, 10, 60, qids))
            messages.append(f"Demo exam created and saved to {EXAMS_FILE}")
        return messages