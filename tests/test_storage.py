import pytest

from examdesk.models import Exam, Question, demo_questions
from examdesk.storage import (
    CapacityError,
    ExamStore,
    MAX_QUESTIONS,
    format_exam_record,
    format_question_record,
    next_qid,
    parse_exams,
    parse_questions,
)


def _question(qid, correct=1):
    return Question(qid, f"Question {qid}", ("a", "b", "c", "d"), correct)


def test_next_qid_from_source_case():
    assert next_qid([_question(5), _question(9)]) == 10


def test_next_qid_empty_bank():
    assert next_qid([]) == 1


def test_format_question_record_layout():
    question = Question(1, "What is 2 + 2?", ("3", "4", "5", "22"), 2)
    assert format_question_record(question) == (
        "[1] What is 2 + 2?\n1) 3      2) 4\n3) 5      4) 22\n[2]\n\n"
    )


def test_format_exam_record_layout():
    exam = Exam(1, "Mid Term Exam", 1, 10, 60, [1, 2, 3, 4])
    assert format_exam_record(exam) == (
        "[1] Mid Term Exam\n[1] [10] [60] [4]\n[1,2,3,4]\n\n"
    )


def test_question_records_round_trip():
    questions = demo_questions()
    text = "".join(format_question_record(q) for q in questions)
    assert parse_questions(text.splitlines(keepends=True)) == questions


def test_exam_records_round_trip():
    exams = [Exam(3, "Final Exam", 1, 10, 60, [1]), Exam(4, "Quiz", -5, 7, 30, [])]
    text = "".join(format_exam_record(e) for e in exams)
    assert parse_exams(text.splitlines()) == exams


def test_parse_question_skips_block_without_markers():
    lines = ["[1] Broken", "no options here", "none here either", "[1]", "",
             "[2] Fine", "1) x  2) y", "3) z  4) w", "[4]"]
    parsed = parse_questions(lines)
    assert [(q.qid, q.options, q.correct) for q in parsed] == [(2, ("x", "y", "z", "w"), 4)]


def test_parse_question_bad_correct_defaults_to_one():
    parsed = parse_questions(["[7] Q", "1) a 2) b", "3) c 4) d", "[9]"])
    assert parsed[0].correct == 1


def test_parse_question_incomplete_block_is_dropped():
    assert parse_questions(["[1] Q", "1) a 2) b"]) == []


def test_parse_exam_partial_timing_line():
    exams = parse_exams(["[2] Partial", "[5] [x] [9] [1]", "[1]"])
    assert (exams[0].start_time, exams[0].end_time, exams[0].duration) == (5, 0, 0)


def test_parse_exam_qid_list_separators():
    exams = parse_exams(["[1] T", "[1] [2] [3] [3]", "[1, 2 ,3a4]"])
    assert exams[0].qids == [1, 2, 34]


def test_rewrite_and_load_exam_from_source_case(tmp_path):
    store = ExamStore(tmp_path)
    store.exams = [Exam(3, "Final Exam", 1, 10, 60, [1])]
    store.rewrite_exams()
    store.load_exams()
    assert len(store.exams) == 1
    assert store.exams[0].exam_id == 3
    assert store.exams[0].qids == [1]


def test_rewrite_replaces_previous_content(tmp_path):
    store = ExamStore(tmp_path)
    store.append_exam(Exam(1, "Old", 1, 2, 3, [1]))
    store.exams = [Exam(2, "New", 4, 5, 6, [2])]
    store.rewrite_exams()
    assert store.exams_path.read_text(encoding="utf-8") == "[2] New\n[4] [5] [6] [1]\n[2]\n\n"


def test_ensure_demo_creates_files(tmp_path):
    store = ExamStore(tmp_path)
    messages = store.ensure_demo()
    assert messages == [
        "Demo questions created and saved to questions.txt",
        "Demo exam created and saved to exams.txt",
    ]
    assert store.exams == [Exam(1, "Mid Term Exam", 1, 10, 60, [1, 2, 3, 4])]


def test_ensure_demo_loads_existing_files(tmp_path):
    ExamStore(tmp_path).ensure_demo()
    store = ExamStore(tmp_path)
    messages = store.ensure_demo()
    assert messages == ["Loaded 4 questions from questions.txt", "Loaded 1 exams from exams.txt"]
    assert store.questions == demo_questions()


def test_append_question_persists(tmp_path):
    store = ExamStore(tmp_path)
    store.append_question(_question(1, 3))
    fresh = ExamStore(tmp_path)
    fresh.load_questions()
    assert fresh.questions == [_question(1, 3)]


def test_append_question_when_full(tmp_path):
    store = ExamStore(tmp_path)
    store.questions = [_question(i) for i in range(1, MAX_QUESTIONS + 1)]
    with pytest.raises(CapacityError):
        store.append_question(_question(MAX_QUESTIONS + 1))


def test_missing_files_load_empty(tmp_path):
    store = ExamStore(tmp_path)
    store.reload()
    assert (store.questions, store.exams) == ([], [])


def test_lookup_helpers(tmp_path):
    store = ExamStore(tmp_path)
    store.questions = [_question(2), _question(8)]
    store.exams = [Exam(5, "Mid  Term", qids=[2]), Exam(2, "Final", qids=[8])]
    assert store.find_question(8) == _question(8)
    assert store.find_question(3) is None
    assert store.find_exam(2).title == "Final"
    assert store.find_exam(9) is None
    assert store.next_qid() == 9
    assert store.next_exam_id() == 6
    assert [e.exam_id for e in store.matching_exams("mid term")] == [5]


def test_next_exam_id_empty(tmp_path):
    assert ExamStore(tmp_path).next_exam_id() == 1