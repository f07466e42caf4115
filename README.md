# examdesk

A small library for a multiple-choice exam system. It keeps its data in two
plain-text files in one directory:

- `questions.txt`: the question bank (four options per question)
- `exams.txt`: the exams (title, start/end time, duration and the question IDs they use)

## Installation

```
pip install .
```

## Modules

### `examdesk.models`

- `Question(qid, text, options, correct=1)`: a dataclass. `options` must hold
  exactly four strings and `correct` (1-based) must be 1-4, or `ValueError` is
  raised.
- `Exam(exam_id, title, start_time=0, end_time=0, duration=0, qids=[])`: a
  dataclass. `Exam.is_active(now)` is true when `start_time <= now <= end_time`.
- `normalize_title(title)`: lower-cases a title and drops all whitespace, so
  `"Mid   Term Exam"` becomes `"midtermexam"`.
- `format_options(question)`: the four options laid out as two aligned lines.
- `demo_questions()`: four sample questions.

### `examdesk.storage`

- `parse_questions(lines)` and `parse_exams(lines)` read the file formats below
  from any iterable of lines. Malformed question blocks are skipped.
- `format_question_record(question)` and `format_exam_record(exam)` produce the
  stored text block for one record.
- `next_qid(questions)`: one more than the largest question ID, or 1.
- `CapacityError`: raised when the question bank (1000) or the exam list (500)
  is full.
- `ExamStore(directory=".")`: the two files in a directory, with the parsed
  `questions` and `exams` held in memory. It has `load_questions()`,
  `load_exams()`, `reload()`, `append_question(question)`,
  `append_exam(exam)`, `rewrite_exams()`, `find_question(qid)`,
  `find_exam(exam_id)`, `next_qid()`, `next_exam_id()`,
  `matching_exams(title)` (exams with the same title, ignoring case and
  whitespace) and `ensure_demo()`.

`ensure_demo()` loads both files. If `questions.txt` is missing, it writes the
demo questions. If `exams.txt` is missing and there are questions, it writes a
"Mid Term Exam" open from time 1 to time 10, with a duration of 60 and the first
four questions. It returns the status messages as a list of strings.

```python
from examdesk.models import Question
from examdesk.storage import ExamStore

store = ExamStore("data")
for message in store.ensure_demo():
    print(message)

question = Question(store.next_qid(), "Largest planet?",
                    ("Mars", "Jupiter", "Venus", "Earth"), 2)
store.append_question(question)

for exam in store.matching_exams("mid term exam"):
    exam.qids.append(question.qid)
store.rewrite_exams()
```

## File formats

`questions.txt`:

```
[1] What is 2 + 2?
1) 3      2) 4
3) 5      4) 22
[2]

```

`exams.txt` (start, end, duration and question count, then the question IDs):

```
[1] Mid Term Exam
[1] [10] [60] [4]
[1,2,3,4]

```

## What this package does not do

There is no interactive console and no command to run. The package has no
login, no teacher or student menus, and no exam-taking session with shuffled
questions and scoring. It provides the records, the file formats and the store
that such a front end would build on.