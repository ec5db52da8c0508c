from datetime import date

import pytest

from gradebook.schemas.mark import MarkWithSubject
from gradebook.schemas.school_class import ClassCreate
from gradebook.schemas.session import SessionCreate
from gradebook.schemas.student import StudentCreate, StudentWithMarks
from gradebook.schemas.subject import Subject, SubjectCreate
from gradebook.services.leaderboard import (
    build_leaderboard,
    calculate_percentage,
    filter_students,
    parse_obtained,
    rank_students,
    resolve_default_class,
    summarize,
)


def make_student(student_id, name, scores, roll_no=None):
    """scores: list of (obtained, max_marks)"""
    marks = [
        MarkWithSubject(
            id=student_id * 10 + i,
            student_id=student_id,
            subject_id=i + 1,
            obtained=str(obtained),
            subject=Subject(id=i + 1, name=f"Test {i + 1}", date=date(2024, 7, 1), max_marks=max_marks, class_id=1),
        )
        for i, (obtained, max_marks) in enumerate(scores)
    ]
    return StudentWithMarks(
        id=student_id,
        roll_no=roll_no if roll_no is not None else student_id,
        name=name,
        class_id=1,
        marks=marks,
    )


@pytest.mark.parametrize("value, expected", [
    ("54", 54.0),
    ("37.5", 37.5),
    ("", 0.0),
    ("absent", 0.0),
    (None, 0.0),
])
def test_parse_obtained(value, expected):
    assert parse_obtained(value) == expected


def test_percentage_over_all_marks():
    student = make_student(1, "A", [(30, 50), (40, 50)])
    assert calculate_percentage(student) == pytest.approx(70.0)


def test_percentage_is_zero_without_marks():
    assert calculate_percentage(make_student(1, "A", [])) == 0.0


def test_percentage_is_zero_when_max_marks_sum_to_zero():
    student = make_student(1, "A", [(5, 0)])
    assert calculate_percentage(student) == 0.0


def test_rank_orders_by_percentage_descending():
    students = [
        make_student(1, "Eighty", [(80, 100)]),
        make_student(2, "Sixty", [(60, 100)]),
        make_student(3, "Ninety", [(90, 100)]),
    ]

    ranked = rank_students(students)

    assert [s.percentage for s in ranked] == [90.0, 80.0, 60.0]
    assert [s.rank for s in ranked] == [1, 2, 3]
    assert summarize(len(students), ranked)["top_performer"] == "Ninety"


def test_rank_keeps_input_order_for_ties():
    students = [
        make_student(1, "First", [(50, 100)]),
        make_student(2, "Second", [(50, 100)]),
        make_student(3, "Best", [(99, 100)]),
    ]

    assert [s.name for s in rank_students(students)] == ["Best", "First", "Second"]


def test_filter_matches_name_case_insensitively_or_roll_no():
    students = [
        make_student(1, "Rahul Kumar", [], roll_no=3),
        make_student(2, "Aman Kumar", [], roll_no=13),
        make_student(3, "Soha", [], roll_no=17),
    ]

    assert [s.name for s in filter_students(students, "kumar")] == ["Rahul Kumar", "Aman Kumar"]
    assert [s.name for s in filter_students(students, "3")] == ["Rahul Kumar", "Aman Kumar"]
    assert [s.name for s in filter_students(students, "SOHA")] == ["Soha"]
    assert len(filter_students(students, "")) == 3
    assert filter_students(students, "nobody") == []


def test_filter_does_not_trim_search_text():
    students = [
        make_student(1, "Naziya U", [], roll_no=5),
        make_student(2, "Soha", [], roll_no=17),
    ]

    assert [s.name for s in filter_students(students, " ")] == ["Naziya U"]
    assert [s.name for s in filter_students(students, " soha")] == []
    assert [s.name for s in rank_students(students, " ")] == ["Naziya U"]


def test_summarize_empty():
    assert summarize(5, []) == {
        "total_students": 5,
        "average_percentage": 0.0,
        "top_performer": None,
    }


def test_summarize_averages_ranked_students():
    ranked = rank_students([
        make_student(1, "A", [(1, 3)]),
        make_student(2, "B", [(2, 3)]),
    ])

    assert summarize(2, ranked)["average_percentage"] == 50.0


def test_resolve_default_class_prefers_active_session(storage):
    old = storage.create_session(SessionCreate(name="2023-24", is_active=False))
    current = storage.create_session(SessionCreate(name="2024-25", is_active=True))
    storage.create_class(ClassCreate(name="Old 10th", session_id=old.id))
    first = storage.create_class(ClassCreate(name="10th", session_id=current.id))
    storage.create_class(ClassCreate(name="9th", session_id=current.id))

    assert resolve_default_class(storage).id == first.id
    assert resolve_default_class(storage, old.id).name == "Old 10th"


def test_resolve_default_class_falls_back_to_first_session(storage):
    first = storage.create_session(SessionCreate(name="2023-24"))
    storage.create_session(SessionCreate(name="2024-25"))
    school_class = storage.create_class(ClassCreate(name="10th", session_id=first.id))

    assert resolve_default_class(storage).id == school_class.id


def test_resolve_default_class_without_data(storage):
    assert resolve_default_class(storage) is None


def test_build_leaderboard_from_storage(storage, school_class):
    subject = storage.create_subject(SubjectCreate(
        name="Initial Test", date=date(2024, 7, 1), max_marks=80, class_id=school_class.id
    ))
    scores = {"Aakash": "54", "Rahul": "70", "Prince": "0"}
    for roll_no, (name, obtained) in enumerate(scores.items(), start=1):
        student = storage.create_student(StudentCreate(roll_no=roll_no, name=name, class_id=school_class.id))
        storage.update_mark(student.id, subject.id, obtained)

    board = build_leaderboard(storage)

    assert board.class_id == school_class.id
    assert board.session_id == school_class.session_id
    assert [s.name for s in board.students] == ["Rahul", "Aakash", "Prince"]
    assert board.students[0].percentage == pytest.approx(87.5)
    assert board.top_performer == "Rahul"
    assert board.total_students == 3

    searched = build_leaderboard(storage, class_id=school_class.id, search="pri")
    assert [s.name for s in searched.students] == ["Prince"]
    assert searched.total_students == 3
    assert searched.top_performer == "Prince"


def test_build_leaderboard_without_classes(storage):
    board = build_leaderboard(storage)

    assert board.students == []
    assert board.class_id is None
    assert board.top_performer is None
