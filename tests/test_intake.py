from builders import school, subject, teacher
from timetabler.data.proposals import parse_proposals
from timetabler.models import Period, Room, SchoolClass
from timetabler.validate.integrity import validate_lessons


def _school():
    return school(
        classes=[SchoolClass("c1", "1A")],
        teachers=[teacher("t1", ["s1"])],
        subjects=[subject("s1")],
        rooms=[Room("r1", "R1")],
        periods=[Period("p1", "P1", 0), Period("brk", "Break", 1, True)],
        days=[0, 1],
    )


def _lesson(**overrides):
    raw = {
        "classId": "c1",
        "subjectId": "s1",
        "teacherId": "t1",
        "roomId": "r1",
        "periodId": "p1",
        "dayOfWeek": 0,
    }
    raw.update(overrides)
    return raw


def test_parse_object_with_lessons_key() -> None:
    assert parse_proposals('{"lessons": [{"classId": "c1"}]}') == [{"classId": "c1"}]


def test_parse_bare_list_in_code_fence() -> None:
    text = '```json\n[{"classId": "c1"}, {"classId": "c2"}]\n```'
    assert [r["classId"] for r in parse_proposals(text)] == ["c1", "c2"]


def test_parse_json_embedded_in_prose() -> None:
    text = 'Here is the timetable: [{"classId": "c1"}] Hope it helps.'
    assert parse_proposals(text) == [{"classId": "c1"}]


def test_parse_garbage_gives_nothing() -> None:
    assert parse_proposals("I could not build a timetable.") == []
    assert parse_proposals('{"status": "ok"}') == []


def test_valid_proposals_are_accepted() -> None:
    valid, skipped = validate_lessons([_lesson(), _lesson(roomId=None, dayOfWeek=1)], _school())
    assert skipped == 0
    assert [l.room_id for l in valid] == ["r1", None]
    assert valid[1].day_of_week == 1


def test_unknown_references_are_skipped() -> None:
    bad = [
        _lesson(classId="nope"),
        _lesson(subjectId="nope"),
        _lesson(teacherId="nope"),
        _lesson(roomId="nope"),
        _lesson(periodId="brk"),
        _lesson(dayOfWeek=5),
        _lesson(dayOfWeek="0"),
        "not a lesson",
    ]
    missing_room = _lesson()
    del missing_room["roomId"]
    valid, skipped = validate_lessons(bad + [missing_room, _lesson()], _school())
    assert skipped == 9
    assert len(valid) == 1


def test_integrity_check_ignores_double_booking() -> None:
    valid, skipped = validate_lessons([_lesson(), _lesson()], _school())
    assert (len(valid), skipped) == (2, 0)
