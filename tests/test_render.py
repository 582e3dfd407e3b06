from builders import classroom, school, subject, teacher
from timetabler.models import Lesson, Period, SchoolClass
from timetabler.render.csv_out import csv_blocks, write_csv_blocks


def _school():
    return school(
        classes=[SchoolClass("c1", "1A"), SchoolClass("c2", "1B")],
        teachers=[teacher("t1", ["s1"])],
        subjects=[subject("s1", name="Maths")],
        rooms=[classroom("r1")],
        periods=[
            Period("p0", "P1", 0),
            Period("brk", "Break", 1, True),
            Period("p2", "P3", 2, False, (1,)),
        ],
        days=[1, 0],
    )


def test_csv_blocks_layout() -> None:
    lessons = [Lesson("c1", "s1", "t1", "r1", "p0", 0), Lesson("c2", "s1", "t1", None, "p2", 1)]
    text = csv_blocks(lessons, _school())
    blocks = text.split("\n\n")
    assert blocks[0].splitlines() == [
        "Class,Day,Period,Subject,Teacher,Room",
        "1A,Monday,P1,Maths,T1,r1",
        "1A,Monday,Break,Break,,",
        "1A,Tuesday,P1,,,",
        "1A,Tuesday,Break,Break,,",
        "1A,Tuesday,P3,,,",
    ]
    assert "1B,Tuesday,P3,Maths,T1," in blocks[1].splitlines()
    assert text.count("Class,Day,Period,Subject,Teacher,Room") == 2


def test_write_csv_blocks(tmp_path) -> None:
    write_csv_blocks("a,b\n", tmp_path / "out")
    assert (tmp_path / "out" / "timetable.csv").read_text(encoding="utf-8") == "a,b\n"
