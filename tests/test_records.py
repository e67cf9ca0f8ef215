import pytest

from drillrun.drills.records import (
    ChangeColor,
    Echo,
    Move,
    Package,
    Point,
    Quit,
    ReportCard,
    State,
)


def test_match_message_call():
    state = State(
        quit=False, position=Point(0, 0), color=(0, 0, 0), message="hello world"
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        State().process("jump")


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_whole_numeric_grade():
    card = ReportCard(grade=3.0, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 3"