from exercises_app.domain.person import Person18, Person19
from exercises_app.domain.phone import Phone
from exercises_app.ui import classes_view, methods_view, strings_view


def test_person18_construction_forms(capsys):
    default = Person18()
    named = Person18("Ada")
    full = Person18("Ada", 36)
    out = capsys.readouterr().out.splitlines()

    assert (default.name, default.age) == ("Unknown", 0)
    assert (named.name, named.age) == ("Ada", 0)
    assert (full.name, full.age) == ("Ada", 36)
    assert out == [
        "Person18(): parameterless constructor invoked.",
        "Person18(name): name = Ada",
        "Person18(name, age): name = Ada, age = 36",
    ]


def test_person19_defaults():
    person = Person19()
    assert (person.name, person.age) == ("unknown", 0)


def test_phone_actions(capsys):
    Phone("Acme", "X1", 2025).text("555-1234", "hi")
    assert capsys.readouterr().out == "Texting 555-1234: hi\n"


def test_class_exercises_output(capsys):
    classes_view.exercise_17()
    classes_view.exercise_18()
    classes_view.exercise_19()
    classes_view.exercise_20()
    out = capsys.readouterr().out

    assert "[17] Phone: Acme X1 (2025)" in out
    assert "Calling 555-1234..." in out
    assert "[18] p3 => Name: Person Three, Age: 30" in out
    assert "[19] Name: unknown, Age: 0 (defaults)" in out
    assert "[20] Person20 instance created." in out


def test_greeting_exercises_output(capsys):
    strings_view.exercise_5()
    methods_view.exercise_21()
    methods_view.exercise_22()
    methods_view.exercise_23()
    methods_view.exercise_29()
    methods_view.exercise_30()
    out = capsys.readouterr().out

    assert "[5] Reversed word order: flexible and powerful is C#" in out
    assert "Hello! Welcome to the methods demo." in out
    assert "[22] Result = 12" in out
    assert "[23] Hello, Eric! The current year is 2025." in out
    assert "IsEven(10) = True" in out
    assert "Hi Eric! Hi Eric! Hi Eric!" in out
