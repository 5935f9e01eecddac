"""Class definition and construction exercises: 17 to 20."""

from exercises_app.domain.person import Person18, Person19, Person20
from exercises_app.domain.phone import Phone


def exercise_17():
    phone = Phone(brand="Acme", model="X1", year=2025)
    print(f"[17] Phone: {phone.brand} {phone.model} ({phone.year})")
    phone.call("555-1234")
    phone.text("555-1234", "Hello from Exercise 17!")


def exercise_18():
    p1 = Person18()
    p2 = Person18("Person Two")
    p3 = Person18("Person Three", 30)

    for label, person in (("p1", p1), ("p2", p2), ("p3", p3)):
        print(f"[18] {label} => Name: {person.name}, Age: {person.age}")


def exercise_19():
    person = Person19()
    print(f"[19] Name: {person.name}, Age: {person.age} (defaults)")


def exercise_20():
    Person20()
    print("[20] Person20 instance created.")
