"""
Basic Maybe usage: lookups that may miss, chaining, combining.

Run: python examples/basic_maybe.py
"""
from maybepy import (
    ConsoleLogger,
    EmptyValueError,
    from_nullable,
    just,
    lift,
    nothing,
    zip_maybes,
)


USERS = {
    "ann@example.com": {"name": "Ann", "manager": "bob@example.com"},
    "bob@example.com": {"name": "Bob"},
}


def find_user(email):
    return from_nullable(USERS.get(email))


def main():
    log = ConsoleLogger(name="example", level="DEBUG")

    # map + get_or_else over a lookup that may miss
    for email in ("ann@example.com", "nobody@example.com"):
        name = find_user(email).map(lambda u: u["name"]).log(log, email).get_or_else(lambda: "NO NAME")
        print(email, "->", name)

    # flat_map chains lookups that each may miss
    manager = (
        find_user("ann@example.com")
        .flat_map(lambda u: from_nullable(u.get("manager")))
        .flat_map(find_user)
        .map(lambda u: u["name"])
    )
    print("ann's manager:", manager)
    print("bob's manager:", find_user("bob@example.com").flat_map(lambda u: from_nullable(u.get("manager"))))

    # combine several optionals
    print(zip_maybes(just(1), just(2), just(3)))
    print(lift(lambda a, b: a * b, just(6), just(7)))
    print(lift(lambda a, b: a * b, just(6), nothing()))

    try:
        nothing().get()
    except EmptyValueError as e:
        print("get on Nothing:", e)


if __name__ == "__main__":
    main()
