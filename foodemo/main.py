"""Command that greets a couple of example foos."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from foodemo.foo import Foo, Settings, Style


def greeting(foo: Foo, name: str | None = None) -> str:
    """Return a greeting in the foo's style.

    With no ``name`` the foo is greeted by its id, taken as 0 when unset.
    """
    subject = name if name is not None else f"number {foo.id if foo.id is not None else 0}"
    if foo.settings.style is Style.BAR:
        return f"Hi {subject}."
    return f"Hello, {subject}!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print greetings for two example foos."""
    parser = argparse.ArgumentParser(
        prog="foodemo",
        description="Example application that greets two foos.",
    )
    parser.parse_args(argv)

    example1 = Foo(42, Settings())
    example2 = Foo(None, Settings(style=Style.BAR))
    print(greeting(example1))
    print(greeting(example2, "world"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())