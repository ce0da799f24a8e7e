"""
BAD example - violates the Liskov Substitution Principle.

Bird promises that every bird can fly. Penguin inherits the promise and
breaks it, so code written against Bird fails when handed a Penguin.
"""
from __future__ import annotations

from solid_examples.console import get_console
from solid_examples.errors import CapabilityError


class Bird:
    name = "Bird"

    def fly(self) -> None:
        get_console().print(f"{self.name} is flying")


class Sparrow(Bird):
    name = "Sparrow"


class Penguin(Bird):
    name = "Penguin"

    def fly(self) -> None:
        raise CapabilityError(self.name, "fly")


def make_bird_fly(bird: Bird) -> None:
    bird.fly()


def main() -> None:
    console = get_console()
    console.print("[bold]=== BAD Example: Violates Liskov Substitution Principle ===[/bold]\n")

    for bird in (Sparrow(), Penguin()):
        try:
            make_bird_fly(bird)
        except CapabilityError as exc:
            console.print(f"[red]Substitution broken:[/red] {exc}")

    console.print("\n[red]--- Problem ---[/red]")
    console.print("Penguin is a Bird, but it cannot do what every Bird promises.")
    console.print("Callers of make_bird_fly() must now special-case penguins.")


if __name__ == "__main__":
    main()
