"""
GOOD example - follows the Liskov Substitution Principle.

Flying and swimming are separate capabilities. make_bird_fly() only accepts
birds that are guaranteed to fly, so any FlyingBird can be substituted.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from solid_examples.console import get_console


class Capability(str, Enum):
    CAN_FLY = "can-fly"
    CAN_SWIM = "can-swim"


class Bird:
    """What every bird shares. Says nothing about flying."""

    name = "Bird"

    @property
    def capabilities(self) -> frozenset[Capability]:
        # Each capability class adds its own tag through super()
        return frozenset()


class FlyingBird(Bird, ABC):
    @property
    def capabilities(self) -> frozenset[Capability]:
        return super().capabilities | {Capability.CAN_FLY}

    @abstractmethod
    def fly(self) -> None:
        ...


class SwimmingBird(Bird, ABC):
    @property
    def capabilities(self) -> frozenset[Capability]:
        return super().capabilities | {Capability.CAN_SWIM}

    @abstractmethod
    def swim(self) -> None:
        ...


class Sparrow(FlyingBird):
    name = "Sparrow"

    def fly(self) -> None:
        get_console().print(f"{self.name} is flying")


class Duck(FlyingBird, SwimmingBird):
    name = "Duck"

    def fly(self) -> None:
        get_console().print(f"{self.name} is flying")

    def swim(self) -> None:
        get_console().print(f"{self.name} is swimming")


class Penguin(SwimmingBird):
    name = "Penguin"

    def swim(self) -> None:
        get_console().print(f"{self.name} is swimming")


def make_bird_fly(bird: FlyingBird) -> None:
    # Guaranteed to fly
    bird.fly()


def make_bird_swim(bird: SwimmingBird) -> None:
    # Guaranteed to swim
    bird.swim()


def main() -> None:
    console = get_console()
    console.print("[bold]=== GOOD Example: Follows Liskov Substitution Principle ===[/bold]\n")

    sparrow = Sparrow()
    duck = Duck()
    penguin = Penguin()

    make_bird_fly(sparrow)
    make_bird_fly(duck)

    make_bird_swim(duck)
    make_bird_swim(penguin)

    console.print("\n[green]--- Benefits ---[/green]")
    for bird in (sparrow, duck, penguin):
        tags = ", ".join(sorted(capability.value for capability in bird.capabilities))
        console.print(f"{bird.name}: {tags}")
    console.print("Every FlyingBird can replace any other FlyingBird safely.")


if __name__ == "__main__":
    main()
