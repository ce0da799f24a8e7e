"""
GOOD example - follows the Interface Segregation Principle.

Workable and Eatable are separate capability interfaces. Each role
implements only what it actually does, and each function asks only for the
capability it uses.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from solid_examples.console import get_console


class Workable(ABC):
    @abstractmethod
    def work(self) -> None:
        ...


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> None:
        ...


class Programmer(Workable, Eatable):
    name = "Programmer"

    def work(self) -> None:
        get_console().print(f"{self.name} is writing code")

    def eat(self) -> None:
        get_console().print(f"{self.name} is eating lunch")


class Manager(Workable, Eatable):
    name = "Manager"

    def work(self) -> None:
        get_console().print(f"{self.name} is planning the sprint")

    def eat(self) -> None:
        get_console().print(f"{self.name} is eating lunch")


class Robot(Workable):
    name = "Robot"

    def work(self) -> None:
        get_console().print(f"{self.name} is assembling parts")


def make_work(worker: Workable) -> None:
    get_console().print("[dim]make_work[/dim]")
    worker.work()


def feed_worker(worker: Eatable) -> None:
    get_console().print("[dim]feed_worker[/dim]")
    worker.eat()


def main() -> None:
    console = get_console()
    console.print("[bold]=== GOOD Example: Follows Interface Segregation Principle ===[/bold]\n")

    dev = Programmer()
    bot = Robot()
    mgr = Manager()

    make_work(dev)
    make_work(bot)
    make_work(mgr)

    feed_worker(dev)
    feed_worker(mgr)

    console.print("\n[green]--- Benefits ---[/green]")
    console.print("Robot implements only Workable; nothing forces it to eat.")
    console.print("feed_worker() only accepts Eatable roles.")


if __name__ == "__main__":
    main()
