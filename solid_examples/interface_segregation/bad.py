"""
BAD example - violates the Interface Segregation Principle.

Worker bundles working and eating into one interface, so Robot is forced to
implement eat() even though it never eats.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from solid_examples.console import get_console
from solid_examples.errors import CapabilityError


class Worker(ABC):
    name = "Worker"

    @abstractmethod
    def work(self) -> None:
        ...

    @abstractmethod
    def eat(self) -> None:
        ...


class Programmer(Worker):
    name = "Programmer"

    def work(self) -> None:
        get_console().print(f"{self.name} is writing code")

    def eat(self) -> None:
        get_console().print(f"{self.name} is eating lunch")


class Robot(Worker):
    name = "Robot"

    def work(self) -> None:
        get_console().print(f"{self.name} is assembling parts")

    def eat(self) -> None:
        raise CapabilityError(self.name, "eat")


def make_work(worker: Worker) -> None:
    worker.work()


def feed_worker(worker: Worker) -> None:
    worker.eat()


def main() -> None:
    console = get_console()
    console.print("[bold]=== BAD Example: Violates Interface Segregation Principle ===[/bold]\n")

    workers = [Programmer(), Robot()]

    for worker in workers:
        make_work(worker)

    for worker in workers:
        try:
            feed_worker(worker)
        except CapabilityError as exc:
            console.print(f"[red]Forced method:[/red] {exc}")

    console.print("\n[red]--- Problem ---[/red]")
    console.print("Robot must implement eat() only because Worker declares it.")
    console.print("feed_worker() accepts any Worker, including ones that cannot eat.")


if __name__ == "__main__":
    main()
