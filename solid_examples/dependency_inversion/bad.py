"""
BAD example - violates the Dependency Inversion Principle.

NotificationService builds its own EmailSender. Sending by SMS means editing
NotificationService.
"""
from __future__ import annotations

from rich.markup import escape

from solid_examples.console import get_console


class EmailSender:
    def send(self, message: str) -> None:
        get_console().print(f"Sending email: {escape(message)}")


class NotificationService:
    def __init__(self) -> None:
        # Hard-wired to one concrete sender
        self.sender = EmailSender()

    def notify(self, message: str) -> None:
        self.sender.send(message)


def main() -> None:
    console = get_console()
    console.print("[bold]=== BAD Example: Violates Dependency Inversion Principle ===[/bold]\n")

    service = NotificationService()
    service.notify("Hello via Email!")

    console.print("\n[red]--- Problem ---[/red]")
    console.print("NotificationService (high level) depends on EmailSender (low level).")
    console.print("To send by SMS we must MODIFY NotificationService.")
    console.print("It cannot be tested without a real EmailSender.")


if __name__ == "__main__":
    main()
