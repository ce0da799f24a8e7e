"""
GOOD example - follows the Dependency Inversion Principle.

NotificationService depends on the MessageSender abstraction and receives a
concrete sender from the caller.
"""
from __future__ import annotations

from typing import Protocol

from rich.markup import escape

from solid_examples.console import get_console


class MessageSender(Protocol):
    """Anything that can deliver a text message."""

    def send(self, message: str) -> None:
        ...


class EmailSender:
    def send(self, message: str) -> None:
        get_console().print(f"Sending email: {escape(message)}")


class SMSSender:
    def send(self, message: str) -> None:
        get_console().print(f"Sending SMS: {escape(message)}")


class WhatsAppSender:
    def send(self, message: str) -> None:
        get_console().print(f"Sending WhatsApp message: {escape(message)}")


class NotificationService:
    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def notify(self, message: str) -> None:
        """Deliver ``message`` unchanged through the injected sender."""
        self._sender.send(message)


def main() -> None:
    console = get_console()
    console.print("[bold]=== GOOD Example: Follows Dependency Inversion Principle ===[/bold]\n")

    email_service = NotificationService(EmailSender())
    email_service.notify("Hello via Email!")

    # No change to NotificationService
    sms_service = NotificationService(SMSSender())
    sms_service.notify("Hello via SMS!")

    whatsapp_service = NotificationService(WhatsAppSender())
    whatsapp_service.notify("Hello via WhatsApp!")

    console.print("\n[green]--- Benefits ---[/green]")
    console.print("New channels are new MessageSender classes.")
    console.print("NotificationService can be tested with a fake sender.")


if __name__ == "__main__":
    main()
