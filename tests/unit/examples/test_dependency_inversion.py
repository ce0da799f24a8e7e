"""Tests for the Dependency Inversion examples."""

import pytest

from solid_examples.dependency_inversion import bad, good


class RecordingSender:
    """Fake MessageSender that remembers what it was given."""

    def __init__(self):
        self.sent = []

    def send(self, message: str) -> None:
        self.sent.append(message)


class TestBadNotificationService:
    def test_sender_is_hard_wired(self):
        service = bad.NotificationService()
        assert isinstance(service.sender, bad.EmailSender)

    def test_notify_sends_email(self, captured):
        bad.NotificationService().notify("Hello")
        assert "Sending email: Hello" in captured()


class TestGoodNotificationService:
    @pytest.mark.parametrize(
        "message",
        ["Hello via Email!", "", "  padded  ", "unicode ✓ مرحبا", "multi\nline"],
    )
    def test_delegates_message_unchanged(self, message):
        sender = RecordingSender()
        good.NotificationService(sender).notify(message)
        assert sender.sent == [message]

    @pytest.mark.parametrize(
        "sender_cls,prefix",
        [
            (good.EmailSender, "Sending email:"),
            (good.SMSSender, "Sending SMS:"),
            (good.WhatsAppSender, "Sending WhatsApp message:"),
        ],
    )
    def test_any_concrete_sender_can_be_injected(self, sender_cls, prefix, captured):
        good.NotificationService(sender_cls()).notify("ping")
        assert f"{prefix} ping" in captured()

    def test_markup_in_messages_is_printed_literally(self, captured):
        good.EmailSender().send("[bold]not markup[/bold]")
        assert "Sending email: [bold]not markup[/bold]" in captured()

    def test_main_uses_three_channels(self, captured):
        good.main()
        output = captured()
        assert "Sending email: Hello via Email!" in output
        assert "Sending SMS: Hello via SMS!" in output
        assert "Sending WhatsApp message: Hello via WhatsApp!" in output
