"""
GOOD example - follows the Single Responsibility Principle.

Each class has exactly one reason to change:
- User: the shape of user data
- UserValidator: validation rules
- UserRepository: the database
- EmailService: the email provider
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from solid_examples.console import get_console

MIN_PASSWORD_LENGTH = 8


@dataclass
class User:
    """User data only."""
    name: str
    email: Optional[str]
    password: Optional[str]


class UserValidator:
    """
    Validation only.

    Only one reason to change: the validation rules. For example, requiring
    special characters in passwords touches nothing but this class.
    """

    def validate_email(self, user: User) -> bool:
        return user.email is not None and "@" in user.email

    def validate_password(self, user: User) -> bool:
        return user.password is not None and len(user.password) >= MIN_PASSWORD_LENGTH

    def validate_user(self, user: User) -> bool:
        return self.validate_email(user) and self.validate_password(user)


class UserRepository:
    """Persistence only (simulated)."""

    def save(self, user: User) -> None:
        console = get_console()
        console.print("Connecting to database...")
        console.print(f"Saving user: {user.name} to database")

    def delete(self, user: User) -> None:
        get_console().print(f"Deleting user: {user.name} from database")


class EmailService:
    """Email only (simulated)."""

    def send_welcome_email(self, user: User) -> None:
        console = get_console()
        console.print("Connecting to email server...")
        console.print(f"Sending welcome email to: {user.email}")

    def send_password_reset_email(self, user: User) -> None:
        get_console().print(f"Sending password reset email to: {user.email}")


def main() -> None:
    console = get_console()
    console.print("[bold]=== GOOD Example: Follows Single Responsibility Principle ===[/bold]\n")

    # 1. Data only
    user = User("Sherif", "sherif@example.com", "password123")

    # 2. Validate
    validator = UserValidator()
    if validator.validate_user(user):
        console.print("✅ User is valid")
    else:
        console.print("❌ User is NOT valid")
        return

    # 3. Persist
    repository = UserRepository()
    repository.save(user)

    # 4. Notify
    email_service = EmailService()
    email_service.send_welcome_email(user)

    console.print("\n[green]--- Benefits ---[/green]")
    console.print("Each class has ONLY ONE reason to change!")
    console.print("User            → data structure changes")
    console.print("UserValidator   → validation rules change")
    console.print("UserRepository  → database changes")
    console.print("EmailService    → email provider changes")
    console.print("\nThis follows the Single Responsibility Principle ✅")


if __name__ == "__main__":
    main()
