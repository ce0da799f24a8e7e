"""
BAD example - violates the Single Responsibility Principle.

User has too many responsibilities:
1. Storing user data
2. Validating user data
3. Saving to the database
4. Sending emails

If any of these change, User must be modified.
"""
from __future__ import annotations

from solid_examples.console import get_console


class User:
    """A user that does everything itself."""

    def __init__(self, name: str, email: str, password: str) -> None:
        self.name = name
        self.email = email
        self.password = password

    # Validation (should be a separate class)
    def validate_email(self) -> bool:
        return self.email is not None and "@" in self.email

    def validate_password(self) -> bool:
        return self.password is not None and len(self.password) >= 8

    # Database operations (should be a separate class)
    def save_to_database(self) -> None:
        console = get_console()
        console.print("Connecting to database...")
        console.print(f"Saving user: {self.name} to database")

    def delete_from_database(self) -> None:
        get_console().print(f"Deleting user: {self.name} from database")

    # Email operations (should be a separate class)
    def send_welcome_email(self) -> None:
        console = get_console()
        console.print("Connecting to email server...")
        console.print(f"Sending welcome email to: {self.email}")

    def send_password_reset_email(self) -> None:
        get_console().print(f"Sending password reset email to: {self.email}")


def main() -> None:
    console = get_console()
    console.print("[bold]=== BAD Example: Violates Single Responsibility Principle ===[/bold]\n")

    user = User("Sherif", "sherif@example.com", "password123")

    if user.validate_email() and user.validate_password():
        console.print("User is valid")

    user.save_to_database()
    user.send_welcome_email()

    console.print("\n[red]--- Problem ---[/red]")
    console.print("One class has 4 different reasons to change!")
    console.print("- Database changes (MySQL to MongoDB) → change User")
    console.print("- Email provider changes → change User")
    console.print("- Validation rules change → change User")
    console.print("This violates Single Responsibility Principle.")


if __name__ == "__main__":
    main()
