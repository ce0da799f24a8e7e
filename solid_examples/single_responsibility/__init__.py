"""Single Responsibility Principle: a class should have one reason to change."""
