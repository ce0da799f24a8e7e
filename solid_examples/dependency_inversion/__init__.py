"""Dependency Inversion Principle: depend on abstractions, not concrete classes."""
