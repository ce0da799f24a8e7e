"""Liskov Substitution Principle: subtypes must be usable wherever their base type is."""
