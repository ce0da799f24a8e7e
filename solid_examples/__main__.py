"""
Entry point for running solid_examples as a module.

Allows running as: python -m solid_examples
"""

from solid_examples.cli import cli_main

if __name__ == "__main__":
    cli_main()
