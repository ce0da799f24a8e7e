"""
Catalog of the bundled bad/good examples.

Every principle has exactly one "bad" and one "good" module. Modules are
imported lazily so listing the catalog never executes example code.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from solid_examples.errors import UnknownExampleError

logger = logging.getLogger(__name__)


class Principle(str, Enum):
    """The five SOLID principles, in mnemonic order."""
    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def label(self) -> str:
        return PRINCIPLE_TITLES[self]


class Variant(str, Enum):
    """Which side of the pair an example illustrates."""
    BAD = "bad"
    GOOD = "good"


PRINCIPLE_TITLES: dict[Principle, str] = {
    Principle.SRP: "Single Responsibility",
    Principle.OCP: "Open/Closed",
    Principle.LSP: "Liskov Substitution",
    Principle.ISP: "Interface Segregation",
    Principle.DIP: "Dependency Inversion",
}


@dataclass(frozen=True)
class Example:
    """A single runnable example module."""
    principle: Principle
    variant: Variant
    module: str
    summary: str

    @property
    def key(self) -> str:
        return f"{self.principle.value}/{self.variant.value}"

    @property
    def source_path(self) -> Path:
        """Location of the example module on disk."""
        spec = importlib.util.find_spec(self.module)
        if spec is None or spec.origin is None:
            raise UnknownExampleError(f"Module {self.module} is not installed")
        return Path(spec.origin)

    def load(self) -> Callable[[], None]:
        """Import the example module and return its main()."""
        module = importlib.import_module(self.module)
        return module.main

    def run(self) -> None:
        logger.debug("Running example %s (%s)", self.key, self.module)
        self.load()()


EXAMPLES: tuple[Example, ...] = (
    Example(
        Principle.SRP, Variant.BAD,
        "solid_examples.single_responsibility.bad",
        "User validates, saves and emails itself",
    ),
    Example(
        Principle.SRP, Variant.GOOD,
        "solid_examples.single_responsibility.good",
        "User data with a validator, repository and email service",
    ),
    Example(
        Principle.OCP, Variant.BAD,
        "solid_examples.open_closed.bad",
        "Discount calculator with a growing if/elif chain",
    ),
    Example(
        Principle.OCP, Variant.GOOD,
        "solid_examples.open_closed.good",
        "Discount calculator extended through customer types",
    ),
    Example(
        Principle.LSP, Variant.BAD,
        "solid_examples.liskov_substitution.bad",
        "Every bird flies, until a penguin is substituted",
    ),
    Example(
        Principle.LSP, Variant.GOOD,
        "solid_examples.liskov_substitution.good",
        "Flying and swimming birds as separate capabilities",
    ),
    Example(
        Principle.ISP, Variant.BAD,
        "solid_examples.interface_segregation.bad",
        "One fat worker interface forces robots to eat",
    ),
    Example(
        Principle.ISP, Variant.GOOD,
        "solid_examples.interface_segregation.good",
        "Narrow Workable and Eatable capability interfaces",
    ),
    Example(
        Principle.DIP, Variant.BAD,
        "solid_examples.dependency_inversion.bad",
        "Notification service hard-wired to email",
    ),
    Example(
        Principle.DIP, Variant.GOOD,
        "solid_examples.dependency_inversion.good",
        "Notification service with an injected message sender",
    ),
)


def _coerce_principle(principle: Union[Principle, str]) -> Principle:
    try:
        return Principle(str(getattr(principle, "value", principle)).lower())
    except ValueError:
        raise UnknownExampleError(
            f"Unknown principle '{principle}'",
            principle=str(principle),
        )


def _coerce_variant(variant: Union[Variant, str]) -> Variant:
    try:
        return Variant(str(getattr(variant, "value", variant)).lower())
    except ValueError:
        raise UnknownExampleError(
            f"Unknown variant '{variant}'",
            variant=str(variant),
        )


def list_examples(principle: Optional[Union[Principle, str]] = None) -> list[Example]:
    """List catalog entries in SOLID order, optionally for one principle."""
    if principle is None:
        return list(EXAMPLES)
    wanted = _coerce_principle(principle)
    return [example for example in EXAMPLES if example.principle == wanted]


def get_example(
    principle: Union[Principle, str],
    variant: Union[Variant, str],
) -> Example:
    """
    Look up a single example.

    Raises:
        UnknownExampleError: If the principle or variant is not recognised.
    """
    wanted_principle = _coerce_principle(principle)
    wanted_variant = _coerce_variant(variant)
    for example in EXAMPLES:
        if example.principle == wanted_principle and example.variant == wanted_variant:
            return example
    raise UnknownExampleError(
        f"No example for {wanted_principle.value}/{wanted_variant.value}",
        principle=wanted_principle.value,
        variant=wanted_variant.value,
    )


def get_pair(principle: Union[Principle, str]) -> tuple[Example, Example]:
    """Return the (bad, good) examples for a principle."""
    return (
        get_example(principle, Variant.BAD),
        get_example(principle, Variant.GOOD),
    )
