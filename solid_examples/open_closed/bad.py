"""
BAD example - violates the Open/Closed Principle.

Every new customer type means editing DiscountCalculator and growing its
if/elif chain.
"""
from __future__ import annotations

from solid_examples.console import get_console


class DiscountCalculator:
    def calculate_discount(self, customer_type: str, amount: float) -> float:
        """Return the amount after the discount for ``customer_type``."""
        if customer_type == "regular":
            return amount * (1 - 0.10)
        elif customer_type == "premium":
            return amount * (1 - 0.20)
        elif customer_type == "VIP":
            return amount * (1 - 0.30)
        # Unknown types silently get no discount
        return amount


def main() -> None:
    console = get_console()
    console.print("[bold]=== BAD Example: Violates Open/Closed Principle ===[/bold]\n")

    calculator = DiscountCalculator()
    amount = 100.0

    console.print(f"Order amount: ${amount:.2f}")
    console.print(f"Regular price after discount: ${calculator.calculate_discount('regular', amount):.2f}")
    console.print(f"Premium price after discount: ${calculator.calculate_discount('premium', amount):.2f}")
    console.print(f"VIP price after discount: ${calculator.calculate_discount('VIP', amount):.2f}")

    console.print("\n[red]--- Problems ---[/red]")
    console.print("1. To add a new customer type, must MODIFY DiscountCalculator")
    console.print("2. Risk of breaking existing functionality")
    console.print("3. The if/elif chain grows endlessly")
    console.print("4. Violates OCP: NOT closed for modification")


if __name__ == "__main__":
    main()
