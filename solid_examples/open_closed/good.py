"""
GOOD example - follows the Open/Closed Principle.

DiscountCalculator depends only on the Customer abstraction. A new customer
type is a new subclass; the calculator never changes.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from solid_examples.console import get_console


class Customer(ABC):
    """A customer knows its own discount rate."""

    name: str = "customer"

    @property
    @abstractmethod
    def discount_rate(self) -> float:
        """Fraction of the amount taken off, e.g. 0.1 for 10%."""
        ...


class RegularCustomer(Customer):
    name = "Regular"

    @property
    def discount_rate(self) -> float:
        return 0.10


class PremiumCustomer(Customer):
    name = "Premium"

    @property
    def discount_rate(self) -> float:
        return 0.20


class VIPCustomer(Customer):
    name = "VIP"

    @property
    def discount_rate(self) -> float:
        return 0.30


# Added later without touching DiscountCalculator.
class GoldCustomer(Customer):
    name = "Gold"

    @property
    def discount_rate(self) -> float:
        return 0.25


class DiscountCalculator:
    def calculate_discount(self, customer: Customer, amount: float) -> float:
        """Return the amount after ``customer``'s discount."""
        return amount * (1 - customer.discount_rate)


def main() -> None:
    console = get_console()
    console.print("[bold]=== GOOD Example: Follows Open/Closed Principle ===[/bold]\n")

    calculator = DiscountCalculator()
    amount = 100.0

    customers = [RegularCustomer(), PremiumCustomer(), VIPCustomer()]

    console.print(f"Order amount: ${amount:.2f}")
    for customer in customers:
        price = calculator.calculate_discount(customer, amount)
        console.print(f"{customer.name} price after discount: ${price:.2f}")

    console.print("\n[green]--- Benefits ---[/green]")
    console.print("1. To add a new customer type, just CREATE a new class")
    console.print("2. No modification to existing code")
    console.print("3. No risk of breaking existing functionality")
    console.print("4. Follows OCP: Open for extension, Closed for modification")

    console.print("\n--- Example: Adding GoldCustomer ---")
    console.print("Just create: class GoldCustomer(Customer): ...")
    gold = GoldCustomer()
    price = calculator.calculate_discount(gold, amount)
    console.print(f"{gold.name} price after discount: ${price:.2f}")
    console.print("No changes needed to DiscountCalculator!")


if __name__ == "__main__":
    main()
