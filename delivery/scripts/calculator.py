"""
Shipping Cost Calculator
========================

Interactive CLI tool to price a shipment by weight and distance under one
of four delivery tiers. Loops until the user chooses to exit.

Usage:
    python -m delivery.scripts.calculator
"""

from decimal import Decimal

from delivery.data import (
    MAX_WEIGHT_KG,
    MAX_DISTANCE_KM,
    PROMPT_MIN_WEIGHT_KG,
    PROMPT_MIN_DISTANCE_KM,
    format_currency,
)
from delivery.inputs import InputError, parse_decimal, check_range
from delivery.policies import ALL
from delivery.session import DeliverySession, Quote
from delivery.version import VERSION


EXIT_CHOICE = "0"
AFFIRMATIVE = {"y", "yes"}


def print_banner() -> None:
    print("=== Shipping Cost Calculator ===")
    print(f"Version: {VERSION}")


def print_menu() -> None:
    print("\nSelect delivery type:")
    for p in ALL:
        print(f"{p.menu_key} - {p.name}")
    print(f"{EXIT_CHOICE} - Exit")


def prompt_decimal(prompt: str, minimum: Decimal, maximum: Decimal) -> Decimal:
    """
    Prompt until the user enters a number within [minimum, maximum].

    Empty, non-numeric, too-large and out-of-range input are reported and
    re-prompted; nothing is raised for them.
    """
    while True:
        try:
            value = parse_decimal(input(prompt))
            return check_range(value, minimum, maximum)
        except InputError as e:
            print(e)


def print_results(quote: Quote) -> None:
    """Print calculation results."""
    print("\nCalculation Result:")
    print(f"Delivery Type: {quote.policy_name}")
    print(f"Weight: {quote.weight:f} kg")
    print(f"Distance: {quote.distance:f} km")
    print(f"Shipping Cost: {format_currency(quote.cost)}")


def ask_continue() -> bool:
    answer = input("\nWould you like to perform another calculation? (y/n): ")
    return answer.strip().lower() in AFFIRMATIVE


def run_once(session: DeliverySession) -> bool:
    """
    One pass through the menu.

    Returns:
        False when the user is done, True to show the menu again
    """
    print_menu()
    choice = input("Your choice: ").strip()

    if choice == EXIT_CHOICE:
        return False

    policy = next((p for p in ALL if p.menu_key == choice), None)
    if policy is None:
        print(f"Invalid choice. Please select from {EXIT_CHOICE} to {len(ALL)}.")
        return True

    session.select(policy)
    print(f"\nSelected: {session.current_policy_name()}")

    weight = prompt_decimal(
        "Enter package weight (kg): ", PROMPT_MIN_WEIGHT_KG, MAX_WEIGHT_KG
    )
    distance = prompt_decimal(
        "Enter delivery distance (km): ", PROMPT_MIN_DISTANCE_KM, MAX_DISTANCE_KM
    )

    print_results(session.quote(weight, distance))

    return ask_continue()


def run(session: DeliverySession) -> None:
    """
    Menu loop. Errors from a pass are reported and the menu is shown again;
    only the exit choice (or a "no" to continuing) ends the loop.
    """
    while True:
        try:
            if not run_once(session):
                break
        except EOFError:
            raise
        except Exception as e:
            print(f"Error: {e}")
            print("Please try again.")

    print("Goodbye!")


def main():
    """Main entry point."""
    print_banner()
    try:
        run(DeliverySession())
    except (EOFError, KeyboardInterrupt):
        print("\n\nCancelled.")


if __name__ == "__main__":
    main()
