"""Customers and cooks running as threads against one restaurant."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from syslabs.restaurant import Order, Restaurant, pick_random_menu_item

CAPACITY = 100
NUM_CUSTOMERS = 50
NUM_COOKS = 10
ORDERS_PER_CUSTOMER = 5


def customer(
    restaurant: Restaurant,
    customer_id: int,
    orders_per_customer: int,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[int]:
    """Place a number of random orders; return the order numbers received."""
    out = out if out is not None else sys.stdout
    numbers = []
    for _ in range(orders_per_customer):
        order = Order(pick_random_menu_item(rng), customer_id)
        number = restaurant.add_order(order)
        out.write(f"Customer #{customer_id} placed order #{number}: {order.menu_item}\n")
        numbers.append(number)
    return numbers


def cook(restaurant: Restaurant, cook_id: int, out: TextIO | None = None) -> int:
    """Fill orders until none remain; return how many this cook filled."""
    out = out if out is not None else sys.stdout
    fulfilled = 0
    while (order := restaurant.get_order()) is not None:
        out.write(
            f"Cook #{cook_id} fulfilled order #{order.order_number}: "
            f"{order.menu_item} for customer #{order.customer_id}\n"
        )
        fulfilled += 1
    out.write(f"Cook #{cook_id} fulfilled {fulfilled} orders\n")
    return fulfilled


def run_simulation(
    num_customers: int = NUM_CUSTOMERS,
    num_cooks: int = NUM_COOKS,
    orders_per_customer: int = ORDERS_PER_CUSTOMER,
    capacity: int = CAPACITY,
    out: TextIO | None = None,
) -> list[int]:
    """Run every customer and cook concurrently; return each cook's count."""
    if min(num_customers, num_cooks, orders_per_customer) < 0:
        raise ValueError("counts must not be negative")
    expected = num_customers * orders_per_customer
    if expected and num_cooks == 0:
        raise ValueError("orders cannot be filled without cooks")
    out = out if out is not None else sys.stdout
    rng = random.Random()
    restaurant = Restaurant(capacity, expected)
    out.write("Restaurant is open!\n")
    with ThreadPoolExecutor(max_workers=max(1, num_customers + num_cooks)) as pool:
        customers = [
            pool.submit(customer, restaurant, i, orders_per_customer, rng, out)
            for i in range(num_customers)
        ]
        cooks = [pool.submit(cook, restaurant, i, out) for i in range(num_cooks)]
        for future in customers:
            future.result()
        counts = [future.result() for future in cooks]
    restaurant.close()
    out.write("Restaurant is closed!\n")
    return counts


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Restaurant producer/consumer simulation.")
    parser.add_argument("--customers", type=int, default=NUM_CUSTOMERS)
    parser.add_argument("--cooks", type=int, default=NUM_COOKS)
    parser.add_argument("--orders", type=int, default=ORDERS_PER_CUSTOMER)
    parser.add_argument("--capacity", type=int, default=CAPACITY)
    args = parser.parse_args(argv)
    try:
        run_simulation(args.customers, args.cooks, args.orders, args.capacity, sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())