"""A bounded order queue shared by customers placing orders and cooks filling them."""

from __future__ import annotations

import random
import threading
from collections import deque
from dataclasses import dataclass

MENU: tuple[str, ...] = (
    "BensChilli",
    "BensHalfSmoke",
    "BensHotDog",
    "BensChilliCheeseFries",
    "BensShake",
    "BensHotCakes",
    "BensCake",
    "BensHamburger",
    "BensVeggieBurger",
    "BensOnionRings",
)


def pick_random_menu_item(rng: random.Random | None = None) -> str:
    """Return one item of the menu chosen at random."""
    chooser = rng if rng is not None else random
    return chooser.choice(MENU)


@dataclass
class Order:
    """A customer's order; the restaurant assigns ``order_number`` when it is placed."""

    menu_item: str
    customer_id: int
    order_number: int = 0


class Restaurant:
    """Orders wait in a first-in, first-out queue of at most ``max_size`` entries.

    Adding blocks while the queue is full. Taking blocks while it is empty,
    unless ``expected_num_orders`` orders have already been handled, in which
    case ``get_order`` returns None.
    """

    def __init__(self, max_size: int, expected_num_orders: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        if expected_num_orders < 0:
            raise ValueError("expected_num_orders must not be negative")
        self.max_size = max_size
        self.expected_num_orders = expected_num_orders
        self.orders_handled = 0
        self._orders: deque[Order] = deque()
        self._next_order_number = 1
        self._closed = False
        self._lock = threading.Lock()
        self._can_add = threading.Condition(self._lock)
        self._can_get = threading.Condition(self._lock)

    @property
    def current_size(self) -> int:
        with self._lock:
            return len(self._orders)

    def add_order(self, order: Order) -> int:
        """Queue ``order``, waiting for room; return the number given to it."""
        with self._lock:
            if self._closed:
                raise RuntimeError("the restaurant is closed")
            while len(self._orders) >= self.max_size:
                self._can_add.wait()
            order.order_number = self._next_order_number
            self._next_order_number += 1
            self._orders.append(order)
            self._can_get.notify()
            return order.order_number

    def get_order(self) -> Order | None:
        """Take the oldest order, waiting for one; None once all are handled."""
        with self._lock:
            while not self._orders:
                if self.orders_handled >= self.expected_num_orders:
                    self._can_get.notify_all()
                    return None
                self._can_get.wait()
            order = self._orders.popleft()
            self.orders_handled += 1
            if self.orders_handled >= self.expected_num_orders:
                self._can_get.notify_all()
            self._can_add.notify()
            return order

    def close(self) -> None:
        """Close the restaurant; every expected order must have been handled."""
        with self._lock:
            if self.orders_handled != self.expected_num_orders:
                raise RuntimeError(
                    f"handled {self.orders_handled} of "
                    f"{self.expected_num_orders} expected orders"
                )
            self._closed = True