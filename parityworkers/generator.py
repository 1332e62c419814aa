"""Worker threads that draw distinct random numbers and sort them by parity."""

from __future__ import annotations

import random
import threading
from collections.abc import Callable, Iterator

from .config import Config

RAND_MAX = 2**31 - 1


class NumberPool:
    """Shared even and odd collections, each guarded by its own lock."""

    def __init__(self) -> None:
        self.even: list[int] = []
        self.odd: list[int] = []
        self._even_lock = threading.Lock()
        self._odd_lock = threading.Lock()

    def add(self, number: int) -> None:
        """Store a number in the collection matching its parity."""
        if number % 2 == 0:
            with self._even_lock:
                self.even.append(number)
        else:
            with self._odd_lock:
                self.odd.append(number)


def unique_numbers(count: int, rng: random.Random) -> Iterator[int]:
    """Yield ``count`` distinct numbers in ``[0, RAND_MAX]`` from ``rng``."""
    seen: set[int] = set()
    while len(seen) < count:
        number = rng.randint(0, RAND_MAX)
        if number not in seen:
            seen.add(number)
            yield number


def worker(pool: NumberPool, count: int, rng: random.Random) -> None:
    """Draw ``count`` distinct numbers and add each to the pool."""
    for number in unique_numbers(count, rng):
        pool.add(number)


def generate(
    config: Config,
    rng_factory: Callable[[], random.Random] | None = None,
) -> NumberPool:
    """Run ``config.thread_num`` workers and return the filled pool."""
    factory = rng_factory or random.Random
    pool = NumberPool()
    threads = [
        threading.Thread(target=worker, args=(pool, config.nb_per_thread, factory()))
        for _ in range(config.thread_num)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return pool