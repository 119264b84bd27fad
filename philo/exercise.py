"""A small locking exercise: many threads print under one shared lock."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, TextIO


def run_exercise(count: int = 10000, out: Optional[TextIO] = None) -> List[int]:
    """Start ``count`` threads that each report under a shared lock.

    Returns the value held by each thread after its increment, in thread order.
    """
    stream = out if out is not None else sys.stdout
    lock = threading.Lock()
    results = [0] * count

    def work(position: int, value: int) -> None:
        number = position + 1
        with lock:
            stream.write(f"{number} thread's started\n")
            stream.write(f"i = {value}\n")
            results[position] = value + 1
            stream.write(f"{number} thread's finished\n")

    threads = [
        threading.Thread(target=work, args=(position, position))
        for position in range(count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results