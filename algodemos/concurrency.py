"""Thread-based demonstrations of messaging, locking and worker pools."""

from __future__ import annotations

import queue
import threading
import time


def send_message(channel: queue.Queue) -> None:
    """Put a greeting onto the channel."""
    channel.put("Hello from Goroutine!")


def channels_demo() -> str:
    """Receive a message from a background thread, print and return it."""
    channel: queue.Queue = queue.Queue(maxsize=1)
    sender = threading.Thread(target=send_message, args=(channel,))
    sender.start()
    message = channel.get()
    sender.join()
    print(message)
    return message


def goroutines_demo(delay: float = 0.5) -> list[str]:
    """Interleave greetings from a background thread and the caller.

    Returns the messages in the order they were printed.
    """
    printed: list[str] = []
    lock = threading.Lock()

    def say(message: str) -> None:
        for _ in range(3):
            with lock:
                print(message)
                printed.append(message)
            time.sleep(delay)

    background = threading.Thread(target=say, args=("Hello from goroutine",))
    background.start()
    say("Hello from main")
    background.join()
    return printed


def mutex_counter(workers: int = 5) -> int:
    """Increment a shared counter once per thread under a lock."""
    counter = 0
    lock = threading.Lock()

    def increment() -> None:
        nonlocal counter
        with lock:
            counter += 1

    threads = [threading.Thread(target=increment) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("Final Counter:", counter)
    return counter


def worker(
    worker_id: int,
    jobs: queue.Queue,
    results: queue.Queue,
    delay: float = 1.0,
) -> None:
    """Double each job until a None marks the end of the job queue."""
    for job in iter(jobs.get, None):
        print(f"Worker {worker_id} started job {job}")
        time.sleep(delay)
        print(f"Worker {worker_id} finished job {job}")
        results.put(job * 2)


def worker_pool(num_jobs: int = 5, num_workers: int = 3, delay: float = 1.0) -> list[int]:
    """Spread jobs 1..num_jobs over worker threads and collect the results."""
    if num_jobs > 0 and num_workers < 1:
        raise ValueError("at least one worker is needed to process jobs")

    jobs: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()

    threads = [
        threading.Thread(target=worker, args=(w, jobs, results, delay))
        for w in range(1, num_workers + 1)
    ]
    for thread in threads:
        thread.start()

    for job in range(1, num_jobs + 1):
        jobs.put(job)
    for _ in threads:
        jobs.put(None)

    collected = [results.get() for _ in range(num_jobs)]
    for thread in threads:
        thread.join()
    return collected