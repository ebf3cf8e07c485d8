import queue

import pytest

from algodemos.concurrency import (
    channels_demo,
    goroutines_demo,
    mutex_counter,
    send_message,
    worker,
    worker_pool,
)


def test_send_message():
    channel = queue.Queue()
    send_message(channel)
    assert channel.get_nowait() == "Hello from Goroutine!"
    assert channel.empty()


def test_channels_demo(capsys):
    assert channels_demo() == "Hello from Goroutine!"
    assert capsys.readouterr().out == "Hello from Goroutine!\n"


def test_goroutines_demo_prints_each_message_three_times(capsys):
    messages = goroutines_demo(0)
    assert messages.count("Hello from goroutine") == 3
    assert messages.count("Hello from main") == 3
    assert len(messages) == 6
    assert capsys.readouterr().out.splitlines() == messages


@pytest.mark.parametrize("workers", [5, 1, 50])
def test_mutex_counter_counts_every_thread(workers, capsys):
    assert mutex_counter(workers) == workers
    assert capsys.readouterr().out == f"Final Counter: {workers}\n"


def test_worker_doubles_until_sentinel(capsys):
    jobs = queue.Queue()
    results = queue.Queue()
    for job in (1, 2, 3, None, 4):
        jobs.put(job)
    worker(1, jobs, results, 0)
    assert [results.get_nowait() for _ in range(3)] == [2, 4, 6]
    assert results.empty()
    assert jobs.get_nowait() == 4
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Worker 1 started job 1"
    assert lines[1] == "Worker 1 finished job 1"


def test_worker_pool_processes_every_job():
    results = worker_pool(5, 3, 0)
    assert sorted(results) == [j * 2 for j in range(1, 6)]


def test_worker_pool_more_workers_than_jobs():
    results = worker_pool(2, 4, 0)
    assert sorted(results) == [2, 4]


def test_worker_pool_without_workers():
    with pytest.raises(ValueError):
        worker_pool(3, 0, 0)