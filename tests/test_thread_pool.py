import threading

import pytest

from tpengine.thread_pool import ThreadPool


def test_result_is_returned_through_future():
    with ThreadPool(2) as pool:
        future = pool.enqueue(lambda a, b: a + b, 2, 3)
        assert future.result(timeout=5) == 5


def test_keyword_arguments_are_passed():
    with ThreadPool(1) as pool:
        future = pool.enqueue(sorted, [3, 1, 2], reverse=True)
        assert future.result(timeout=5) == [3, 2, 1]


def test_exception_is_stored_in_future():
    def boom():
        raise KeyError("missing")

    with ThreadPool(1) as pool:
        future = pool.enqueue(boom)
        with pytest.raises(KeyError):
            future.result(timeout=5)


def test_pool_keeps_running_after_failed_task():
    with ThreadPool(1) as pool:
        pool.enqueue(lambda: 1 / 0)
        assert pool.enqueue(lambda: "still alive").result(timeout=5) == "still alive"


def test_enqueue_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError, match="stopped ThreadPool"):
        pool.enqueue(print)


def test_enqueue_after_context_exit_raises():
    with ThreadPool(2) as pool:
        pass
    with pytest.raises(RuntimeError):
        pool.enqueue(print)


def test_shutdown_drains_queued_tasks():
    done = []
    pool = ThreadPool(1)
    futures = [pool.enqueue(done.append, n) for n in range(5)]
    pool.shutdown()
    assert all(future.done() for future in futures)
    assert done == [0, 1, 2, 3, 4]


def test_tasks_run_concurrently():
    barrier = threading.Barrier(3, timeout=5)
    with ThreadPool(3) as pool:
        futures = [pool.enqueue(barrier.wait) for _ in range(3)]
        indices = sorted(future.result(timeout=10) for future in futures)
    assert indices == [0, 1, 2]


def test_negative_thread_count_rejected():
    with pytest.raises(ValueError):
        ThreadPool(-1)