import threading

import pytest

from asaogea.jobs import Job, JobHandle, JobPool, JobSystem, OutOfTaskError


def test_single_job_result():
    with JobSystem(2) as system:
        handle = system.push(Job(lambda: 42))
        assert handle.wait() == 42


def test_many_jobs_all_complete():
    with JobSystem(4) as system:
        handles = [system.push(Job(lambda i=i: i)) for i in range(50)]
        results = [h.wait() for h in handles]
    assert results == list(range(50))


def test_job_exception_is_raised_by_wait():
    def boom():
        raise ValueError("bad job")

    with JobSystem(1) as system:
        handle = system.push(Job(boom))
        with pytest.raises(ValueError, match="bad job"):
            handle.wait()


def test_shutdown_runs_pending_jobs_first():
    done = []
    lock = threading.Lock()

    def work(i):
        with lock:
            done.append(i)
        return i

    system = JobSystem(2)
    handles = [system.push(Job(lambda i=i: work(i))) for i in range(20)]
    system.shutdown()
    assert [h.get_ref() for h in handles] == list(range(20))
    assert sorted(done) == list(range(20))


def test_push_after_shutdown_fails():
    system = JobSystem(1)
    system.shutdown()
    with pytest.raises(RuntimeError):
        system.push(Job(lambda: 1))


def test_num_cpus_positive():
    assert JobSystem.num_cpus() >= 1


def test_pool_pop_is_fifo():
    pool = JobPool()
    first = pool.push(Job(lambda: "a"))
    second = pool.push(Job(lambda: "b"))
    pool.pop().execute()
    assert first.get_ref() == "a"
    assert second.get_ref() is None
    pool.pop().execute()
    assert second.get_ref() == "b"


def test_pool_free_wakes_with_out_of_task():
    pool = JobPool()
    pool.free(1)
    with pytest.raises(OutOfTaskError):
        pool.pop()


def test_job_executes_only_once():
    calls = []
    job = Job(lambda: calls.append(1) or len(calls))
    handle = JobHandle(job._slot)
    job.execute()
    job.execute()
    assert calls == [1]
    assert handle.wait() == 1


def test_get_ref_before_and_after():
    pool = JobPool()
    handle = pool.push(Job(lambda: "done"))
    assert handle.get_ref() is None
    pool.pop().execute()
    assert handle.get_ref() == "done"
    assert handle.wait() == "done"