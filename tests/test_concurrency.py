"""Concurrent access to a shared BoundedLogBuffer."""

from concurrent.futures import ThreadPoolExecutor
from threading import Lock

from logbuffer import BoundedLogBuffer

N_WORKERS = 10
N_PER_WORKER = 100
MAX_LOGS = 500


def test_concurrent_records_respect_cap_and_count():
    echoed = []
    guard = Lock()

    def console(line):
        with guard:
            echoed.append(line)

    buf = BoundedLogBuffer(max_logs=MAX_LOGS, console=console)
    delivered_ids = set()
    max_seen = [0]

    def track(entries):
        with guard:
            delivered_ids.update(entry.id for entry in entries)
            max_seen[0] = max(max_seen[0], len(entries))

    buf.subscribe(track)

    def worker(worker_id):
        for i in range(N_PER_WORKER):
            buf.record(f"w{worker_id}-{i}")
            assert len(buf.snapshot()) <= MAX_LOGS

    with ThreadPoolExecutor(max_workers=N_WORKERS) as pool:
        list(pool.map(worker, range(N_WORKERS)))

    # every message is unique, so each echoed line accounts for one append
    assert len(set(echoed)) == N_WORKERS * N_PER_WORKER
    assert max_seen[0] <= MAX_LOGS
    final = buf.snapshot()
    assert len(final) == MAX_LOGS
    assert {entry.id for entry in final} <= delivered_ids


def test_per_thread_order_is_preserved():
    buf = BoundedLogBuffer(max_logs=10_000, echo=False)

    def worker(worker_id):
        for i in range(200):
            buf.record(f"{worker_id}:{i}")

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(worker, range(4)))

    by_worker = {}
    for entry in buf.snapshot():
        worker_id, i = entry.message.split(":")
        by_worker.setdefault(worker_id, []).append(int(i))
    assert all(seq == list(range(200)) for seq in by_worker.values())
    assert len(by_worker) == 4


def test_concurrent_clear_and_snapshot():
    buf = BoundedLogBuffer(max_logs=50, echo=False)

    def writer(_):
        for i in range(300):
            buf.info(str(i))

    def clearer(_):
        for _ in range(50):
            buf.clear()
            assert len(buf.snapshot()) <= 50

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(writer, n) for n in range(3)] + [pool.submit(clearer, 0)]
        for future in futures:
            future.result()

    assert len(buf.snapshot()) <= 50
