"""Time put throughput and get latency against logs of growing size."""
import os
import tempfile
import time
from logkv.core.engine import KVEngine


def bench_put(path, count):
    """Append count records and return seconds per put."""
    engine = KVEngine(path)
    start = time.time()
    for _ in range(count):
        engine.put("user1", "raj")
    elapsed = time.time() - start
    engine.close()
    return elapsed / count


def bench_get(path, size, rounds):
    """Fill a log with size keys, then time rounds gets across them."""
    engine = KVEngine(path)
    for i in range(size):
        engine.put(f"user{i}", f"value{i}")

    start = time.time()
    for i in range(rounds):
        engine.get(f"user{i % size}")
    elapsed = time.time() - start
    engine.close()
    return elapsed / rounds


def main():
    """Run put and get benchmarks."""
    print("Benchmarking logkv...")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        per_put = bench_put(os.path.join(tmp, "put.txt"), 1000)
        print(f"put: {per_put * 1e6:.1f} us/op")

        for size in (10, 1000, 10000):
            per_get = bench_get(os.path.join(tmp, f"get_{size}.txt"), size, 50)
            print(f"get ({size} records): {per_get * 1e3:.3f} ms/op")

    print("=" * 60)


if __name__ == '__main__':
    main()
