"""Cooperative tasks, their states, and a bounded channel between two tasks.

    PYTHONPATH=src python examples/tasks_and_channels.py
"""

from __future__ import annotations


def main() -> None:
    # [START README_TASKS]
    from parallel_primer.tasks import Channel, run_tasks, spawn_task, task_sleep

    async def slow_square(x: int) -> int:
        await task_sleep(0.2)
        return x * x

    async def producer(ch: Channel, n: int) -> None:
        for i in range(n):
            await ch.put(i)  # blocks while the consumer lags behind
        await ch.close()

    async def consumer(ch: Channel) -> list[int]:
        got = []
        async for item in ch:
            got.append(item)
        return got

    async def demo() -> None:
        t = spawn_task(slow_square, 7)
        print("spawned, returned immediately:", t)
        await task_sleep(0.05)
        print("while sleeping:", t)
        print("result:", await t, t)
        print("history:", [s.value for s in t.history])
        print()

        ch = Channel(capacity=1)
        prod = spawn_task(producer, ch, 5)
        cons = spawn_task(consumer, ch)
        print("received:", await cons)
        await prod
        print("producer history:", [s.value for s in prod.history])

    run_tasks(demo)
    # [END README_TASKS]


if __name__ == "__main__":
    main()
