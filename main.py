import asyncio
from time import sleep, perf_counter

import underbar as _

_.setup_logging()


def expensive_square(x):
    # Simulate a costly step so caching is visible
    print(f"  computing f({x}) ...")
    sleep(0.2)
    return x * x


print("\n--- Demo: collections ---")
people = [{"name": "curly", "age": 50}, {"name": "moe", "age": 30}, {"name": "larry", "age": 30}]
print("Names:", _.pluck(people, "name"))
print("Youngest first:", _.pluck(_.sort_by(people, "age"), "name"))
print("By age:", _.group_by(people, "age"))
print("Sum:", _.reduce_([1, 2, 3], lambda total, n: total + n))
print("Zipped:", _.zip_(["a", "b", "c"], [1, 2]))
print("Flattened:", _.flatten([1, [2, [3, [4]], 5]]))
print("Shared:", _.intersection([1, 2, 3], [2, 3, 4], [2, 5]))
print("Shuffled:", _.shuffle(list(range(10))))

print("\n--- Demo: chaining (nothing runs until value()) ---")
pipeline = _.chain(range(20)).filter(lambda n: n % 3 == 0).map(lambda n: n * 10).take(4)
print(f"Constructed {pipeline!r}")
print("Result:", pipeline.value())

print("\n--- Demo: memoize (first pass computes; second pass reuses) ---")
fast_square = _.memoize(expensive_square)
for label in ("First", "Second"):
    t0 = perf_counter()
    values = [fast_square(n) for n in (2, 3, 4)]
    t1 = perf_counter()
    print(f"{label} pass: {values} in {t1 - t0:.2f}s")


async def throttle_demo():
    print("\n--- Demo: throttle + delay ---")
    hits = []
    throttled = _.throttle(lambda n: hits.append(n) or n, 100)
    for n in range(10):
        throttled(n)
    print(f"Right after 10 calls: {hits}")
    _.delay(print, 50, "  (delayed print after 50ms)")
    await asyncio.sleep(0.15)
    print(f"After the window: {hits}")


asyncio.run(throttle_demo())
