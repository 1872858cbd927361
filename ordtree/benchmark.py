import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .tree import OrderedTree

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (100, 1000, 10000, 100000)
# keys are drawn from [0, size * KEY_SPREAD)
KEY_SPREAD = 10


@dataclass(frozen=True)
class BatchTiming:
    size: int
    elapsed_ms: float

    def __str__(self):
        return f"Added {self.size} elements in {self.elapsed_ms:.4f} ms"


def run_benchmark(
        tree: OrderedTree,
        sizes: Iterable[int] = DEFAULT_SIZES,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.perf_counter) -> List[BatchTiming]:
    """Times bulk insertion of random keys into tree at each batch size

    Args:
        tree (OrderedTree): tree to insert into, batches accumulate in it
        sizes (Iterable[int]): number of keys to insert per batch
        rng (random.Random): key source, a fresh unseeded one if omitted
        clock (Callable): monotonic clock returning seconds

    Returns:
        list: one BatchTiming per size, in order
    """
    rng = rng or random.Random()
    verbose = tree.verbose
    tree.verbose = False
    timings = []
    try:
        for size in sizes:
            upper = size * KEY_SPREAD
            start = clock()
            for _ in range(size):
                tree.add(rng.randrange(upper))
            timing = BatchTiming(size, (clock() - start) * 1000)
            logger.debug("batch of %d took %.4f ms", size, timing.elapsed_ms)
            timings.append(timing)
    finally:
        tree.verbose = verbose
    return timings
