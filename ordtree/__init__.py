from .benchmark import BatchTiming, run_benchmark
from .tree import Direction, EmptyTreeError, InsertStep, Node, OrderedTree, TraceEvent

__all__ = [
    "BatchTiming",
    "Direction",
    "EmptyTreeError",
    "InsertStep",
    "Node",
    "OrderedTree",
    "TraceEvent",
    "run_benchmark",
]
