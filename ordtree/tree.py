import enum
import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


class EmptyTreeError(LookupError):
    """Raised when an extreme-value query is made against an empty tree"""


class Direction(enum.IntEnum):
    LEFT = 0
    RIGHT = 1


class InsertStep(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    PLACE = "place"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class TraceEvent:
    step: InsertStep
    key: Any
    pivot: Any = None

    def __str__(self):
        if self.step == InsertStep.LEFT:
            return f"Go left from {self.pivot}"
        if self.step == InsertStep.RIGHT:
            return f"Go right from {self.pivot}"
        if self.step == InsertStep.DUPLICATE:
            return f"{self.key} already present, ignored"
        return f"Insert {self.key} here"


class Node:

    def __init__(self, key):
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        self.key = key

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def __repr__(self):
        return f"Node({self.key!r})"


class OrderedTree:
    """Unbalanced binary search tree over totally ordered keys.

    Duplicate inserts and removals of missing keys are no-ops. The tree is
    not safe for concurrent use; callers sharing one must hold a single lock
    around every call.
    """

    def __init__(self, verbose: bool = True):
        self.root: Optional[Node] = None
        self.verbose = verbose

    def is_empty(self):
        return self.root is None

    def __bool__(self):
        return self.root is not None

    def add(self, key) -> List[TraceEvent]:
        """Insert key as a new leaf, returning the decision trace

        Each step is also logged when `verbose` is set.
        """
        trace: List[TraceEvent] = []
        parent = None
        direction = Direction.LEFT
        node = self.root

        while node is not None:
            if key == node.key:
                self._record(trace, TraceEvent(InsertStep.DUPLICATE, key, node.key))
                return trace
            if key < node.key:
                self._record(trace, TraceEvent(InsertStep.LEFT, key, node.key))
                direction = Direction.LEFT
            else:
                self._record(trace, TraceEvent(InsertStep.RIGHT, key, node.key))
                direction = Direction.RIGHT
            parent = node
            node = node.get_child(direction)

        self._record(trace, TraceEvent(InsertStep.PLACE, key, None if parent is None else parent.key))
        if parent is None:
            self.root = Node(key)
        else:
            parent.set_child(direction, Node(key))
        return trace

    def _record(self, trace: List[TraceEvent], event: TraceEvent):
        trace.append(event)
        if self.verbose:
            logger.info("%s", event)

    def _locate(self, key) -> Tuple[Optional[Node], Optional[Node], Direction]:
        # returns (node, parent, direction of node under parent)
        parent = None
        direction = Direction.LEFT
        node = self.root
        while node is not None and node.key != key:
            parent = node
            direction = Direction(int(key > node.key))
            node = node.get_child(direction)
        return node, parent, direction

    def _splice(self, parent: Optional[Node], direction: Direction, child: Optional[Node]):
        if parent is None:
            self.root = child
        else:
            parent.set_child(direction, child)

    def remove(self, key):
        """Remove the node holding key, if there is one"""
        node, parent, direction = self._locate(key)
        if node is None:
            return

        # node has 2 children, copy the key of its in-order successor (the
        # leftmost node of the right subtree) and splice that node out instead
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            successor_direction = Direction.RIGHT
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
                successor_direction = Direction.LEFT

            node.key = successor.key
            # the successor never has a left child
            successor_parent.set_child(successor_direction, successor.right)
            return

        # 0 or 1 children, the child (if any) takes the node's place
        self._splice(parent, direction, node.left or node.right)

    def find_maximum(self):
        return self._extreme(Direction.RIGHT).key

    def find_minimum(self):
        return self._extreme(Direction.LEFT).key

    def _extreme(self, direction: Direction) -> Node:
        if self.root is None:
            raise EmptyTreeError("tree is empty")
        node = self.root
        while node.get_child(direction) is not None:
            node = node.get_child(direction)
        return node

    def __contains__(self, key):
        node, _, _ = self._locate(key)
        return node is not None

    def __len__(self):
        return sum(1 for _ in self.in_order())

    def __iter__(self):
        return self.in_order()

    def in_order(self) -> Iterator[Any]:
        for _, key in self._walk(Direction.LEFT):
            yield key

    def display(self) -> List[Tuple[int, Any]]:
        """Returns (depth, key) rows, right subtree first, root at depth 0"""
        return list(self._walk(Direction.RIGHT))

    def render(self, indent: int = 5) -> str:
        return "".join(
            f"{key:>{indent * (depth + 1)}}\n" for depth, key in self.display()
        )

    def _walk(self, first: Direction) -> Iterator[Tuple[int, Any]]:
        # in-order traversal with an explicit stack, visiting the `first`
        # subtree before the node and the opposite subtree after it
        second = Direction(1 - first)
        stack: List[Tuple[Node, int]] = []
        node, depth = self.root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.get_child(first), depth + 1
            node, depth = stack.pop()
            yield depth, node.key
            node, depth = node.get_child(second), depth + 1

    def height(self) -> int:
        if self.root is None:
            return -1
        height = 0
        level = [self.root]
        while True:
            level = [child for n in level for child in (n.left, n.right) if child is not None]
            if not level:
                return height
            height += 1

    def clear(self):
        self.root = None

    def to_graph(self) -> nx.DiGraph:
        """Exports the parent -> child links as a directed graph keyed by node key"""
        graph = nx.DiGraph()
        if self.root is None:
            return graph
        graph.add_node(self.root.key)
        pending = [self.root]
        while pending:
            node = pending.pop()
            for direction in Direction:
                child = node.get_child(direction)
                if child is not None:
                    graph.add_edge(node.key, child.key, direction=direction.name.lower())
                    pending.append(child)
        return graph
