import argparse
import logging
import random
import sys

from .benchmark import DEFAULT_SIZES, run_benchmark
from .tree import EmptyTreeError, OrderedTree

logger = logging.getLogger(__name__)

MENU = (
    "\n1. Add Node\n2. Remove Node\n3. Display Tree\n4. Find Maximum\n"
    "5. Run Performance Test\n6. Exit\nEnter your choice: "
)


class Shell:
    """Numbered menu driving an OrderedTree over a pair of text streams"""

    def __init__(self, tree: OrderedTree, rng: random.Random, sizes=DEFAULT_SIZES,
                 stdin=None, stdout=None):
        self.tree = tree
        self.rng = rng
        self.sizes = sizes
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._actions = {
            1: self.add,
            2: self.remove,
            3: self.display,
            4: self.maximum,
            5: self.benchmark,
        }

    def _write(self, text: str):
        self.stdout.write(text)
        self.stdout.flush()

    def _read_int(self, prompt: str) -> int:
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return int(line.strip())

    def run(self) -> int:
        while True:
            try:
                choice = self._read_int(MENU)
                if choice == 6:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._write("Invalid choice. Please try again.\n")
                    continue
                action()
            except ValueError:
                self._write("Invalid input, expected an integer.\n")
            except EOFError:
                self._write("\n")
                break
        self._write("Exiting program.\n")
        return 0

    def add(self):
        self.tree.add(self._read_int("Enter value to add: "))

    def remove(self):
        self.tree.remove(self._read_int("Enter value to remove: "))

    def display(self):
        self._write("BST Structure:\n" + self.tree.render())

    def maximum(self):
        try:
            self._write(f"Maximum value in BST: {self.tree.find_maximum()}\n")
        except EmptyTreeError:
            self._write("Tree is empty.\n")

    def benchmark(self):
        for timing in run_benchmark(self.tree, self.sizes, self.rng):
            self._write(f"{timing}\n")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="ordtree", description="Interactive binary search tree demo")
    parser.add_argument("--quiet", action="store_true", help="don't trace insertions")
    parser.add_argument("--seed", type=int, default=None, help="seed for the benchmark key generator")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES),
                        help="benchmark batch sizes")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(message)s")
    logger.debug("starting shell with seed=%s sizes=%s", args.seed, args.sizes)
    shell = Shell(OrderedTree(verbose=not args.quiet), random.Random(args.seed), args.sizes)
    return shell.run()
