from pathlib import Path

import pytest

from ordtree import OrderedTree


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


def build(values, verbose=False) -> OrderedTree:
    tree = OrderedTree(verbose=verbose)
    for val in values:
        tree.add(val)
    return tree


@pytest.fixture
def tree():
    yield OrderedTree(verbose=False)


@pytest.fixture
def build_tree():
    return build


@pytest.fixture
def scenario_a():
    # resulting tree:
    #
    #          5
    #        /   \
    #       3     8
    #      / \
    #     1   4
    yield build([5, 3, 8, 1, 4])
