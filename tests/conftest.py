import itertools
import random

import matplotlib
import pytest

matplotlib.use("Agg")


def complete_edge_lines(weights):
    """
    Edge lines for a complete graph on nodes N1..Nn, weights(i, j) gives each distance
    """
    def build(n):
        return [f"N{i} to N{j} = {weights(i, j)}" for i, j in itertools.combinations(range(1, n + 1), 2)]
    return build


def to_text(lines):
    return "".join(line + "\n" for line in lines)


def brute_force_path_cost(n, weight):
    """
    Cheapest open path visiting nodes 1..n, by trying every permutation
    """
    if n <= 1:
        return 0
    return min(
        sum(weight(order[k], order[k + 1]) for k in range(n - 1))
        for order in itertools.permutations(range(1, n + 1))
    )


@pytest.fixture
def london_text():
    return to_text([
        "London to Dublin = 464",
        "London to Belfast = 518",
        "Dublin to Belfast = 141",
    ])


@pytest.fixture
def write_input(tmp_path):
    def write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return write


@pytest.fixture
def random_weights():
    rng = random.Random(1234)
    table = {}

    def weight(i, j):
        key = (min(i, j), max(i, j))
        if key not in table:
            table[key] = rng.randint(1, 100)
        return table[key]
    return weight
