import os

# Subsets are encoded as bitmasks over every node, origin included. The cap
# mirrors the width of a native 64-bit word.
MAXIMUM_NODE_COUNT = 64
# Distances are unsigned 32-bit integers.
MAXIMUM_EDGE_WEIGHT = 2 ** 32 - 1

ORIGIN = 0
ORIGIN_NAME = ""

RESULT_MESSAGE = "shortest Hamiltonian path cost: {}"


def read_file(file):
    """
    Read the whole file as text.
    Raise FileNotFoundError with a readable message when the file does not exist.
    """
    if not os.path.isfile(file):
        raise FileNotFoundError(f"no such file or directory: {file}")
    with open(file, 'r') as f:
        return f.read()
