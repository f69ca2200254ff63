import logging
import math
import time

from distance_matrix import DistanceMatrix
from utils import ORIGIN

logger = logging.getLogger(__name__)


def shortest_path(distances: DistanceMatrix, node_count: int) -> int:
    """
    Cost of the shortest Hamiltonian path using Held-Karp DP.

    Input requirement:
      - node 0 is the origin, every other node is a real node
      - the graph is COMPLETE (every real pair has a distance)

    Subsets range over all nodes, origin included, so the result is the
    cheapest way to visit every node and finish at the origin. The origin
    row of the matrix is 0, which makes this the open path cost over the
    real nodes.

    Returns:
      - the minimal total distance
    """
    if node_count < 1:
        raise ValueError("graph must contain the origin node")
    if node_count > distances.node_count:
        raise ValueError("distance matrix is smaller than the node count")

    # 2^N subsets, each one a bitmask of visited nodes.
    node_subsets = 1 << node_count
    logger.debug("Building cost table with %d subsets x %d nodes", node_subsets, node_count)
    start_time = time.time()

    # Bounds are checked once here, the loops below read plain lists.
    dist = [[distances.get(a, b) for b in range(node_count)] for a in range(node_count)]

    # lowest_costs[set * node_count + last] = min cost to visit exactly `set`, ending at `last`
    lowest_costs = [math.inf] * (node_subsets * node_count)

    # Counting upwards visits every subset after all of its own subsets.
    for node_set in range(1, node_subsets):
        row = node_set * node_count
        for node in range(node_count):
            node_bit = 1 << node
            if not node_set & node_bit:
                continue

            previous_set = node_set ^ node_bit
            if previous_set == 0:
                # first hop, straight from the origin
                lowest_costs[row + node] = dist[ORIGIN][node]
                continue

            previous_row = previous_set * node_count
            best = lowest_costs[row + node]
            for previous_node in range(node_count):
                if not previous_set & (1 << previous_node):
                    continue
                total_cost = lowest_costs[previous_row + previous_node] + dist[previous_node][node]
                if total_cost < best:
                    best = total_cost
            lowest_costs[row + node] = best

    all_nodes = node_subsets - 1
    result = lowest_cost(lowest_costs, node_count, all_nodes, ORIGIN)
    logger.info("Solved %d nodes in %.3fs, cost %s", node_count, time.time() - start_time, result)
    return int(result)


def lowest_cost(lowest_costs, node_count: int, node_set: int, last: int):
    """
    Checked read of the flat cost table.
    """
    assert 0 <= last < node_count, "the last node must be less than the number of nodes"
    index = node_set * node_count + last
    assert 0 <= index < len(lowest_costs), "the set of nodes must be bounded by the number of node subsets"
    return lowest_costs[index]
