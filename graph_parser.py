import logging
import math
import re
from typing import Dict, List, Tuple

from distance_matrix import DistanceMatrix
from graph import Graph
from utils import MAXIMUM_EDGE_WEIGHT, ORIGIN_NAME, read_file

logger = logging.getLogger(__name__)

# One edge per line: "<origin> to <endpoint> = <distance>"
EDGE_PATTERN = re.compile(r"(\w+) to (\w+) = (\d+)", re.ASCII)


class GraphParseError(ValueError):
    """
    Raised when the input text is not a valid edge list.
    """


def count_edges(text: str) -> int:
    """
    Each line defines exactly one edge, so count the line breaks.
    """
    return text.count("\n")


def split_lines(text: str) -> List[str]:
    """
    Split on line breaks only, dropping the empty tail after a final break.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def infer_node_count(edge_count: int) -> int:
    """
    Node count of a complete graph with `edge_count` edges.
    E = N * (N - 1) / 2  <=>  N^2 - N - 2E = 0, solved for N and rounded up.
    """
    return math.ceil((1.0 + math.sqrt(1.0 + 8.0 * edge_count)) / 2.0)


def data_parser(lines: List[str]) -> List[Tuple[str, str, int]]:
    """
    Parse edge lines into (origin, endpoint, distance) tuples.
    """
    edge_list = []
    for line in lines:
        match = EDGE_PATTERN.fullmatch(line)
        if match is None:
            raise GraphParseError(f"could not parse line: {line}")
        origin, endpoint, distance = match.group(1), match.group(2), int(match.group(3))
        if distance > MAXIMUM_EDGE_WEIGHT:
            raise GraphParseError(f"distance out of range on line: {line}")
        edge_list.append((origin, endpoint, distance))
    return edge_list


def parse_graph(text: str) -> Graph:
    """
    Build a Graph from an edge list.

    The matrix is allocated before parsing, sized from the number of lines,
    with one extra slot for the origin at index 0. Node ids follow first
    appearance; a repeated edge overwrites the earlier distance.
    """
    edge_count = count_edges(text)
    if edge_count == 0:
        raise GraphParseError("invalid input: could not determine graph edges as no line breaks were detected")

    node_count = infer_node_count(edge_count)
    logger.debug("Detected %d edges, expecting %d nodes", edge_count, node_count)

    distances = DistanceMatrix(node_count + 1)
    nodes = [ORIGIN_NAME]
    id_for_node: Dict[str, int] = {}

    for origin, endpoint, distance in data_parser(split_lines(text)):
        for name in (origin, endpoint):
            if name not in id_for_node:
                if len(nodes) >= distances.node_count:
                    raise GraphParseError(
                        f"found more nodes than a complete graph with {edge_count} edges can have: {name}"
                    )
                nodes.append(name)
                id_for_node[name] = len(nodes) - 1
        distances.update(id_for_node[origin], id_for_node[endpoint], distance)

    logger.info("Parsed graph with %d nodes", len(nodes) - 1)
    return Graph(nodes, distances)


def input_file_to_graph(file: str) -> Graph:
    """
    Create a Graph from a specific file.

    Parameters:
        file (str): Path of the input file.

    Returns:
        Graph: the parsed graph, origin included.
    """
    return parse_graph(read_file(file))
