import networkx as nx
import matplotlib.pyplot as plt

from graph import Graph
from graph_parser import count_edges, parse_graph
from utils import read_file


def graph_to_networkx(graph: Graph) -> nx.Graph:
    """
    Create a networkx graph of the real nodes.
    The origin is left out, every stored distance becomes a `weight` attribute.
    """
    G = nx.Graph()
    names = graph.real_nodes()
    G.add_nodes_from(names)
    for i, u in enumerate(names):
        for v in names[i + 1:]:
            weight = graph.distance(u, v)
            if weight > 0:
                G.add_edge(u, v, weight=weight)
    return G


def is_complete(graph: Graph) -> bool:
    """
    Check whether every pair of real nodes is joined by an edge
    """
    G = graph_to_networkx(graph)
    n = G.number_of_nodes()
    return G.number_of_edges() == n * (n - 1) // 2


def is_valid_input(file: str) -> tuple:
    """
    Check if the given input file is valid.

    Parameters:
        file (str): Path to the input file.

    Returns:
        tuple: A tuple containing:
            - is_valid (bool): Whether the input file is valid.
            - message (str): A log message providing details about the validation result.
    """
    is_valid = True
    message = ''

    try:
        text = read_file(file)
    except OSError as exc:
        return False, f"cannot read file: {exc}\n"

    try:
        graph = parse_graph(text)
    except ValueError as exc:
        return False, f"cannot parse data: {exc}\n"

    number_of_nodes = len(graph.real_nodes())
    expected_edges = number_of_nodes * (number_of_nodes - 1) // 2

    if count_edges(text) != expected_edges:
        is_valid = False
        message += 'number of edges does not match a complete graph\n'

    if not is_complete(graph):
        is_valid = False
        message += 'graph is not complete\n'

    return is_valid, message


def draw_graph(graph: Graph, with_weight=True, path=None):
    """Draw the graph, save it to path if given, show it otherwise"""
    G = graph_to_networkx(graph)
    fig = plt.figure()
    pos = nx.spring_layout(G, seed=0)  # positions for all nodes
    nx.draw(G, pos, with_labels=True, node_color='skyblue', node_size=2000, font_size=10)

    if with_weight:
        # Draw edge labels
        edge_labels = nx.get_edge_attributes(G, 'weight')
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels)

    if path is None:
        plt.show()
    else:
        fig.savefig(path)
    plt.close(fig)
