import argparse
import logging
import sys

from graph_parser import input_file_to_graph
from logger_config import configure_logging
from utils import RESULT_MESSAGE

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """
    argparse parser that fails with exit code 1 like every other error.
    """

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"fatal error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Exact shortest Hamiltonian path (Held-Karp) over an edge list file.")
    parser.add_argument("input", type=str, help="Path to a file of 'A to B = 123' lines.")
    parser.add_argument("--validate", action="store_true", help="Check the graph is complete before solving.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging on stderr, repeat for debug.")
    return parser


def run(args) -> int:
    if args.validate:
        from graph_utils import is_valid_input
        is_valid, message = is_valid_input(args.input)
        if not is_valid:
            raise ValueError("invalid input: " + message.strip().replace("\n", "; "))

    graph = input_file_to_graph(args.input)
    return graph.shortest_path()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        cost = run(args)
    except (OSError, ValueError) as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"fatal error: {exc}", file=sys.stderr)
        return 1
    print(RESULT_MESSAGE.format(cost))
    return 0


if __name__ == "__main__":
    sys.exit(main())
