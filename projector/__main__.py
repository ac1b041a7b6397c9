from argparse import ArgumentParser
import logging
import sys

from projector.details.graph import load_graph
from projector.details.model_loader import GeneratorModelLoader
from projector.details.printer import Printer
from projector.details.tools.dump import dump_main
from projector.details.tools.sources import sources_main
from projector.details.tools.validate import validate_main
from projector.errors import FatalError


def main(argv=None):
    COMMANDS = {
        "dump": dump_main,
        "sources": sources_main,
        "validate": validate_main,
    }
    parser = ArgumentParser(prog="projector")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--path", type=str, default=".")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    printer = Printer()
    loader = GeneratorModelLoader(printer=printer)
    # Resolution errors are user errors, anything else is a bug and propagates
    try:
        graph = load_graph(loader, args.path)
        exit_code = COMMANDS[args.command](
            graph=graph,
            printer=printer,
            file_handler=loader.file_handler,
            manifest_loader=loader.manifest_loader,
        )
    except FatalError as e:
        printer.print_error(e.description)
        exit_code = 1
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
