from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .errors import (
    ConversionError,
    Ea2RdfError,
    InvalidConfigurationError,
    ModelReadError,
)
from .main import run

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ea2rdf",
        description="Convert an Enterprise Architect diagram to RDF (Turtle) or a TSV term table.",
    )
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   help="Logging level (default: INFO).")
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List the structure of the EA file.")
    ls.add_argument("-i", "--input", type=Path, required=True, help="The EA project file.")
    ls.add_argument("--full", dest="print_elements", action="store_true",
                    help="Also print classes, enumerations and datatypes.")

    conv = sub.add_parser("convert", help="Convert a diagram from an EA file to a RDF turtle file.")
    conv.add_argument("-i", "--input", type=Path, required=True, help="The EA project file.")
    conv.add_argument("-b", "--base", type=Path, default=None,
                      help="Turtle file containing starting statements.")
    conv.add_argument("-c", "--config", type=Path, required=True,
                      help="JSON configuration file for mappings.")
    conv.add_argument("-d", "--diagram", required=True, help="The name of the diagram to convert.")
    conv.add_argument("-f", "--full", dest="full_output", action="store_true",
                      help="Provide full output for each term, regardless whether they are "
                           "internal or external. Default: false.")
    conv.add_argument("-o", "--output", type=Path, required=True, help="Output file name.")

    tsv = sub.add_parser("tsv", help="Create a TSV table of all term information.")
    tsv.add_argument("-i", "--input", type=Path, required=True, help="The EA project file.")
    tsv.add_argument("-d", "--diagram", required=True, help="The name of the diagram to convert.")
    tsv.add_argument("-o", "--output", type=Path, required=True, help="Output file name.")
    tsv.add_argument("-c", "--config", type=Path, required=True,
                     help="JSON configuration file for mappings.")
    return p


def to_config(ns: argparse.Namespace) -> Config:
    return Config(
        command=ns.command,
        input=ns.input,
        diagram=getattr(ns, "diagram", None),
        config=getattr(ns, "config", None),
        output=getattr(ns, "output", None),
        base=getattr(ns, "base", None),
        full_output=getattr(ns, "full_output", False),
        print_elements=getattr(ns, "print_elements", False),
        log_level=ns.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    cfg = to_config(build_parser().parse_args(argv))
    setup_logging(cfg.log_level)
    try:
        run(cfg)
    except ModelReadError as e:
        logger.error("An error occurred while reading the EA model: %s", e)
        return 1
    except InvalidConfigurationError as e:
        logger.error("Invalid configuration specified: %s", e)
        return 1
    except ConversionError as e:
        logger.error("An error occurred during conversion: %s", e)
        return 1
    except Ea2RdfError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
