"""Command line entry point: cluster a TSV record file."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from spkmeans.core.config import ClusterConfig, Config
from spkmeans.core.exceptions import ClusteringConfigError
from spkmeans.engine import ClusterEngine
from spkmeans.initializers import get_registered_initializers
from spkmeans.loaders import TSVLoader
from spkmeans.output import format_assignments, format_vector, write_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING_INPUT = 1
EXIT_CONFIG_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spkmeans",
        description="k-means / k-means++ clustering of sparse feature records",
    )
    parser.add_argument("num_clusters", type=int, help="Number of clusters")
    parser.add_argument("data", help="TSV file: label<TAB>feature<TAB>weight...")
    parser.add_argument(
        "--init",
        dest="initializer",
        choices=get_registered_initializers(),
        default=None,
        help="Center initialization strategy (default: kmeans++)",
    )
    parser.add_argument("--max-iter", dest="max_iterations", type=int, default=None,
                        help="Iteration cap (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--workers", dest="num_workers", type=int, default=None,
                        help="Threads for the assignment step (default: CPU count)")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--env", default=None, help="Environment override name")
    parser.add_argument("--show-vectors", action="store_true",
                        help="Print the loaded vectors and exit")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge config-file settings with command line flags; flags win."""
    settings: Dict[str, Any] = {}
    if args.config:
        config = Config.load(args.config, env=args.env)
        settings.update(config.get_section("clustering"))
        settings["loader"] = config.loader_settings()

    settings["num_clusters"] = args.num_clusters
    for key in ("initializer", "max_iterations", "seed", "num_workers"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = build_settings(args)
        loader = TSVLoader(**settings.pop("loader", {}))
        loaded = loader.load(args.data)
    except FileNotFoundError as e:
        print(f"spkmeans: {e}", file=sys.stderr)
        return EXIT_MISSING_INPUT
    except ClusteringConfigError as e:
        print(f"spkmeans: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    for skipped in loaded.skipped:
        print(f"format error: line {skipped.line_number}: {skipped.line}", file=sys.stderr)

    if args.show_vectors:
        write_lines(
            (format_vector(r.label, r.vector, loaded.features) for r in loaded.records),
            sys.stdout,
        )
        return EXIT_OK

    try:
        engine = ClusterEngine(ClusterConfig.from_dict(settings))
        engine.add_vectors(loaded.records)
        result = engine.run()
    except ClusteringConfigError as e:
        print(f"spkmeans: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    write_lines(format_assignments(result.pairs()), sys.stdout)
    logger.info(f"{result}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
