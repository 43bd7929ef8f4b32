"""Command line entry point: generate Lévy walk traces and export them."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import load_config
from .config_factory import SCENARIOS, make_config
from .errors import MapWalkError
from .experiments import TraceRunner
from .utils import export_traces, summarize

logger = logging.getLogger("mapwalk")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate map-based Levy walk traces")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", help="YAML configuration file")
    source.add_argument("--scenario", choices=SCENARIOS, default="baseline")
    parser.add_argument("--nodes", type=int, default=6, help="node count for built-in scenarios")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--paths", type=int, default=None, help="paths per node")
    parser.add_argument("--out", default=None, help="export directory for JSON/CSV traces")
    parser.add_argument(
        "--log-level", type=str.upper, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    try:
        if args.config:
            config = load_config(args.config)
            name = os.path.splitext(os.path.basename(args.config))[0]
        else:
            config = make_config(args.scenario, node_count=args.nodes)
            name = args.scenario
        if args.seed is not None:
            config.seed = args.seed
        result = TraceRunner(config).run(name=name, paths_per_node=args.paths)
    except (MapWalkError, OSError) as e:
        logger.error("%s", e)
        return 1

    summary = summarize(result)
    logger.info(
        "%d nodes, %d paths, %.1f edges/path (max %d), %.1f m/path, %.2f m/s",
        summary.nodes,
        summary.paths,
        summary.mean_edges,
        summary.max_edges,
        summary.mean_length,
        summary.mean_speed,
    )
    if args.out:
        written = export_traces(result, args.out, run_meta={"source": name})
        logger.info("Wrote %s and %s", written["json"], written["csv"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
