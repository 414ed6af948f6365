"""
Assemble a beacon map from a scanner report file.

Loads the configuration, parses the report, resolves every scanner into the
frame of the first one and logs the unique beacon count and the largest
Manhattan distance between scanners.
"""

import sys
import argparse
from pathlib import Path

# Add the src to the path to import modules
sys.path.append(str(Path(__file__).parent.parent / "src"))

from beacon_mapping.exceptions import ExhaustionError, MalformedInputError
from beacon_mapping.mapping import MapAssembler
from beacon_mapping.preprocessing import ScannerReportLoader
from beacon_mapping.utils.config import load_config, AppConfig
from beacon_mapping.utils.logging import setup_logger, set_package_level


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Beacon Mapping Workflow")
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Scanner report file (overrides paths.input_file)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file (defaults to config/default.yaml)",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Override assembly.max_retries",
    )
    parser.add_argument(
        "--proper-only",
        action="store_true",
        help="Search only the 24 proper rotations",
    )
    args = parser.parse_args(argv)

    cfg: AppConfig = load_config(args.config)
    if args.input:
        cfg.paths.input_file = args.input
    if args.max_retries is not None:
        cfg.assembly.max_retries = args.max_retries
    if args.proper_only:
        cfg.matching.orientations = "proper"

    logger = setup_logger("beacon_mapping.workflow", level=cfg.logging.level, log_file=cfg.logging.file)
    set_package_level(cfg.logging.level)

    if not cfg.paths.input_file:
        logger.error("No input file given (use --input or paths.input_file)")
        return 2

    try:
        scanners = ScannerReportLoader().load(cfg.paths.input_file)
        result = MapAssembler.from_config(scanners, cfg).run()
    except (FileNotFoundError, MalformedInputError) as e:
        logger.error(f"Cannot read scanner reports: {e}")
        return 1
    except ExhaustionError as e:
        logger.error(f"Beacon map is incomplete: {e}")
        return 1

    logger.info(f"Unique beacons: {result.beacon_count}")
    logger.info(f"Largest scanner distance: {result.max_spread}")
    for name, position in result.positions.items():
        logger.info(f"  {name}: {tuple(position)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
