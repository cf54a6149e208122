"""Command-line interface for station-catalog."""

import argparse
import logging
import sys

from station_catalog.api import analyze, extract
from station_catalog.errors import StationCatalogError
from station_catalog.gtfs.models import ExtractConfig
from station_catalog.version import VERSION

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_extract(config: ExtractConfig) -> int:
    """Run the pipeline and report the result."""
    try:
        report = extract(config)
    except StationCatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Extraction failed")
        return e.exit_code
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Extraction failed")
        return 1

    print("\nExtraction successful!")
    print(f"Output: {report.outputs['catalog']}")
    if "sample" in report.outputs:
        print(f"Sample: {report.outputs['sample']} ({report.stats['sample']} stations)")
    print(f"Stats: {report.stats}")
    return 0


def cmd_extract(args: argparse.Namespace) -> int:
    """Execute the default extraction."""
    return run_extract(ExtractConfig())


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze the feed layout, then extract."""
    config = ExtractConfig()
    try:
        analyze(config.input_path, delimiter=config.delimiter, quotechar=config.quotechar)
    except (StationCatalogError, OSError) as e:
        logger.error(f"Analysis failed, running extraction directly: {e}")

    return run_extract(config)


def cmd_sample(args: argparse.Namespace) -> int:
    """Extract and also write the sample catalog."""
    return run_extract(ExtractConfig(write_sample=True))


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="station-catalog",
        description="Extract a sorted station catalog from GTFS stops.txt",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Show the columns and an example row of stops.txt before extracting",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Also write a sample catalog with the first 50 stations",
    )

    args, unknown = parser.parse_known_args()
    setup_logging(args.verbose)

    if unknown:
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    # --analyze takes precedence when both flags are given
    if args.analyze:
        func = cmd_analyze
    elif args.sample:
        func = cmd_sample
    else:
        func = cmd_extract

    sys.exit(func(args))


if __name__ == "__main__":
    main()
