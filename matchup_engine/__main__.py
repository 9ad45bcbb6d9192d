# matchup_engine/__main__.py
import argparse
import sys
from typing import Optional

from .config import load_settings
from .logging_config import logger, setup_logging
from .simulation import RunStats, clear_output_folder, run_batch


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="matchups",
                                     description="Simulate heads-up showdowns and bucket them by matchup category")
    parser.add_argument("runs", nargs="?", type=int, default=None,
                        help="Number of showdowns to simulate (default from config)")
    parser.add_argument("--config", default=None, help="Path to config YAML (default config.yaml)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the deck shuffles")
    parser.add_argument("--output-dir", default=None, help="Directory for matchups.json and the manifest")
    parser.add_argument("--max-per-category", type=int, default=None,
                        help="Maximum stored deals per category")
    parser.add_argument("--log-level", default=None, help="Python logging level (e.g. INFO, WARNING)")
    parser.add_argument("--clear", action="store_true",
                        help="Delete everything in the output directory and exit")
    return parser.parse_args(argv)


def run(argv=None) -> Optional[RunStats]:
    """Run one batch from command-line arguments; None when only clearing the output"""
    args = parse_args(argv)
    settings = load_settings(args.config)

    if args.seed is not None:
        settings.seed = args.seed
    if args.output_dir:
        settings.output_dir = args.output_dir
    if args.max_per_category is not None:
        settings.max_per_category = args.max_per_category
    if args.log_level:
        settings.log_level = args.log_level
    settings.validate()

    setup_logging(settings.log_level, settings.log_dir)

    if args.clear:
        clear_output_folder(settings.output_dir)
        return None

    runs = args.runs if args.runs is not None and args.runs > 0 else settings.runs
    stats = run_batch(runs, settings)

    logger.info("=== CATEGORY COUNTS (this batch) ===")
    for key, count in stats.categories.most_common():
        logger.info(f'{key}: {count}')
    return stats


def main(argv=None) -> int:
    run(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
