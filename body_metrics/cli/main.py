"""Entry point for the body metrics command line tool.

This module reads a profile from command line flags, validates it through
the profile collector, computes the derived metrics and prints either the
narrative summary (text or HTML) or the metrics record as JSON.

Defaults for the output format, the calorie deficit and the log level come
from ``config.json`` or the ``BODY_METRICS_*`` environment variables.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from colorama import Fore, Style
from colorama import init as colorama_init

from ..collectors.profile_collector import collect_profile
from ..core import config
from ..core.errors import MetricsError
from ..core.logic import compute_metrics
from ..core.schema import ActivityLevel, WeightCategory
from ..core.summary import compose_summary

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2

_CATEGORY_COLORS = {
    WeightCategory.UNDERWEIGHT: Fore.YELLOW,
    WeightCategory.NORMAL: Fore.GREEN,
    WeightCategory.OVERWEIGHT: Fore.YELLOW,
    WeightCategory.OBESITY: Fore.RED,
}


def _print_error(message: str) -> None:
    print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)


def build_parser(cfg: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="body-metrics",
        description="Compute BMI, ideal body weight and daily calorie need.",
    )
    parser.add_argument("--sex", required=True, help="male or female")
    parser.add_argument("--age", required=True, help="age in years")
    parser.add_argument("--height", required=True, help="height in centimetres")
    parser.add_argument("--weight", required=True, help="current weight in kilograms")
    parser.add_argument("--target-weight", default=None, help="goal weight in kilograms")
    parser.add_argument(
        "--activity",
        required=True,
        help="activity level: " + ", ".join(level.value for level in ActivityLevel),
    )
    parser.add_argument(
        "--deficit",
        default=config.default_calorie_deficit(cfg),
        help="planned calorie deficit in kcal/day (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=config.SUMMARY_FORMATS,
        default=config.summary_format(cfg),
        help="output format (default: %(default)s)",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.  Parse flags, compute and print the result."""
    colorama_init()
    try:
        cfg = config.load_config()
        parser = build_parser(cfg)
    except ValueError as exc:
        _print_error(f"Invalid configuration: {exc}")
        return EXIT_INVALID_INPUT
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level(cfg),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = collect_profile(
            sex=args.sex,
            age=args.age,
            height_cm=args.height,
            weight_kg=args.weight,
            activity_level=args.activity,
            target_weight_kg=args.target_weight,
            calorie_deficit=args.deficit,
        )
        metrics = compute_metrics(profile)
        if args.format == "json":
            output = json.dumps(metrics.model_dump(mode="json"), indent=2)
        else:
            output = compose_summary(profile, metrics, fmt=args.format)
    except MetricsError as exc:
        _print_error(str(exc))
        return EXIT_INVALID_INPUT

    color = _CATEGORY_COLORS[metrics.weight_category]
    logger.info(
        "BMI %.1f: %s%s%s",
        metrics.bmi,
        color,
        metrics.weight_category.value,
        Style.RESET_ALL,
    )
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
