import argparse
import sys
import time
from pathlib import Path

from revenue_story.curves.calibration import STRATEGIES
from revenue_story.curves.errors import ConfigurationError
from revenue_story.engine.config.config import StoryConfig
from revenue_story.engine.config.config_loader import load_story_config
from revenue_story.engine.runners.story_runner import generate
from revenue_story.utils.logging_utils import fail, fmt_sec, info, skip
from revenue_story.utils.output_utils import result_to_json, write_result_json

DEFAULT_CONFIG = "config.yaml"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="revenue-story",
        description="Generate the calibrated revenue concentration story data"
    )

    parser.add_argument("--config",
                        default=DEFAULT_CONFIG,
                        help="Path to configuration file (YAML or JSON, 'story' section)")

    # ----------------- OVERRIDES -------------------

    parser.add_argument("--seed", type=int, help="Override story.seed")
    parser.add_argument("--count", type=int, help="Override story.count (customers sampled)")
    parser.add_argument("--anchor", type=float,
                        help="Override story.anchor_population_share_pct")
    parser.add_argument("--target", type=float,
                        help="Override story.target_magnitude_share_pct")
    parser.add_argument("--months", type=int, help="Override story.months")
    parser.add_argument("--bins", type=int, help="Override story.histogram_bins")
    parser.add_argument("--strategy", choices=STRATEGIES, help="Override story.strategy")

    # ----------------- OUTPUT -------------------

    parser.add_argument("--out", help="Write the result JSON here instead of stdout")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default 2)")

    return parser


def load_base_config(path: str) -> StoryConfig:
    """The default config file is optional; an explicitly passed one is not."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        skip(f"No {DEFAULT_CONFIG} found, using built-in defaults")
        return StoryConfig()
    return load_story_config(path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    start = time.time()

    try:
        cfg = load_base_config(args.config)
        result = generate(
            cfg,
            seed=args.seed,
            count=args.count,
            anchor_population_share_pct=args.anchor,
            target_magnitude_share_pct=args.target,
            months=args.months,
            histogram_bins=args.bins,
            strategy=args.strategy,
        )
    except ConfigurationError as ex:
        fail(f"Invalid configuration: {ex}")
        return 2
    except Exception as ex:
        fail(str(ex))
        raise

    if args.out:
        write_result_json(result, args.out, indent=args.indent)
    else:
        sys.stdout.write(result_to_json(result, indent=args.indent) + "\n")

    info(f"Finished in {fmt_sec(time.time() - start)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
