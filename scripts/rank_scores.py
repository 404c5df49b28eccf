#!/usr/bin/env python3
"""
Offline ranking script for framerank.

Replays recorded per-frame classifier scores through the temporal smoother
and the top-K ranker, printing the best label of every frame and optionally
saving all ranked results as JSON.
"""

import argparse
import sys
from pathlib import Path

import numpy as np


# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from framerank.data.labels import load_label_list
from framerank.inference.pipelines import FrameClassificationPipeline
from framerank.inference.postprocessing import PostprocessingError, format_top_or_default
from framerank.utils.config import Config
from framerank.utils.helpers import save_dict_to_json
from framerank.utils.logging import setup_logging


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Smooth and rank recorded classifier scores frame by frame",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Configuration
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")

    # Input
    parser.add_argument(
        "--labels", "-l", type=str, help="Label list, one label per line"
    )
    parser.add_argument(
        "--scores",
        "-s",
        type=str,
        required=True,
        help="Score matrix of shape (frames, labels): .npy or whitespace-separated text",
    )

    # Post-processing
    parser.add_argument(
        "--top-k", "-k", type=int, dest="results_to_show", help="Labels per frame"
    )
    parser.add_argument("--stages", type=int, dest="stage_count", help="Filter stages")
    parser.add_argument(
        "--filter-factor", type=float, dest="filter_factor", help="EMA factor in (0, 1]"
    )
    parser.add_argument(
        "--no-smoothing", action="store_true", help="Rank raw scores without smoothing"
    )
    parser.add_argument(
        "--warm-start",
        action="store_true",
        help="Seed the filter with the first frame instead of zeros",
    )

    # Output
    parser.add_argument("--output", "-o", type=str, help="Save ranked results (JSON)")

    # System
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def setup_config(args: argparse.Namespace) -> Config:
    """Build the configuration from a file and command line overrides."""
    config = Config.from_yaml(args.config) if args.config else Config()

    config.update_from_args(
        {
            "labels.label_path": args.labels,
            "ranking.results_to_show": args.results_to_show,
            "smoothing.stage_count": args.stage_count,
            "smoothing.filter_factor": args.filter_factor,
        }
    )
    if args.no_smoothing:
        config.smoothing.enabled = False
    if args.warm_start:
        config.smoothing.warm_start = True
    if args.verbose:
        config.logging.log_level = "DEBUG"

    return config


def load_scores(scores_path: str | Path) -> np.ndarray:
    """Load a (frames, labels) score matrix."""
    scores_path = Path(scores_path)

    if scores_path.suffix == ".npy":
        scores = np.load(scores_path)
    else:
        scores = np.loadtxt(scores_path, dtype=np.float64, ndmin=2)

    if scores.ndim == 1:
        scores = scores[np.newaxis, :]

    return scores


def main(argv: list[str] | None = None) -> int:
    """Main ranking function."""
    args = parse_arguments(argv)
    config = setup_config(args)

    logger = setup_logging(
        log_level=config.logging.log_level,
        log_dir=config.logging.log_dir,
        use_tensorboard=config.logging.use_tensorboard,
        experiment_name=config.logging.experiment_name,
    )
    logger.info("Starting framerank offline ranking")
    logger.log_hyperparameters(
        {
            "smoothing": config.smoothing.enabled,
            "stage_count": config.smoothing.stage_count,
            "filter_factor": config.smoothing.filter_factor,
            "results_to_show": config.ranking.results_to_show,
        }
    )

    try:
        vocabulary = load_label_list(config.labels.label_path)
        scores = load_scores(args.scores)
        logger.info(f"Loaded {scores.shape[0]} frames from {args.scores}")

        pipeline = FrameClassificationPipeline(config, vocabulary)

        ranked = []
        for frame_index, frame_scores in enumerate(scores):
            result = pipeline.process_scores(frame_scores)
            ranked.append({"frame": frame_index, **result.to_dict()})
            print(f"{frame_index}\t{format_top_or_default(result)}")

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            save_dict_to_json(
                {
                    "metadata": {
                        "labels": list(vocabulary),
                        "frames": len(ranked),
                        "config": config.to_dict(),
                    },
                    "frames": ranked,
                },
                output_path,
            )
            logger.info(f"Results saved to: {output_path}")

    except (OSError, ValueError, PostprocessingError) as e:
        logger.error(f"Ranking failed: {e}")
        return 1
    finally:
        logger.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
