"""Command line harness that rolls a set of ability scores as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "roll_logs" / "latest_roll.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from role_dice import AbilityConfig, roll_ability_report

logger = logging.getLogger("roll_abilities")


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x hex), received '{value}'."
        ) from exc


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, received {parsed}.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roll ability scores (4d6 drop lowest)")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=None,
        help="Engine seed (decimal or 0x-prefixed hex); defaults to the wall clock",
    )
    parser.add_argument("--scores", type=_positive_int, default=6, help="Number of ability scores")
    parser.add_argument("--dice", type=_positive_int, default=4, help="Dice rolled per score")
    parser.add_argument("--faces", type=int, default=6, help="Faces per die")
    parser.add_argument("--drop", type=int, default=1, help="Lowest dice dropped per score")
    parser.add_argument(
        "--detail",
        action="store_true",
        help="Emit the full report (seed, per-die rolls) instead of the bare score array",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON output to disk. Provide a path or pass the flag alone to use "
            "roll_logs/latest_roll.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = AbilityConfig(
        seed=args.seed,
        scores=args.scores,
        dice_per_score=args.dice,
        faces=args.faces,
        drop_lowest=args.drop,
    )
    try:
        report = roll_ability_report(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Rolled %d ability scores with seed %d", len(report["scores"]), report["seed"])
    result = report if args.detail else report["scores"]

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("Wrote roll log to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
