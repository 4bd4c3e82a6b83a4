"""Tabulate die face frequencies from a seeded engine as JSON or CSV."""

from __future__ import annotations

import argparse
import csv
import io
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from role_dice import FaceCount, MersenneTwister, face_histogram

logger = logging.getLogger("face_histogram")

FIELDNAMES = ["face", "count", "frequency", "deviation"]


def render_csv(table: List[FaceCount]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=FIELDNAMES, lineterminator="\n")
    writer.writeheader()
    for row in table:
        writer.writerow(asdict(row))
    return buffer.getvalue()


def render_json(table: List[FaceCount], seed: int, draws: int) -> str:
    payload = {
        "seed": seed,
        "draws": draws,
        "faces": [asdict(row) for row in table],
    }
    return json.dumps(payload, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Face frequency report for the MT19937 die")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Engine seed (decimal or 0x-prefixed hex); defaults to the wall clock",
    )
    parser.add_argument("--faces", type=int, default=6, help="Faces per die")
    parser.add_argument("--draws", type=int, default=1_000_000, help="Number of faces to draw")
    parser.add_argument("--format", choices=("json", "csv"), default="json")
    parser.add_argument("--out", type=Path, help="Write the report here instead of stdout")
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

    rng = MersenneTwister(args.seed)
    try:
        table = face_histogram(rng, args.faces, args.draws)
    except ValueError as exc:
        parser.error(str(exc))

    worst = max(abs(row.deviation) for row in table)
    logger.info(
        "Drew %d faces (d%d, seed %d); worst deviation %.6f",
        args.draws,
        args.faces,
        rng.seed,
        worst,
    )

    if args.format == "csv":
        text = render_csv(table)
    else:
        text = render_json(table, rng.seed, args.draws)

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(text)
        logger.info("Wrote %s report to %s", args.format, args.out)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


if __name__ == "__main__":
    main()
