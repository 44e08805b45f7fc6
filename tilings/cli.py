"""Command-line driver: generate one tiling and write it to an OBJ or PLY file."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .logging_config import setup_logging
from .tiling import TILINGS, generate

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m tilings --tiling triangle --rows 100 --cols 100
  python -m tilings --tiling semi-regular-7 --rows 100 --cols 100 --out rhombi.obj
  python -m tilings --tiling semi-regular-8 --rows 64 --cols 64 --out trunc.ply
  python -m tilings --tiling hexagon --reverse-winding -v
  python -m tilings --list
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tilings",
                                description="tilings: regular and semi-regular tiling meshes",
                                epilog=_DEF_HELP,
                                formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--tiling", help="Tiling name, case-insensitive: " + ", ".join(TILINGS))
    p.add_argument("--rows", type=int, default=32)
    p.add_argument("--cols", type=int, default=32)
    p.add_argument("--out", help="Output path (.obj/.ply). Defaults to <NAME>.obj")
    p.add_argument("--ply", action="store_true", help="Force ASCII PLY output")
    p.add_argument("--reverse-winding", action="store_true",
                   help="Write faces clockwise instead of counter-clockwise")
    p.add_argument("--list", action="store_true", help="Print the tiling names and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-file", help="Also write the log to this file")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    if args.list:
        for name in TILINGS:
            print(name)
        return

    if not args.tiling:
        p.error("--tiling is required")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        tiling = generate(args.tiling, args.rows, args.cols)
    except KeyError as exc:
        p.error(exc.args[0])
    except (ValueError, OverflowError) as exc:
        p.error(str(exc))

    census = ", ".join(f"{count} x {sides}-gon" for sides, count in tiling.polygon_census().items())
    logger.debug("%s faces: %s", tiling.name, census or "none")

    # Decide format
    out = args.out or f"{tiling.name}.obj"
    if args.ply or out.lower().endswith(".ply"):
        tiling.save_ply(out, args.reverse_winding)
    else:
        tiling.save_obj(out, args.reverse_winding)


if __name__ == "__main__":
    main()
