#!/usr/bin/env python3
# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
UIForge - Geometry and Sequence Utilities

Command-line front end for the UIForge helpers.

Usage:
    uiforge rounded 200 100 --radius 12
    uiforge rounded 200 100 --top 16 --flatten
    uiforge rounded 200 100 --corners 8,0,0,8 --extents
    uiforge next a b c d --match b --loop
    uiforge pinyin 中文 --head

Author: Scott Bowman
License: AGPL-3.0-or-later
"""

import logging
import sys
from typing import List, Optional

from .cli_args import build_argument_parser, resolve_radii
from .core import types as uf
from .devices.common.cairo_utils import path_extents
from .operators import sequence
from .operators import string as uf_string
from .operators.path import describe_path, flatten_path
from .operators.rounded_path import build_rounded_path

logger = logging.getLogger(__name__)


def _run_rounded(args) -> int:
    radii = resolve_radii(args)
    rect = uf.Rect(args.width, args.height)
    path = build_rounded_path(rect, radii)
    logger.debug("Built outline for %s with %s", rect, radii)

    if args.flatten:
        path = flatten_path(path)

    if args.extents:
        x1, y1, x2, y2 = path_extents(path)
        print(f"{x1:g} {y1:g} {x2:g} {y2:g}")
        return 0

    for line in describe_path(path):
        print(line)
    return 0


def _run_neighbour(args) -> int:
    find = sequence.next_match if args.command == "next" else sequence.prev_match
    result = find(args.items, lambda item: item == args.match, args.loop)
    if result is None:
        logger.info("No %s item for %r", args.command, args.match)
        return 1
    print(result)
    return 0


def _run_pinyin(args) -> int:
    if args.head:
        print(uf_string.get_pinyin_head(args.text))
    else:
        print(uf_string.transform_to_pinyin(args.text, with_blank=args.blank))
    return 0


_COMMANDS = {
    "rounded": _run_rounded,
    "next": _run_neighbour,
    "prev": _run_neighbour,
    "pinyin": _run_pinyin,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the UIForge command line.

    Returns:
        Exit code: 0 for success, 1 for error or no result
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.command](args)
    except ValueError as e:
        print(f"UIForge Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
