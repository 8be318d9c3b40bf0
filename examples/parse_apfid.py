#!/usr/bin/env python3
"""Parse a few APFIDs and print their canonical forms.

Usage:
    python examples/parse_apfid.py 1YSI_A111-191 1abc:2_A5_B20 AF-P69905-F1-V4_A
"""

from __future__ import annotations

import argparse
import logging

from apfid import parse_apfid

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    p = argparse.ArgumentParser(description="Print canonical v1/v2 forms of APFIDs")
    p.add_argument("apfids", nargs="*", default=["1YSI_A111-191"], help="Raw APFID strings")
    args = p.parse_args()

    for raw in args.apfids:
        a = parse_apfid(raw)
        logger.info(
            "%s -> %s (source=%s, v1=%s, v2=%s)",
            raw, a.upper(), a.id_type, a.to_string(version=1), a.to_string(version=2),
        )


if __name__ == "__main__":
    main()
