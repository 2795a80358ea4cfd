#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

from laakhay.logchunk import ChunkHandler, ChunkSettings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Split long log records before they reach the console")
    p.add_argument("length", nargs="?", type=int, default=300, help="Length of the demo message")
    p.add_argument("--max-length", type=int, default=120, help="Chunk size in characters")
    p.add_argument("--depth", type=int, default=12, help="Depth of the demo stack trace")
    return p.parse_args()


def fail(depth: int) -> None:
    if depth == 0:
        raise RuntimeError("demo failure")
    fail(depth - 1)


def main() -> None:
    args = parse_args()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(levelname)s [seq=%(seq)s] %(message)s"))

    chunker = ChunkHandler(settings=ChunkSettings(max_length=args.max_length))
    chunker.add_handler(console)

    log = logging.getLogger("quickstart")
    log.setLevel(logging.INFO)
    log.propagate = False
    log.addHandler(chunker)

    # Long message: one record per chunk
    log.info("x" * args.length, extra={"mdc": {"seq": "-"}})

    # Deep stack trace: one record per frame group
    try:
        fail(args.depth)
    except RuntimeError:
        log.exception("request failed", extra={"mdc": {"seq": "-"}})

    chunker.close()


if __name__ == "__main__":
    main()
