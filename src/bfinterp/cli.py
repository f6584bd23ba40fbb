from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, List, Optional

from .api import run_file
from .errors import BFError

logger = logging.getLogger(__name__)


def _log_level() -> int:
    name = os.environ.get("BFI_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, name, None)
    # the logging module also exposes non-level names such as BASIC_FORMAT
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return logging.WARNING


def _configure_logging() -> None:
    logging.basicConfig(
        level=_log_level(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: bfi <file.bf>")
        return 1

    _configure_logging()
    try:
        run_file(args[0], stdin=stdin, stdout=stdout)
    except BFError as e:
        logger.debug("run aborted", exc_info=True)
        print(e, file=sys.stderr)
        return 2
    return 0
