"""The ``lock`` generator plugin.

Importing this module registers :func:`generate` as the last plugin of the
``gen`` command, so it sees the final list of files after every other
generator has run.  It builds a :class:`~genlock.ledger.Ledger` over those
files and locks it; the ledger records each file as the pipeline renders it.

The configured log level is applied once, at import.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from genlock import config as _config
from genlock.codegen import GeneratedFile, register_plugin_last
from genlock.ledger import Ledger

logger = logging.getLogger(__name__)

PLUGIN_NAME = "lock"
PLUGIN_CMD = "gen"


def generate(genpkg: str, roots: Sequence[Any], files: list[GeneratedFile]) -> list[GeneratedFile]:
    """Lock the ledger for *files* and return them unchanged.

    The output directory comes from :mod:`genlock.config`
    (``GENLOCK_OUTPUT_DIR`` or ``[output] dir``); the working directory is
    used when neither is set.

    Raises:
        LedgerError: Any ledger construction or lock failure.  The pass must
                     be aborted.
    """
    ledger = Ledger(files, output_dir=_config.config.output.output_dir)
    ledger_path = ledger.lock()
    logger.info("created lock file %r", ledger_path)
    return files


_config.apply_logging_settings(_config.config.logging)
register_plugin_last(PLUGIN_NAME, PLUGIN_CMD, generate)
