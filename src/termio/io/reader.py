"""Load stylesheet files."""

import logging
from pathlib import Path

from termio.errors import InvalidSyntax
from termio.registry import Termio

logger = logging.getLogger(__name__)


def load(path: str | Path) -> Termio:
    """
    Load a stylesheet from disk into a new registry.

    Read failures are reported as ``InvalidSyntax`` carrying the
    underlying message.
    """
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidSyntax(str(e)) from e

    logger.debug("Loaded stylesheet %s", path)

    tcss = Termio()
    tcss.parse(content)
    return tcss
