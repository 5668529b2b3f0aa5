"""Process-wide logging setup.

Called once from the entry point before the store is opened, so connection
messages are already formatted. Modules log through
`logging.getLogger(__name__)` and never configure handlers themselves.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Args:
        level: Level name such as "DEBUG" or "INFO"; unknown names fall back
            to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
