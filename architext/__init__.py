"""ArchiText: apartment floor plans from text."""

import logging


def configure_logging(level=None):
    """Configure root logging from ``LOG_LEVEL`` unless *level* is given."""
    from architext.config import LOG_LEVEL

    level = level or LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
