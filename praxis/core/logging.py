"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides levels and format once, at application start-up.
"""

import logging

from praxis.core.config import Settings, settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(config: Settings = settings) -> None:
    """Configure the root logger and the engine loggers.

    ``DEBUG`` lowers everything to DEBUG.  ``PERIODIZATION_DEBUG`` only
    turns on the verbose output of the periodization, generation and
    auto-regulation packages.
    """
    level = logging.DEBUG if config.DEBUG else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    engine_level = logging.DEBUG if (config.DEBUG or config.PERIODIZATION_DEBUG) else logging.INFO
    for name in ("praxis.periodization", "praxis.generation", "praxis.autoregulation"):
        logging.getLogger(name).setLevel(engine_level)
