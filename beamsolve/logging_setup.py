# beamsolve/logging_setup.py
import logging

FORMAT = "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d - %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one console handler to the beamsolve logger (idempotent)."""
    logger = logging.getLogger("beamsolve")
    logger.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(sh)

    for h in logger.handlers:
        h.setLevel(level)

    logger.debug("Logging initialised at level %s", logging.getLevelName(level))
    return logger
