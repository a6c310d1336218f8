import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Configure logging for the CLI.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG. Logs go to stderr only.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
        force=True,
    )
    return logging.getLogger("follow_tracker")
