# ==================================================================================================
#                                   Logging
# ==================================================================================================
#
# Logging bootstrap used by the CLI entrypoint. Library modules only create
# named loggers; handlers and format are configured here once.

import logging

def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure global logging once.

    Parameters
    ----------
    level
        Logging level.

    Usage example
    -------------
        configure_logging(logging.DEBUG)
        logging.getLogger(__name__).debug("rendering %d plots", 3)
    """
    # Without `force=True` an embedding application's handlers are kept.
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
