import logging


def configure_logging(debug: bool = False) -> None:
    """
    Set up root logging for applications that use ExtendedSet.

    The library itself never calls this; it only emits debug records.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
        logging.debug("Debug logging enabled")
    else: # Every library record is DEBUG, so INFO hides them
        logging.basicConfig(level=logging.INFO)
