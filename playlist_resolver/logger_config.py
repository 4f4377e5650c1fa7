import logging
import sys

CONSOLE_HANDLER_NAME = "playlist_resolver.console"


def setup_logger(level: str = "INFO"):
    """Configure le logger racine pour l'application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Un seul handler console, même si la configuration est rappelée
    if any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
