import sys
import logging


class LevelFilter(logging.Filter):
    """Lets through records strictly between `down` and `up`."""

    def __init__(self, up=logging.CRITICAL + 1, down=logging.NOTSET):
        super().__init__()
        self.up = logging._checkLevel(up)
        self.down = logging._checkLevel(down)

    def filter(self, record):
        return self.down < record.levelno < self.up


ERROR_FORMAT = "gohooks %(levelname)s: %(message)s"


def get_error_format(stream) -> str:
    """Red on a terminal, plain text when stderr goes to a file or pipe."""
    if stream.isatty():
        return f"\x1b[91m{ERROR_FORMAT}\x1b[0m"
    return ERROR_FORMAT


def setup_logger(in_logger, level=logging.INFO):
    """Progress goes to stdout next to the check report, problems go to stderr.

    Hooks run inside "git commit", so stderr is what the user sees
    even when stdout is redirected.
    """
    if len(in_logger.handlers) == 0:
        console_handler_base = logging.StreamHandler(sys.stdout)
        console_handler_base.setFormatter(logging.Formatter("%(message)s"))
        console_handler_base.addFilter(LevelFilter(up=logging.WARNING))
        in_logger.addHandler(console_handler_base)

        console_handler_err = logging.StreamHandler(sys.stderr)
        console_handler_err.setFormatter(logging.Formatter(get_error_format(sys.stderr)))
        console_handler_err.addFilter(LevelFilter(down=logging.INFO))
        in_logger.addHandler(console_handler_err)

    in_logger.setLevel(level)


def set_verbose(verbose: bool):
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = logging.getLogger("GoHooks")
setup_logger(logger)
