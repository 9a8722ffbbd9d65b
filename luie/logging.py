import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


def logger():
    return logging.getLogger("luie")


def configure_logger(debug: bool, rich: bool = True):
    class BackTickHighlighter(RegexHighlighter):
        highlights = [r"`(?P<bold>[^`]*)`"]

    level = logging.DEBUG if debug else logging.INFO
    if rich:
        handler: logging.Handler = RichHandler(
            show_path=debug, highlighter=BackTickHighlighter())
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stdout)

    log = logger()
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(level)
    log.addHandler(handler)
    return log
