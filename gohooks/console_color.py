import sys


class SpecialChar:
    END    = ''
    RED    = ''
    GREEN  = ''


def init_color(stream=sys.stdout):
    """Enable escape codes only when a terminal will render them."""
    if not stream.isatty():
        return
    SpecialChar.END    = '\x1b[0m'
    SpecialChar.RED    = '\x1b[91m'
    SpecialChar.GREEN  = '\x1b[92m'


def add_color(msg, color):
    return "{}{}{}".format(color, msg, SpecialChar.END)


def status_text(passed: bool) -> str:
    if passed:
        return add_color("OK", SpecialChar.GREEN)
    return add_color("ERROR", SpecialChar.RED)


init_color()
