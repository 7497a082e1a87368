import sys
from typing import Optional, TextIO

from gohooks.console_color import status_text
from gohooks.models import CheckResult

DEFAULT_LABEL_WIDTH = 70


class Reporter:
    """Prints "<label padded>OK" or "<label padded>ERROR" followed by the detail."""

    def __init__(self, stream: Optional[TextIO] = None, label_width: int = DEFAULT_LABEL_WIDTH):
        self.stream = stream if stream is not None else sys.stdout
        self.label_width = label_width

    def write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def start(self, label: str):
        self.write(f"{label:<{self.label_width}}")

    def finish(self, result: CheckResult):
        self.write(status_text(result.passed) + "\n")
        if not result.passed:
            self.write(result.detail + "\n")

    def files(self, paths):
        self.write("Files which will be examined:\n{}\n\n".format("\n".join(paths)))
