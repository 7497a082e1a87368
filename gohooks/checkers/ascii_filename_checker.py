# Correct symbols Checks

import re
from typing import Sequence

from gohooks.checkers.base import Checker
from gohooks.models import CheckResult

ASCII_FILENAME_LABEL = "Executing non ASCII filenames check on all files ..."
NON_PRINTABLE_ASCII_REGEX = re.compile("[^ -~]")


class AsciiFilenameChecker(Checker):

    label = ASCII_FILENAME_LABEL

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        bad_paths = [path for path in paths if NON_PRINTABLE_ASCII_REGEX.search(path)]
        if bad_paths:
            result.diagnostics.append("Affected files:")
            result.diagnostics.extend(bad_paths)
        return result
