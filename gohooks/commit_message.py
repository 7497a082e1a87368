import re
from typing import Pattern

from gohooks import logger
from gohooks.config import HooksConfig
from gohooks.models import CheckResult

COMMIT_MESSAGE_LABEL = "Executing commit message check ..."
COMMENT_PREFIX = "#"


def get_subject_pattern(config: HooksConfig) -> Pattern:
    types = "|".join(re.escape(commit_type) for commit_type in config.commit_types)
    scope = f"\\(.{{{config.scope_min_length},{config.scope_max_length}}}\\):"
    return re.compile(f"^({types})({scope}|:) .*[^. ]$")


def strip_comments(message: str) -> str:
    """Drop comment lines the way git does before it records a message."""
    lines = [line for line in message.split("\n") if not line.startswith(COMMENT_PREFIX)]
    return "\n".join(lines).strip("\n")


def validate_commit_message(message: str, config: HooksConfig) -> CheckResult:
    """Check the message against the subject length, subject format and
    blank second line rules, stopping at the first one violated.
    """
    result = CheckResult(label=COMMIT_MESSAGE_LABEL)
    lines = message.split("\n")
    subject = lines[0] if lines else ""
    logger.debug(f"Subject: {subject!r}")

    if len(subject) > config.subject_max_length:
        result.diagnostics.append(
            f'Commit message "{message}" must have maximum of {config.subject_max_length} characters')
        return result

    pattern = get_subject_pattern(config)
    if pattern.match(subject) is None:
        result.diagnostics.append(f'Commit message "{message}" must match: {pattern.pattern}')
        return result

    # A message without a second line has nothing to separate
    if len(lines) > 1 and lines[1] != "":
        result.diagnostics.append(f'Commit message "{message}" must have empty second line')

    return result
