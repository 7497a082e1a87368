import subprocess
from dataclasses import dataclass, field
from typing import List, Optional

from gohooks import logger
from gohooks.utils import GoHooksToolNotFoundError


@dataclass
class ProcessResult:
    command: str
    args: List[str] = field(default_factory=list)
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def output(self) -> str:
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


def run_process(command: str, *args: str, cwd: Optional[str] = None) -> ProcessResult:
    """Run an external tool and capture everything it prints.

    A non-zero exit code is not an error here, callers decide what it means.
    Raises GoHooksToolNotFoundError if the binary cannot be found.
    """
    to_run = [command, *args]
    logger.debug(f"  $ {' '.join(to_run)}")
    try:
        process = subprocess.run(to_run, stdout=subprocess.PIPE, stderr=subprocess.PIPE, cwd=cwd)
    except FileNotFoundError:
        raise GoHooksToolNotFoundError(command)

    return ProcessResult(
        command=command,
        args=list(args),
        stdout=process.stdout.decode("utf-8", errors="replace"),
        stderr=process.stderr.decode("utf-8", errors="replace"),
        returncode=process.returncode,
    )
