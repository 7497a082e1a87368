from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel


class CheckResult(BaseModel):
    label: str
    diagnostics: List[str] = []

    @property
    def passed(self) -> bool:
        return len(self.diagnostics) == 0

    @property
    def detail(self) -> str:
        return "\n".join(self.diagnostics)


@dataclass(frozen=True)
class StagedFiles:
    paths: Tuple[str, ...]
    go_extension: str = ".go"
    shell_extension: str = ".sh"

    def __bool__(self):
        return len(self.paths) > 0

    @property
    def go_files(self) -> List[str]:
        return [path for path in self.paths if path.endswith(self.go_extension)]

    @property
    def shell_files(self) -> List[str]:
        return [path for path in self.paths if path.endswith(self.shell_extension)]
