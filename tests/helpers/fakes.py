from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from hydrogen_backup.errors import ProcessRunError


@dataclass
class FakeRunner:
    """Records command lines instead of starting processes."""

    fail: bool = False
    calls: List[List[str]] = field(default_factory=list)

    def run(self, args) -> None:
        self.calls.append(list(args))
        if self.fail:
            raise ProcessRunError(list(args), returncode=2)
