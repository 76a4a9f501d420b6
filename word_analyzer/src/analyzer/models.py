from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional

@dataclass(frozen=True)
class MatchResult:
    value: Optional[str]      # closest by character sum, None for an empty word list
    lexical: str              # closest word >= query, "" when there is none

    def to_dict(self) -> dict:
        return asdict(self)
