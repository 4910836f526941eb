from __future__ import annotations

from typing import NamedTuple


class GenerationResult(NamedTuple):
    text: str
    hit_max_length: bool
