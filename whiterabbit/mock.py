from __future__ import annotations

import base64
import hashlib
import math
import random
import re
import sys
from array import array
from collections import OrderedDict
from threading import Lock

VOCAB_SIZE = 151_936
_PIECE_RE = re.compile(r"\w+|[^\w\s]")


def mock_embedding(dimensions: int = 384, rng: random.Random | None = None) -> list[float]:
    rng = rng or random
    vector = [rng.random() - 0.5 for _ in range(dimensions)]
    norm = math.sqrt(sum(v * v for v in vector)) or 1.0
    return [v / norm for v in vector]


def encode_base64(vector: list[float]) -> str:
    packed = array("f", vector)
    if sys.byteorder == "big":
        packed.byteswap()
    return base64.b64encode(packed.tobytes()).decode("ascii")


def count_words(text: str) -> int:
    return len(text.split())


class MockTokenizer:
    """Maps words to stable hashed ids and remembers recent ids for detokenizing."""

    def __init__(self, vocab_size: int = VOCAB_SIZE, memory: int = 65536):
        self.vocab_size = vocab_size
        self.memory = memory
        self._seen: OrderedDict[int, str] = OrderedDict()
        self.lock = Lock()

    def token_id(self, piece: str) -> int:
        digest = hashlib.blake2b(piece.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "little") % self.vocab_size

    def encode(self, text: str) -> list[int]:
        pieces = _PIECE_RE.findall(text)
        ids = [self.token_id(piece) for piece in pieces]
        with self.lock:
            for token, piece in zip(ids, pieces):
                self._seen[token] = piece
                self._seen.move_to_end(token)
            while len(self._seen) > self.memory:
                self._seen.popitem(last=False)
        return ids

    def decode(self, ids: list[int]) -> str:
        out = ""
        for token in ids:
            piece = self._seen.get(token, f"<|{token}|>")
            if out and piece[0].isalnum():
                out += " "
            out += piece
        return out
