"""Seedable random source with named context streams.

Each context ("init", "selection", "crossover", "mutation", ...) gets its own
``random.Random`` derived from the manager seed, so drawing more values in one
context never shifts the sequence seen by another.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Any


class RNGManager:
    """Owns every random stream used by a run."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(32)
        self.seed = int(seed)
        self._contexts: dict[str, random.Random] = {}

    def _derive_seed(self, context: str) -> int:
        digest = hashlib.sha256(f"{self.seed}:{context}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")

    def get_context_rng(self, context: str) -> random.Random:
        rng = self._contexts.get(context)
        if rng is None:
            rng = random.Random(self._derive_seed(context))
            self._contexts[context] = rng
        return rng

    def get_state(self) -> dict[str, Any]:
        """Snapshot all context streams created so far."""
        return {
            'seed': self.seed,
            'contexts': {name: rng.getstate() for name, rng in self._contexts.items()},
        }

    def set_state(self, state: dict[str, Any]) -> None:
        """Restore a snapshot taken by :meth:`get_state`.

        Contexts created after the snapshot are dropped so they restart from
        their derived seed.
        """
        self.seed = int(state['seed'])
        contexts = state.get('contexts', {})
        self._contexts = {}
        for name, rng_state in contexts.items():
            rng = random.Random()
            rng.setstate(rng_state)
            self._contexts[name] = rng


__all__ = ["RNGManager"]
