"""Run reports and determinism signatures.

``population_report`` captures everything needed to compare two runs;
``determinism_signature`` hashes a report so seeded runs can be checked for
bit-for-bit reproducibility.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

REPORT_SCHEMA_VERSION = 1


def population_report(population: Any) -> dict[str, Any]:
    """Build a JSON-serializable report of the current population state."""
    return {
        'schema_version': REPORT_SCHEMA_VERSION,
        'generation': population.generation,
        'evaluated': population.is_evaluated,
        'seed': population.rng_manager.seed,
        'parameters': population.params.to_dict(),
        'selection_underflow': population.selection_underflow,
        'individuals': [
            {'rank': view.rank, 'fitness': view.fitness, 'genes': list(view.genes)}
            for view in population.read()
        ],
        'metrics': [dict(m) for m in population.history.metrics],
    }


def determinism_signature(report: dict[str, Any]) -> str:
    """SHA-256 of the canonical JSON encoding of ``report``."""
    payload = json.dumps(report, sort_keys=True, separators=(',', ':'), default=str)
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


def assert_determinism_equivalence(reports: list[dict[str, Any]]) -> None:
    """Raise AssertionError unless every report has the same signature."""
    signatures = {determinism_signature(r) for r in reports}
    if len(signatures) > 1:
        raise AssertionError(f"Determinism drift: {len(signatures)} distinct signatures")


__all__ = [
    "REPORT_SCHEMA_VERSION",
    "population_report",
    "determinism_signature",
    "assert_determinism_equivalence",
]
