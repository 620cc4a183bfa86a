"""
Statistics Collector.

Running counters of what the normalization pipeline changed, plus ratios
derived from them. Ratios are relative to ``total_processed`` and are 0 when
nothing has been processed yet.
"""

from dataclasses import dataclass, fields
from typing import Dict

from .schemas.configuration import StatisticsCounters


@dataclass
class PipelineTrace:
    """Corrections made while processing one transcript."""
    dialect_words_found: int = 0
    slang_or_liaison_corrections: int = 0
    context_matches: int = 0
    grammar_corrections: int = 0
    confidence_boosts: int = 0
    replacements_made: int = 0


# ratio name -> counter it divides by total_processed
RATIOS = {
    "dialect_coverage": "dialect_words_found",
    "replacement_ratio": "replacements_made",
    "context_accuracy": "context_matches",
    "grammar_correction_rate": "grammar_corrections",
    "slang_or_liaison_rate": "slang_or_liaison_corrections",
    "boost_rate": "confidence_boosts",
}


class StatisticsCollector:

    def __init__(self, counters: StatisticsCounters = None):
        self.restore(counters or StatisticsCounters())

    def record(self, trace: PipelineTrace) -> None:
        self.total_processed += 1
        for field in fields(trace):
            setattr(self, field.name, getattr(self, field.name) + getattr(trace, field.name))

    def reset(self) -> None:
        self.restore(StatisticsCounters())

    def restore(self, counters: StatisticsCounters) -> None:
        for name, value in counters.model_dump().items():
            setattr(self, name, value)

    def snapshot(self) -> StatisticsCounters:
        return StatisticsCounters(
            **{name: getattr(self, name) for name in StatisticsCounters.model_fields}
        )

    def report(self) -> Dict[str, float]:
        """Counters plus derived ratios."""
        report = self.snapshot().model_dump()
        total = self.total_processed
        for ratio, counter in RATIOS.items():
            report[ratio] = report[counter] / total if total else 0.0
        return report
