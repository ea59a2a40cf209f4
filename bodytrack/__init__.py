"""
BODYTRACK v1.0 — Body-Composition Progress Engine

A deterministic, interpretable analytics engine for weight-management
consultations. Takes a member's dated scale readings and produces a
progress summary between the first and last reading of a window.

Architecture:
    config          — All bands, weights, and rounding (single source of truth)
    records         — Record type, validation, JSON loading, date filtering
    ranges          — Analysis window filters, resolved by the caller
    composition     — Fat-mass / lean-mass decomposition
    scoring         — Success-rate sub-scores and rounding
    recommendations — Declarative advice rules
    interpret       — Display bands derived from a result
    constitution    — Five-type constitution profile
    pipeline        — Orchestration: load → filter → derive → score → report

Public API:
    analyze(filepath)                  → CLI mode
    analyze_records(records)           → UI / backend mode
    analyze_range(records, f, day)     → resolve a RangeFilter, then analyze
    composition_trend(records)         → per-record fat / lean mass
    generate_report(result)            → formatted report
"""

from bodytrack.composition import compute_composition, trend_window
from bodytrack.constitution import (
    constitution_changes,
    constitution_history,
    dominant_type,
    rank_types,
)
from bodytrack.interpret import interpret
from bodytrack.pipeline import (
    AnalysisResult,
    analyze,
    analyze_range,
    analyze_records,
    composition_trend,
    generate_report,
)
from bodytrack.ranges import PRESET_WINDOWS, AllRecords, RollingDays, Since, parse_range
from bodytrack.records import BiometricRecord, load_records

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "AllRecords",
    "BiometricRecord",
    "PRESET_WINDOWS",
    "RollingDays",
    "Since",
    "analyze",
    "analyze_range",
    "analyze_records",
    "composition_trend",
    "compute_composition",
    "constitution_changes",
    "constitution_history",
    "dominant_type",
    "generate_report",
    "interpret",
    "load_records",
    "parse_range",
    "rank_types",
    "trend_window",
]
