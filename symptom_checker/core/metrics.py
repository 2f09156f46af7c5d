"""
Prometheus metrics for AI provider calls.
"""

from prometheus_client import Counter, Histogram

ANALYSES_TOTAL = Counter(
    "symptom_analyses_total",
    "Symptom analyses sent to the AI provider",
    ["outcome"],
)

ANALYSIS_DURATION = Histogram(
    "symptom_analysis_duration_seconds",
    "Time spent waiting for the AI provider and parsing its answer",
)
