"""Sub-score mappings and weighted geometric composition.

Every metric is mapped onto [0, 1] (1 = better fit) before composition:

    mad_score  piecewise decay over the Nigrini MAD bands 0.006 / 0.012 / 0.015
    max_score  1 - |max deviation| / 0.10
    p_score    p-value / 0.10
    v_score    1 - Cramér's V / 0.10

``practical_fit`` combines MAD, V and max deviation (weights 0.45 / 0.35 / 0.20).
``significance`` is the p-value score alone, kept apart so statistical
significance on huge samples is never read as practical non-conformity.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterable, Tuple

MAD_CLOSE = 0.006
MAD_ACCEPTABLE = 0.012
MAD_MARGINAL = 0.015

MAX_DEVIATION_SCALE = 0.10
P_VALUE_SCALE = 0.10
CRAMERS_V_SCALE = 0.10

PRACTICAL_FIT_WEIGHTS = {"mad_score": 0.45, "v_score": 0.35, "max_score": 0.20}
SCORE_FLOOR = 1e-12


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def inv_lerp(a: float, b: float, x: float) -> float:
    """Fraction of the way ``x`` lies from ``a`` to ``b``, clamped to [0, 1]."""
    if a == b:
        return 1.0 if x >= b else 0.0
    return clamp01((x - a) / (b - a))


def mad_score(mad: float) -> float:
    if mad <= MAD_CLOSE:
        return 1.0
    if mad <= MAD_ACCEPTABLE:
        return 1.0 - inv_lerp(MAD_CLOSE, MAD_ACCEPTABLE, mad) * 0.35
    if mad <= MAD_MARGINAL:
        return 0.65 - inv_lerp(MAD_ACCEPTABLE, MAD_MARGINAL, mad) * 0.65
    return 0.0


def max_score(max_deviation: float) -> float:
    return 1.0 - clamp01(abs(max_deviation) / MAX_DEVIATION_SCALE)


def p_score(p_value: float) -> float:
    return clamp01(p_value / P_VALUE_SCALE)


def v_score(cramers_v: float) -> float:
    return 1.0 - clamp01(cramers_v / CRAMERS_V_SCALE)


def weighted_geometric_mean(pairs: Iterable[Tuple[float, float]]) -> float:
    """exp(sum(w * ln(v)) / sum(w)); values are clamped to [0, 1] and floored at 1e-12."""
    pairs = list(pairs)
    if not pairs:
        raise ValueError("weighted_geometric_mean requires at least one (value, weight) pair")
    weight_sum = sum(weight for _, weight in pairs)
    if weight_sum <= 0:
        raise ValueError("weights must sum to a positive value")
    log_sum = sum(weight * math.log(max(clamp01(value), SCORE_FLOOR)) for value, weight in pairs)
    return math.exp(log_sum / weight_sum)


@dataclass(frozen=True)
class ScoreSet:
    mad_score: float
    max_score: float
    p_score: float
    v_score: float
    practical_fit: float
    significance: float

    def to_dict(self) -> dict:
        return asdict(self)


def compose_scores(*, mad: float, max_deviation: float, p_value: float, cramers_v: float) -> ScoreSet:
    subs = {
        "mad_score": mad_score(mad),
        "max_score": max_score(max_deviation),
        "p_score": p_score(p_value),
        "v_score": v_score(cramers_v),
    }
    practical = 100.0 * weighted_geometric_mean(
        (subs[name], weight) for name, weight in PRACTICAL_FIT_WEIGHTS.items()
    )
    significance = 100.0 * weighted_geometric_mean([(subs["p_score"], 1.0)])
    return ScoreSet(practical_fit=practical, significance=significance, **subs)


__all__ = [
    "PRACTICAL_FIT_WEIGHTS",
    "ScoreSet",
    "clamp01",
    "compose_scores",
    "inv_lerp",
    "mad_score",
    "max_score",
    "p_score",
    "v_score",
    "weighted_geometric_mean",
]
