"""Time envelopes of the external driving field.

Every envelope takes the input parameters, three instants
``(t, t + dt/2, t + dt)`` and the secondary envelope values left by the
previous call. It returns ``(env, env2)``: the primary and secondary
envelope values at the three instants. Single-pulse envelopes pass the
secondary values through unchanged.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from typing import Any

Triple = tuple[float, float, float]
Envelope = Callable[[Mapping[str, Any], Sequence[float], Sequence[float]], "tuple[Triple, Triple]"]

_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def _triple(values: Sequence[float]) -> Triple:
    a, b, c = (float(v) for v in values)
    return (a, b, c)


def _square(strength: float, start: float, stop: float, times: Sequence[float]) -> Triple:
    return _triple(0.0 if (t < start or t > stop) else strength for t in times)


def _gaussian(strength: float, centre: float, sigma: float, t: float) -> float:
    scaled = (t - centre) * 1.0e6 / sigma
    return strength / (_SQRT_TWO_PI * sigma) * math.exp(-(scaled**2) / 2.0)


def off(params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]) -> tuple[Triple, Triple]:
    """No field: the primary envelope is zero."""
    return (0.0, 0.0, 0.0), _triple(previous)


def constant(params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]) -> tuple[Triple, Triple]:
    """Constant field of strength ``F1``."""
    strength = float(params["F1"])
    return (strength, strength, strength), _triple(previous)


def impulse(params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]) -> tuple[Triple, Triple]:
    """Square pulse of strength ``F1`` between ``t1`` and ``t2`` inclusive."""
    strength = float(params["F1"])
    start = float(params["t1"])
    stop = float(params["t2"])
    return _square(strength, start, stop, times), _triple(previous)


def double_impulse(
    params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]
) -> tuple[Triple, Triple]:
    """Two square pulses: ``F1`` on ``[t1, t2]`` and ``F2`` on ``[t3, t4]``.

    Outside the second window the primary envelope is cleared and the
    secondary one keeps its previous value; inside it the secondary
    envelope becomes ``F2``.
    """
    first = float(params["F1"])
    t1 = float(params["t1"])
    t2 = float(params["t2"])
    second = float(params["F2"])
    t3 = float(params["t3"])
    t4 = float(params["t4"])

    env = list(_square(first, t1, t2, times))
    env2 = list(_triple(previous))
    for k, t in enumerate(times):
        if t < t3 or t > t4:
            env[k] = 0.0
        else:
            env2[k] = second
    return _triple(env), _triple(env2)


def gauss(params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]) -> tuple[Triple, Triple]:
    """Gaussian pulse of area ``F1`` centred on ``t1``, width ``sigma1`` in microseconds."""
    strength = float(params["F1"])
    centre = float(params["t1"])
    sigma = float(params["sigma1"])
    return _triple(_gaussian(strength, centre, sigma, t) for t in times), _triple(previous)


def double_gauss(
    params: Mapping[str, Any], times: Sequence[float], previous: Sequence[float]
) -> tuple[Triple, Triple]:
    """Two Gaussian pulses: ``(F1, t1, sigma1)`` primary and ``(F2, t2, sigma2)`` secondary."""
    first = float(params["F1"])
    t1 = float(params["t1"])
    sigma1 = float(params["sigma1"])
    second = float(params["F2"])
    t2 = float(params["t2"])
    sigma2 = float(params["sigma2"])

    env = _triple(_gaussian(first, t1, sigma1, t) for t in times)
    env2 = _triple(_gaussian(second, t2, sigma2, t) for t in times)
    return env, env2