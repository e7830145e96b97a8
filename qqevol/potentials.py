"""Interaction matrices of the driven D-state system."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from qqevol.envelopes import Envelope, Triple

HBAR = 6.582119569e-13


@dataclass(frozen=True, eq=False)
class PotentialStep:
    """Matrices at ``t``, ``t + dt/2`` and ``t + dt`` with the envelope values used."""

    matrices: np.ndarray
    env: Triple
    env2: Triple


def _instants(t: float, dt: float) -> Triple:
    return (t, t + 0.5 * dt, t + dt)


def _coupling(
    times: Sequence[float], wl: np.ndarray, wr: np.ndarray, strengths: Sequence[float], omega: float
) -> np.ndarray:
    tvec = np.asarray(times, dtype=float)[:, None, None]
    gap = (wl[:, None] - wl[None, :])[None, :, :]
    phase = np.exp((1j / HBAR) * gap * tvec)
    amplitude = np.asarray(strengths, dtype=float)[:, None, None] * np.cos(omega * tvec)
    return -1j * amplitude * wr[None, :, :] * phase


def _levels(dim: int, wl: Sequence[float], wr: Sequence[Sequence[float]]) -> tuple[np.ndarray, np.ndarray]:
    levels = np.asarray(wl, dtype=float)[:dim]
    couplings = np.asarray(wr, dtype=float)[:dim, :dim]
    return levels, couplings


def update_potential(
    params: Mapping[str, Any],
    dim: int,
    t: float,
    dt: float,
    wl: Sequence[float],
    wr: Sequence[Sequence[float]],
    envelope: Envelope,
    env2: Sequence[float],
) -> PotentialStep:
    """Single-frequency potential driven at ``w1`` by the primary envelope."""
    omega = float(params["w1"])
    times = _instants(t, dt)
    env, new_env2 = envelope(params, times, env2)
    levels, couplings = _levels(dim, wl, wr)
    matrices = _coupling(times, levels, couplings, env, omega)
    return PotentialStep(matrices, env, new_env2)


def update_potential2(
    params: Mapping[str, Any],
    dim: int,
    t: float,
    dt: float,
    wl: Sequence[float],
    wr: Sequence[Sequence[float]],
    envelope: Envelope,
    env2: Sequence[float],
) -> PotentialStep:
    """Two-frequency potential: primary envelope at ``w1``, secondary at ``w2``.

    The returned primary envelope carries the secondary value added at ``t + dt``.
    """
    omega1 = float(params["w1"])
    omega2 = float(params["w2"])
    times = _instants(t, dt)
    env, new_env2 = envelope(params, times, env2)
    levels, couplings = _levels(dim, wl, wr)
    matrices = _coupling(times, levels, couplings, env, omega1) + _coupling(
        times, levels, couplings, new_env2, omega2
    )
    combined = (env[0], env[1], env[2] + new_env2[2])
    return PotentialStep(matrices, combined, new_env2)