"""Fourth-order Runge-Kutta time evolution of the state vector."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from qqevol.envelopes import Envelope
from qqevol.potentials import PotentialStep

Potential = Callable[
    [Mapping[str, Any], int, float, float, Sequence[float], Sequence[Sequence[float]], Envelope, Sequence[float]],
    PotentialStep,
]


def format_number(value: float) -> str:
    """Render a float the way a default C++ output stream does (six significant digits)."""
    return "%g" % value


@dataclass(frozen=True)
class Sample:
    """One saved point of the evolution."""

    t: float
    envelope: float
    psi: tuple[complex, ...]

    def format(self) -> str:
        """Output line: time, envelope, then each amplitude as ``re+imj``, space separated."""
        parts = [format_number(self.t), format_number(self.envelope)]
        parts.extend(f"{format_number(c.real)}+{format_number(c.imag)}j" for c in self.psi)
        return " ".join(parts) + " "


def _state(psi: np.ndarray) -> tuple[complex, ...]:
    return tuple(complex(c) for c in psi)


def evolve_rk4(params: Mapping[str, Any], potential: Potential, envelope: Envelope) -> list[Sample]:
    """Integrate the state from ``ti`` to ``tf`` in ``Nstep`` steps, saving every ``Nprint``.

    The last step is always saved. After the first step the instant of step
    ``i`` is taken as ``i * dt``.
    """
    nstep = int(params["Nstep"])
    dim = int(params["Dstates"])
    nprint = int(params["Nprint"])
    ti = float(params["ti"])
    tf = float(params["tf"])

    psi = np.asarray(params["psi"], dtype=float)[:dim].astype(complex)
    wl = np.asarray(params["wl"], dtype=float)[:dim]
    wr = np.asarray(params["wr"], dtype=float)[:dim, :dim]

    dt = (tf - ti) / nstep
    env2 = (0.0, 0.0, 0.0)

    step = potential(params, dim, ti, dt, wl, wr, envelope, env2)
    env2 = step.env2
    samples = [Sample(ti, step.env[2] + step.env2[2], _state(psi))]

    for i in range(1, nstep + 1):
        start = ti if i == 1 else (i - 1) * dt
        step = potential(params, dim, start, dt, wl, wr, envelope, env2)
        env2 = step.env2
        v0, v1, v2 = step.matrices

        k0 = v0 @ psi
        k1 = v1 @ (psi + 0.5 * dt * k0)
        k2 = v1 @ (psi + 0.5 * dt * k1)
        k3 = v2 @ (psi + dt * k2)
        psi = psi + (dt / 6.0) * (k0 + 2.0 * k1 + 2.0 * k2 + k3)

        with np.errstate(all="ignore"):
            psi = psi / np.sqrt(np.vdot(psi, psi).real)

        if i % nprint == 0 or i == nstep:
            samples.append(Sample(i * dt, step.env[2], _state(psi)))

    return samples