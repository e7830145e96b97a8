"""Command line entry point: read a JSON input file and run the simulation."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from qqevol import envelopes
from qqevol.algorithms import Potential, Sample, evolve_rk4
from qqevol.envelopes import Envelope
from qqevol.potentials import update_potential, update_potential2
from qqevol.validation import FieldRequirement, FieldType, InputError, check_header, validate_fields

Simulation = Callable[[Mapping[str, Any], Potential, Envelope], "list[Sample]"]

_F = FieldType.FLOAT

SIMULATIONS: dict[str, Simulation] = {
    "off": evolve_rk4,
    "on": evolve_rk4,
}

ENVELOPES: dict[str, tuple[Envelope, tuple[FieldRequirement, ...]]] = {
    "off": (envelopes.off, ()),
    "const": (envelopes.constant, (FieldRequirement("F1", _F),)),
    "impulse": (
        envelopes.impulse,
        (FieldRequirement("F1", _F), FieldRequirement("t1", _F), FieldRequirement("t2", _F)),
    ),
    "gauss": (
        envelopes.gauss,
        (FieldRequirement("F1", _F), FieldRequirement("t1", _F), FieldRequirement("sigma1", _F)),
    ),
    "double_impulse": (
        envelopes.double_impulse,
        tuple(FieldRequirement(name, _F) for name in ("F1", "t1", "t2", "w2", "t3", "t4", "F2")),
    ),
    "double_gauss": (
        envelopes.double_gauss,
        tuple(FieldRequirement(name, _F) for name in ("F1", "t1", "w2", "F2", "sigma2")),
    ),
}

POTENTIALS: dict[str, Potential] = {
    "off:off": update_potential,
    "const:off": update_potential,
    "impulse:off": update_potential,
    "gauss:off": update_potential,
    "double_impulse:off": update_potential2,
    "double_gauss:off": update_potential2,
}

BASE_FIELDS: tuple[FieldRequirement, ...] = (
    FieldRequirement("prefix", FieldType.STRING),
    FieldRequirement("qbmode", FieldType.STRING),
    FieldRequirement("envelope", FieldType.STRING),
    FieldRequirement("Dstates", FieldType.INT),
    FieldRequirement("ti", _F),
    FieldRequirement("tf", _F),
    FieldRequirement("Nstep", FieldType.INT),
    FieldRequirement("Nprint", FieldType.INT),
    FieldRequirement("psi", FieldType.ARRAY),
    FieldRequirement("wl", FieldType.ARRAY),
    FieldRequirement("wr", FieldType.MATRIX),
    FieldRequirement("w1", _F),
)

DIMENSIONS = frozenset({1, 2, 3, 4})


def load_input(path: str) -> Any:
    """Read and decode the JSON input file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise InputError(f"Impossible to open the input file '{path}'!") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid JSON in input file '{path}': {exc}") from exc


def select_simulation(params: Any) -> tuple[Simulation, Potential, Envelope]:
    """Validate the input and pick the simulation, potential and envelope it asks for."""
    qbmode, envelope, dimension = check_header(params)

    if qbmode not in SIMULATIONS:
        raise InputError(f"The specified qbmode '{qbmode}' is not supported!")
    if envelope not in ENVELOPES:
        raise InputError(f"The specified envelope '{envelope}' is not supported!")
    if dimension not in DIMENSIONS:
        raise InputError(f"The specified dimension '{dimension}' is not supported!")

    key = f"{envelope}:{qbmode}"
    if key not in POTENTIALS:
        raise InputError("The specified combination of envelope function and qbmode is not supported!")

    envelope_function, extra_fields = ENVELOPES[envelope]
    validate_fields(params, BASE_FIELDS + extra_fields)
    return SIMULATIONS[qbmode], POTENTIALS[key], envelope_function


def run(params: Any) -> list[Sample]:
    """Validate the input and run the simulation it describes."""
    simulation, potential, envelope = select_simulation(params)
    return simulation(params, potential, envelope)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by the JSON file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Missing mandatory argument: json input data file!", file=sys.stderr)
        return 1
    try:
        samples = run(load_input(args[0]))
    except InputError as exc:
        print(exc, file=sys.stderr)
        return 1
    for sample in samples:
        print(sample.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())