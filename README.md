# qqevol

`qqevol` simulates the time evolution of a quantum system with `D` states
(1 to 4) under an external driving field. The state vector is integrated with
a fourth-order Runge–Kutta scheme and renormalised after every step.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

Describe the simulation in a JSON file, then run:

```
qqevol input.json
```

The program prints one line to standard output for the initial state, then
one every `Nprint` steps and one for the last step. Each line holds the time,
the envelope value and every state amplitude written as `re+imj`, separated
by spaces (numbers with six significant digits).

If the file is missing, cannot be opened, is not valid JSON, or the input is
incomplete or malformed, a message goes to standard error and the program
exits with status 1.

### Input fields

These fields are always required:

| field      | type    | meaning                                   |
|------------|---------|-------------------------------------------|
| `prefix`   | string  | run label (checked, not otherwise used)   |
| `qbmode`   | string  | must be `"off"`                           |
| `envelope` | string  | envelope shape (see below)                |
| `Dstates`  | integer | number of states, 1–4                     |
| `ti`, `tf` | number  | start and end time                        |
| `Nstep`    | integer | number of integration steps               |
| `Nprint`   | integer | output stride                             |
| `psi`      | array   | initial amplitudes (real), length `Dstates` |
| `wl`       | array   | level energies, length `Dstates`          |
| `wr`       | matrix  | coupling matrix, `Dstates` × `Dstates`    |
| `w1`       | number  | carrier frequency of the first pulse      |

Each envelope needs its own extra fields:

| envelope         | extra fields checked                           |
|------------------|------------------------------------------------|
| `off`            | none                                           |
| `const`          | `F1`                                           |
| `impulse`        | `F1`, `t1`, `t2`                               |
| `gauss`          | `F1`, `t1`, `sigma1`                           |
| `double_impulse` | `F1`, `t1`, `t2`, `w2`, `t3`, `t4`, `F2`       |
| `double_gauss`   | `F1`, `t1`, `w2`, `F2`, `sigma2`               |

`double_gauss` also reads `sigma1` and `t2`; these are not checked, so they
must be supplied as well. The envelopes with two pulses use `w2` as the
carrier frequency of the second pulse.

### Envelopes

- `off`: zero field.
- `const`: constant strength `F1`.
- `impulse`: `F1` for `t1 ≤ t ≤ t2`, zero elsewhere.
- `gauss`: `F1 / (√(2π)·sigma1) · exp(−((t − t1)·10⁶ / sigma1)² / 2)`.
- `double_impulse`: `F1` on `[t1, t2]` and `F2` on `[t3, t4]`; outside
  `[t3, t4]` the first pulse is cleared as well.
- `double_gauss`: two Gaussians, `(F1, t1, sigma1)` and `(F2, t2, sigma2)`.

The coupling matrix element at time `t` is
`−i · env(t) · wr[i][j] · exp(i (wl[i] − wl[j]) t / HBAR) · cos(w1 t)`, with
`HBAR = 6.582119569e-13` (`qqevol.potentials.HBAR`). Two-pulse envelopes add
the same term for the second pulse at `w2`.

### Example

```json
{
  "prefix": "run1",
  "qbmode": "off",
  "envelope": "gauss",
  "Dstates": 2,
  "ti": 0.0,
  "tf": 1e-6,
  "Nstep": 1000,
  "Nprint": 100,
  "psi": [1.0, 0.0],
  "wl": [0.0, 1e-6],
  "wr": [[0.0, 1.0], [1.0, 0.0]],
  "w1": 1e7,
  "F1": 1.0,
  "t1": 5e-7,
  "sigma1": 0.1
}
```

## Library use

```python
from qqevol.cli import load_input, run

params = load_input("input.json")
for sample in run(params):
    print(sample.t, sample.envelope, sample.psi)
    print(sample.format())
```

- `qqevol.cli.load_input(path)` reads and decodes the JSON file.
- `qqevol.cli.select_simulation(params)` validates the input and returns the
  simulation, potential and envelope functions it asks for.
- `qqevol.cli.run(params)` validates and runs, returning a list of
  `qqevol.algorithms.Sample` objects (`t`, `envelope`, `psi`).
- `qqevol.algorithms.evolve_rk4(params, potential, envelope)` runs the
  integration directly, without validation.
- `qqevol.validation.check_header` and `qqevol.validation.validate_fields`
  raise `qqevol.validation.InputError` if the input is incomplete or
  malformed.
- `qqevol.envelopes` holds the envelope functions; `qqevol.potentials` holds
  `update_potential` and `update_potential2`.

## What it does not do

The results are only printed to standard output: nothing is written to files
(the `prefix` field is checked but not used), and there is no plotting.
`qbmode` `"on"` is rejected as unsupported.