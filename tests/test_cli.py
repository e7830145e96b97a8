import json

import pytest

from qqevol import envelopes
from qqevol.cli import load_input, main, run, select_simulation
from qqevol.potentials import update_potential, update_potential2
from qqevol.validation import InputError


def _params(**overrides):
    params = {
        "prefix": "run",
        "qbmode": "off",
        "envelope": "off",
        "Dstates": 2,
        "ti": 0.0,
        "tf": 1.0,
        "Nstep": 4,
        "Nprint": 2,
        "psi": [1.0, 0.0],
        "wl": [0.0, 1.0],
        "wr": [[0.0, 1.0], [1.0, 0.0]],
        "w1": 0.0,
    }
    params.update(overrides)
    return params


def _write(tmp_path, params):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(params), encoding="utf-8")
    return str(path)


def test_load_input_round_trip(tmp_path):
    params = _params()
    assert load_input(_write(tmp_path, params)) == params


def test_load_input_missing_file(tmp_path):
    missing = str(tmp_path / "absent.json")
    with pytest.raises(InputError, match="Impossible to open the input file"):
        load_input(missing)


def test_load_input_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InputError):
        load_input(str(path))


def test_select_single_pulse():
    params = _params(envelope="impulse", F1=1.0, t1=0.0, t2=0.5)
    _, potential, envelope = select_simulation(params)
    assert potential is update_potential
    assert envelope is envelopes.impulse


def test_select_double_gauss():
    params = _params(envelope="double_gauss", F1=1.0, t1=0.0, w2=0.0, F2=1.0, sigma2=1.0)
    _, potential, envelope = select_simulation(params)
    assert potential is update_potential2
    assert envelope is envelopes.double_gauss


def test_unsupported_envelope():
    with pytest.raises(InputError, match="The specified envelope 'square' is not supported!"):
        select_simulation(_params(envelope="square"))


def test_unsupported_qbmode():
    with pytest.raises(InputError, match="The specified qbmode 'maybe' is not supported!"):
        select_simulation(_params(qbmode="maybe"))


def test_unsupported_dimension():
    with pytest.raises(InputError, match="The specified dimension '5' is not supported!"):
        select_simulation(_params(Dstates=5))


def test_envelope_fields_required():
    with pytest.raises(InputError, match="Missing mandatory input data 'F1'"):
        select_simulation(_params(envelope="const"))


def test_run_without_field_keeps_state():
    samples = run(_params())
    assert len(samples) == 3
    assert [s.t for s in samples] == [0.0, 0.5, 1.0]
    assert samples[-1].psi == (1 + 0j, 0j)


def test_run_saves_last_step():
    samples = run(_params(Nstep=5))
    assert len(samples) == 4
    assert samples[-1].t == pytest.approx(1.0)


def test_run_constant_field_keeps_norm():
    params = _params(envelope="const", F1=1.0, tf=1e-9, wl=[0.0, 1e-6])
    samples = run(params)
    for sample in samples:
        assert sum(abs(c) ** 2 for c in sample.psi) == pytest.approx(1.0)
    assert abs(samples[-1].psi[1]) > 0.0


def test_main_prints_samples(tmp_path, capsys):
    assert main([_write(tmp_path, _params())]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [s.format() for s in run(_params())]
    assert lines[0] == "0 0 1+0j 0+0j "


def test_main_missing_argument(capsys):
    assert main([]) == 1
    assert "Missing mandatory argument: json input data file!" in capsys.readouterr().err


def test_main_reports_input_error(tmp_path, capsys):
    assert main([_write(tmp_path, _params(Dstates=5))]) == 1
    captured = capsys.readouterr()
    assert "The specified dimension '5' is not supported!" in captured.err
    assert captured.out == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "Impossible to open the input file" in capsys.readouterr().err