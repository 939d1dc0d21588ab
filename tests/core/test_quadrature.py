import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import numpy as np
import pytest

from qstates.core.quadrature import DEFAULT_QUADRATURE, QuadratureOptions, adaptive_integrate, average_over_phase
from qstates.errors import QuadratureDidNotConverge

TIGHT = QuadratureOptions(rel_tol=1e-10)


def test_default_options():
    assert DEFAULT_QUADRATURE.rel_tol == pytest.approx(0.01)
    assert DEFAULT_QUADRATURE.abs_tol == 0
    assert DEFAULT_QUADRATURE.max_evals == 10**7
    assert DEFAULT_QUADRATURE.order == 7
    assert DEFAULT_QUADRATURE.norm == "2"
    assert DEFAULT_QUADRATURE.strict
    assert DEFAULT_QUADRATURE.nodes == 15
    assert DEFAULT_QUADRATURE.limit == 10**7 // 15
    assert replace(DEFAULT_QUADRATURE, order=10).nodes == 21


@pytest.mark.parametrize(
    "kwargs",
    [
        {"order": 5},
        {"rel_tol": -1.0},
        {"rel_tol": 0.0, "abs_tol": 0.0},
        {"max_evals": 10},
        {"norm": "1"},
    ],
)
def test_invalid_options(kwargs: dict):
    with pytest.raises(ValueError):
        QuadratureOptions(**kwargs)


def test_integrate_polynomial():
    value, error = adaptive_integrate(lambda x: np.array([[x, x**2]]), 0.0, 1.0, TIGHT)
    assert value.shape == (1, 2)
    assert np.allclose(value, [[0.5, 1 / 3]], atol=1e-12)
    assert error < 1e-9


@pytest.mark.parametrize("order", [7, 10])
def test_integrate_complex(order: int):
    options = replace(TIGHT, order=order)
    value, _ = adaptive_integrate(lambda x: np.exp(1j * x) * np.ones((2, 2)), 0.0, np.pi / 2, options)
    assert np.allclose(value, (1 + 1j) * np.ones((2, 2)), atol=1e-10)


def test_integrate_max_norm():
    options = replace(TIGHT, norm="max")
    value, _ = adaptive_integrate(lambda x: np.array([np.sin(x), np.cos(x)]), 0.0, np.pi, options)
    assert np.allclose(value, [2.0, 0.0], atol=1e-10)


def test_integrate_workers():
    with ThreadPoolExecutor(max_workers=2) as executor:
        options = replace(TIGHT, workers=executor.map)
        value, _ = adaptive_integrate(lambda x: np.array([[np.exp(x)]]), 0.0, 1.0, options)
    assert value[0, 0] == pytest.approx(np.e - 1, abs=1e-10)


def test_not_converged_strict():
    options = QuadratureOptions(rel_tol=1e-12, max_evals=15)
    assert options.limit == 1

    with pytest.raises(QuadratureDidNotConverge) as exc_info:
        adaptive_integrate(lambda x: np.array([[np.abs(x - 0.3)]]), 0.0, 1.0, options)
    err = exc_info.value
    assert isinstance(err, RuntimeError)
    assert err.estimate.shape == (1, 1)
    assert err.neval >= 15
    assert err.error > 0
    assert err.message


def test_not_converged_lenient(caplog: pytest.LogCaptureFixture):
    options = QuadratureOptions(rel_tol=1e-12, max_evals=15, strict=False)
    with caplog.at_level(logging.WARNING, logger="qstates"):
        value, error = adaptive_integrate(lambda x: np.array([[np.abs(x - 0.3)]]), 0.0, 1.0, options)
    assert value[0, 0] == pytest.approx(0.29, abs=1e-2)
    assert error > 0
    assert "did not converge" in caplog.text


def test_average_over_phase():
    result = average_over_phase(lambda phi: np.array([[np.cos(phi) ** 2, np.exp(1j * phi)]]))
    assert result.dtype == np.complex128
    assert np.allclose(result, [[0.5, 0.0]], atol=1e-8)
    assert np.all(result.imag == 0)


@pytest.mark.parametrize("start", [-np.pi, 0.0, 1.0])
def test_average_over_phase_start(start: float):
    result = average_over_phase(lambda phi: np.array([[np.sin(phi + 0.2) ** 2]]), start=start)
    assert result[0, 0].real == pytest.approx(0.5, abs=1e-8)


def test_average_over_phase_imaginary_residue(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="qstates"):
        result = average_over_phase(lambda phi: np.array([[1 + 1j]]))
    assert result[0, 0].real == pytest.approx(1.0)
    assert "imaginary part" in caplog.text


def test_average_over_phase_no_residue_warning(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="qstates"):
        average_over_phase(lambda phi: np.array([[1.0, np.exp(2j * phi)]]))
    assert caplog.text == ""
