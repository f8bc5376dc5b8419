"""
Forward values and local derivative rules of every primitive.
"""

import logging
import math

import numpy as np
import pytest

from scalar_autograd import Value, Op, add, mul, pow, tanh, relu, check_gradient


@pytest.mark.parametrize("a, b", [(2.0, 3.0), (-1.5, 4.0), (0.0, -7.25)])
def test_add_value_and_grads(a, b):
    x, y = Value(a), Value(b)
    out = add(x, y)
    assert out.data == a + b
    out.backward()
    assert x.grad == 1.0
    assert y.grad == 1.0


@pytest.mark.parametrize("a, b", [(2.0, 3.0), (-1.5, 4.0), (0.5, -7.25)])
def test_mul_value_and_grads(a, b):
    x, y = Value(a), Value(b)
    out = mul(x, y)
    assert out.data == a * b
    out.backward()
    assert x.grad == b
    assert y.grad == a


def test_leaf_construction():
    v = Value(3, label="x")
    assert v.data == 3.0
    assert isinstance(v.data, np.float64)
    assert v.grad == 0.0
    assert v.operands == ()
    assert v.op is Op.LEAF
    assert v.op_label == ""
    assert v.is_leaf


@pytest.mark.parametrize("bad", ["1.0", [1.0], None, True, 1 + 2j, np.complex128(1 + 2j)])
def test_non_numeric_rejected(bad):
    with pytest.raises(TypeError):
        Value(bad)


def test_operands_and_labels():
    x, y = Value(2.0), Value(3.0)
    s = x + y
    p = x * y
    assert s.operands == (x, y) and s.op_label == "+"
    assert p.operands == (x, y) and p.op_label == "*"
    assert (x ** 2).op_label == "**2"
    assert x.tanh().op_label == "tanh"
    assert x.relu().op_label == "relu"


def test_constants_promoted_to_fresh_leaves():
    x = Value(2.0)
    a = x + 1.0
    b = x + 1.0
    const_a, const_b = a.operands[1], b.operands[1]
    assert const_a is not const_b
    assert const_a.is_leaf and const_a.data == 1.0
    a.backward()
    assert const_a.grad == 1.0
    assert const_b.grad == 0.0


def test_reflected_operators():
    x = Value(4.0)
    assert (1.0 + x).data == 5.0
    assert (10.0 - x).data == 6.0
    assert (3.0 * x).data == 12.0
    assert (2.0 / x).data == 0.5
    assert (-x).data == -4.0
    assert sum([x, x, x]).data == 12.0


def test_sub_div_neg_gradients():
    x, y = Value(6.0), Value(2.0)
    out = (x - y) / y - (-x)
    # (x - y)/y + x
    assert out.data == pytest.approx(8.0)
    out.backward()
    assert x.grad == pytest.approx(1.0 / 2.0 + 1.0)
    assert y.grad == pytest.approx(-6.0 / 4.0)


def test_pow_gradient():
    x = Value(3.0)
    out = pow(x, 3)
    assert out.data == 27.0
    out.backward()
    assert x.grad == pytest.approx(27.0)


def test_pow_rejects_value_exponent():
    with pytest.raises(TypeError):
        Value(2.0) ** Value(3.0)
    with pytest.raises(TypeError):
        2.0 ** Value(3.0)


def test_pow_domain_error_is_nan():
    out = Value(-8.0) ** 0.5
    assert math.isnan(out.data)


@pytest.mark.parametrize("base, exponent, check", [
    (-8.0, 0.5, math.isnan),
    (0.0, -1, math.isinf),
])
def test_pow_domain_error_logs_warning(caplog, base, exponent, check):
    with caplog.at_level(logging.WARNING, logger="scalar_autograd.ops.arithmetic"):
        out = Value(base) ** exponent
    assert check(out.data)
    records = [r for r in caplog.records if r.name == "scalar_autograd.ops.arithmetic"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert "outside the real domain" in records[0].getMessage()


def test_valid_pow_logs_nothing(caplog):
    with caplog.at_level(logging.WARNING, logger="scalar_autograd.ops.arithmetic"):
        out = Value(4.0) ** 0.5
    assert out.data == 2.0
    assert [r for r in caplog.records if r.name == "scalar_autograd.ops.arithmetic"] == []


def test_pow_rejects_complex_exponent():
    with pytest.raises(TypeError):
        Value(2.0) ** np.complex128(1 + 2j)


def test_division_by_zero_is_inf():
    out = Value(1.0) / Value(0.0)
    assert math.isinf(out.data)


@pytest.mark.parametrize("x0", [-2.0, -0.3, 0.0, 0.7, 1.9])
def test_tanh_matches_closed_form_and_finite_difference(x0):
    x = Value(x0)
    out = tanh(x)
    expected = (math.exp(2 * x0) - 1) / (math.exp(2 * x0) + 1)
    assert out.data == pytest.approx(expected)
    out.backward()
    assert x.grad == pytest.approx(1 - math.tanh(x0) ** 2)

    analytic, numeric, ok = check_gradient(lambda vs: tanh(vs[0]), [x0])
    assert ok
    assert analytic[0] == pytest.approx(numeric[0], abs=1e-4)


def test_tanh_large_input_does_not_overflow():
    out = Value(1000.0).tanh()
    assert out.data == 1.0


@pytest.mark.parametrize("x0, data, grad", [(2.5, 2.5, 1.0), (-1.0, 0.0, 0.0), (0.0, 0.0, 0.0)])
def test_relu(x0, data, grad):
    x = Value(x0)
    out = relu(x)
    assert out.data == data
    out.backward()
    assert x.grad == grad


def test_repr_has_data_grad_label():
    v = Value(2.0, label="x1")
    v.grad = 0.5
    text = repr(v)
    assert "data=2.0" in text
    assert "grad=0.5" in text
    assert "label=x1" in text


def test_data_is_writable():
    v = Value(1.0)
    v.data = 5
    assert v.data == 5.0
    with pytest.raises(TypeError):
        v.data = "5"
