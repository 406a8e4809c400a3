import numpy as np
import pytest

from bpnet.activation import Identity, ReLU, Sigmoid, get_activation
from bpnet.layers import Dense, InputLayer


def test_input_layer_passes_input_through():
    out = InputLayer(3).process([1, 2, 3])
    assert out.dtype == float
    np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])


def test_input_layer_rejects_wrong_width():
    with pytest.raises(ValueError):
        InputLayer(3).process([1.0, 2.0])


def test_input_layer_has_no_propagate():
    assert not hasattr(InputLayer(2), 'propagate')


def test_dense_propagate_updates_weights_and_returns_upstream_error():
    layer = Dense(2, 1, activation='linear', learning_rate=0.1)
    layer.params['W'] = np.array([[1.0], [2.0]])
    layer.params['b'] = np.array([0.0])

    np.testing.assert_allclose(layer.process([1.0, 1.0]), [3.0])
    upstream = layer.propagate([0.5])

    np.testing.assert_allclose(upstream, [0.5, 1.0])
    np.testing.assert_allclose(layer.params['W'], [[1.05], [2.05]])
    np.testing.assert_allclose(layer.params['b'], [0.05])


def test_dense_propagate_before_process_raises():
    with pytest.raises(RuntimeError):
        Dense(2, 2).propagate([0.1, 0.1])


def test_sigmoid_derivative_at_zero():
    assert Sigmoid().forward(0.0) == pytest.approx(0.5)
    assert Sigmoid().derivative(0.0) == pytest.approx(0.25)


def test_relu_derivative():
    np.testing.assert_array_equal(ReLU().derivative(np.array([-1.0, 0.0, 2.0])), [0.0, 0.0, 1.0])


def test_get_activation():
    assert isinstance(get_activation('linear'), Identity)
    act = Sigmoid()
    assert get_activation(act) is act
    with pytest.raises(ValueError):
        get_activation('softmax')
