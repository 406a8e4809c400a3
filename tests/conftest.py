# tests/conftest.py
import numpy as np
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def captured_logs():
    """收集 (level, message)，用來斷言日誌內容。"""
    captured = []
    sink_id = logger.add(lambda msg: captured.append((msg.record["level"].name, msg.record["message"])))
    yield captured
    logger.remove(sink_id)


class RecordingLayer:
    """記錄 propagate 呼叫順序與收到的誤差訊號的假層。"""

    def __init__(self, index, calls):
        self.index = index
        self.calls = calls
        self.size = 2

    def process(self, inputs):
        return np.asarray(inputs, dtype=float)

    def propagate(self, errors):
        self.calls.append((self.index, np.asarray(errors, dtype=float).copy()))
        return np.asarray(errors, dtype=float) * 2


class StubNetwork:
    """固定輸出的網路，記錄每次 process 收到的輸入。"""

    def __init__(self, n_layers=3, observed=(0.8, 0.1)):
        self.propagate_calls = []
        self.processed = []
        self.observed = np.array(observed)
        self.layers = [RecordingLayer(i, self.propagate_calls) for i in range(n_layers)]

    @property
    def trainable_layers(self):
        return self.layers[1:]

    def process(self, inputs):
        self.processed.append(list(inputs))
        return self.observed


@pytest.fixture
def make_stub_network():
    """Factory fixture：make_stub_network(n_layers=4)"""
    def _make(n_layers=3, observed=(0.8, 0.1)):
        return StubNetwork(n_layers, observed)

    return _make


@pytest.fixture
def make_recording_layer():
    """Factory fixture：make_recording_layer(index, calls)"""
    return RecordingLayer


@pytest.fixture
def stub_network(make_stub_network):
    return make_stub_network()
