'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import numpy as np

from .activation import get_activation


class Layer:
    """
    神經網路層的基礎類別。
    """
    def __init__(self, size):
        self.size = size

    def process(self, inputs):
        """前向傳播"""
        raise NotImplementedError


class InputLayer(Layer):
    """
    輸入層：只把輸入原樣往下傳，沒有可學習的參數。
    反向傳播永遠不會輪到這一層。
    """
    def process(self, inputs):
        inputs = np.asarray(inputs, dtype=float)
        if inputs.shape != (self.size,):
            raise ValueError(f"輸入維度應為 {self.size}，實際為 {inputs.shape}")
        return inputs


class Dense(Layer):
    """
    全連接層，執行 y = f(xW + b) 的運算。
    每次 propagate 都會直接用收到的誤差訊號更新自己的權重。
    """
    def __init__(self, input_dim, output_dim, activation='sigmoid', learning_rate=0.1):
        super().__init__(output_dim)
        self.activation = get_activation(activation)
        self.learning_rate = learning_rate
        self.params = {
            'W': np.random.randn(input_dim, output_dim) * np.sqrt(1.0 / input_dim),
            'b': np.zeros(output_dim),
        }
        self.grads = {}
        self.inputs = None
        self.z = None

    def process(self, inputs):
        """
        執行前向傳播，並保留輸入與線性輸出供 propagate 使用。
        """
        self.inputs = np.asarray(inputs, dtype=float)
        self.z = np.dot(self.inputs, self.params['W']) + self.params['b']
        return self.activation.forward(self.z)

    def propagate(self, errors):
        """
        反向傳播：依誤差訊號更新 W, b，並回傳給上一層的誤差訊號。

        參數:
            errors (np.array): 來自下一層的誤差訊號 (expected - observed 方向)。

        返回:
            np.array: 傳給上一層的誤差訊號，使用更新前的權重計算。
        """
        if self.inputs is None:
            raise RuntimeError("propagate() 必須在 process() 之後呼叫")

        delta = np.asarray(errors, dtype=float) * self.activation.derivative(self.z)
        upstream = np.dot(delta, self.params['W'].T)

        self.grads['W'] = np.outer(self.inputs, delta)
        self.grads['b'] = delta

        self.params['W'] += self.learning_rate * self.grads['W']
        self.params['b'] += self.learning_rate * self.grads['b']
        return upstream
