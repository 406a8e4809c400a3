'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import numpy as np


class Activation:
    """
    活化函數的基礎類別。
    """
    def forward(self, z):
        raise NotImplementedError("forward() 尚未實作")

    def derivative(self, z):
        raise NotImplementedError("derivative() 尚未實作")


class Sigmoid(Activation):
    """
    Sigmoid 活化函數，輸出範圍在 (0, 1) 之間。
    """
    def forward(self, z):
        return 1 / (1 + np.exp(-z))

    def derivative(self, z):
        """σ'(z) = σ(z)(1 - σ(z))"""
        s = self.forward(z)
        return s * (1 - s)


class Tanh(Activation):
    def forward(self, z):
        return np.tanh(z)

    def derivative(self, z):
        return 1 - np.tanh(z) ** 2


class ReLU(Activation):
    """
    ReLU (Rectified Linear Unit) 活化函數。
    """
    def forward(self, z):
        return np.maximum(0, z)

    def derivative(self, z):
        return (z > 0).astype(float)


class LeakyReLU(Activation):
    def __init__(self, alpha=0.01):
        self.alpha = alpha

    def forward(self, z):
        return np.where(z > 0, z, self.alpha * z)

    def derivative(self, z):
        return np.where(z > 0, 1.0, self.alpha)


class Identity(Activation):
    def forward(self, z):
        return z

    def derivative(self, z):
        return np.ones_like(z, dtype=float)


ACTIVATIONS = {
    'sigmoid': Sigmoid,
    'tanh': Tanh,
    'relu': ReLU,
    'leaky_relu': LeakyReLU,
    'linear': Identity,
}


def get_activation(name):
    """
    依名稱取得活化函數物件。

    參數:
        name (str | Activation): 活化函數名稱，或已建立好的活化函數物件。
    """
    if isinstance(name, Activation):
        return name
    if name not in ACTIVATIONS:
        raise ValueError(f"不支援的活化函數: {name}")
    return ACTIVATIONS[name]()
