'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from .layers import Dense, InputLayer


@runtime_checkable
class Trainable(Protocol):
    """
    Trainer 所需要的網路介面：前向傳播與有序的層。
    """
    layers: Sequence

    @property
    def trainable_layers(self) -> Sequence:
        ...

    def process(self, inputs):
        ...


class Sequential:
    """
    一個循序模型，可以將多個層堆疊在一起。
    第一層必須是 InputLayer，其餘各層必須能 propagate。
    """
    def __init__(self, layers=None):
        """
        初始化循序模型。

        參數:
            layers (list, optional): 一個包含神經網路層物件的列表。
        """
        self.layers = []
        for layer in layers or []:
            self.add(layer)

    @classmethod
    def build(cls, input_dim, hidden_dims, output_dim, activation='sigmoid',
              output_activation='sigmoid', learning_rate=0.1):
        """
        依維度建立 InputLayer -> Dense(hidden)... -> Dense(output) 的模型。
        """
        model = cls([InputLayer(input_dim)])
        prev_dim = input_dim
        for hidden_dim in hidden_dims:
            model.add(Dense(prev_dim, hidden_dim, activation, learning_rate))
            prev_dim = hidden_dim
        model.add(Dense(prev_dim, output_dim, output_activation, learning_rate))
        return model

    def add(self, layer):
        """
        向模型中添加一個層。

        參數:
            layer: 要添加的層物件。
        """
        if not self.layers:
            if not isinstance(layer, InputLayer):
                raise TypeError(f"第一層必須是 InputLayer，收到 {layer.__class__.__name__}")
        elif not callable(getattr(layer, 'propagate', None)):
            raise TypeError(f"{layer.__class__.__name__} 無法反向傳播，不能放在輸入層之後")
        self.layers.append(layer)

    @property
    def input_layer(self):
        return self.layers[0]

    @property
    def trainable_layers(self):
        """輸入層之後、會接收誤差訊號的層。"""
        return self.layers[1:]

    def process(self, inputs):
        """
        執行完整的前向傳播。

        參數:
            inputs: 單一樣本的輸入向量。

        返回:
            np.array: 模型最終的輸出。
        """
        output = inputs
        for layer in self.layers:
            output = layer.process(output)
        return output

    def predict(self, X):
        """
        對一批樣本做二元分類預測。

        參數:
            X (np.array): 輸入資料，每列一個樣本。

        返回:
            np.array: 預測的類別 (0 或 1)。
        """
        y_pred_proba = np.array([self.process(x) for x in X])
        return (y_pred_proba > 0.5).astype(int)
