'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
from time import perf_counter

from .errors import EmptyTrainingSetError
from .logger import logs
from .model import Trainable
from .utils import seconds_to_eta, subtract


class Trainer:
    """
    訓練器類別，以反向傳播演算法訓練任何符合 Trainable 介面的網路。
    """
    REPORT_INTERVAL = 500

    def __init__(self, network: Trainable):
        """
        初始化訓練器。

        參數:
            network: 要訓練的網路，需提供 process() 與 trainable_layers。
        """
        self.network = network

    def propagate_backwards(self, inputs, expected):
        """
        單一樣本的前向 + 反向傳播。
        比較輸出與預期值，把誤差從最後一層一路傳到輸入層之後的第一層。
        """
        observed = self.network.process(inputs)

        errors = subtract(expected, observed)

        for layer in reversed(self.network.trainable_layers):
            errors = layer.propagate(errors)

    def train(self, inputs, expected, iterations, quiet=False):
        """
        執行訓練迴圈。

        參數:
            inputs: 輸入樣本的列表。
            expected: 與 inputs 一一對應的預期輸出。
            iterations (int): 對整個訓練集做反向傳播的次數。
            quiet (bool): 為 True 時不計時也不輸出進度。
        """
        if len(inputs) == 0 or len(expected) == 0:
            logs.critical("Both inputs and expected results must not be empty.")
            raise EmptyTrainingSetError("Both inputs and expected results must not be empty.")

        if len(inputs) != len(expected):
            logs.error("Inputs and expected result lists must be of the same length.")
            return

        if iterations < 1:
            logs.error("You cannot train a network without granting it at least one iteration.")
            return

        # 不做任何計時與日誌
        if quiet:
            for _ in range(iterations):
                for index in range(len(inputs)):
                    self.propagate_backwards(inputs[index], expected[index])
            return

        for iteration in range(iterations):
            start = perf_counter()

            for index in range(len(inputs)):
                self.propagate_backwards(inputs[index], expected[index])

            elapsed = perf_counter() - start

            if iteration % self.REPORT_INTERVAL == 0:
                eta = seconds_to_eta(int(elapsed * (iterations - iteration)))
                logs.info(f"Iterations: {iteration}/{iterations} ~ ETA: {eta}")
