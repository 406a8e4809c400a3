'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import numpy as np


def generate_linear(n=100):
    """
    在 [0, 1]^2 中隨機取 n 個點，以 y = x 為界分類。
    在直線下方 (x > y) 的點標為 0，其餘為 1。
    """
    pts = np.random.uniform(0, 1, (n, 2))
    labels = (pts[:, 0] <= pts[:, 1]).astype(int)
    return pts, labels.reshape(n, 1)


def generate_XOR_easy():
    """
    兩條對角線上的 XOR 資料，共 21 個點。
    y = x 上的點為 0，y = 1 - x 上的點為 1 (中心點 (0.5, 0.5) 只出現一次)。
    """
    inputs = []
    labels = []

    for i in range(11):
        inputs.append([0.1 * i, 0.1 * i])
        labels.append(0)

        if 0.1 * i == 0.5:
            continue

        inputs.append([0.1 * i, 1 - 0.1 * i])
        labels.append(1)

    return np.array(inputs), np.array(labels).reshape(21, 1)
