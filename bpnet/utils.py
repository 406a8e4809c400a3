'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import numpy as np

# 進度條函式庫，這裡只借用它的時間格式化
from tqdm import tqdm


def subtract(a, b):
    """
    逐元素相減：result[i] = a[i] - b[i]。

    參數:
        a, b: 長度相同的一維實數序列。

    返回:
        np.array: 相減後的結果。
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Cannot subtract vectors of shapes {a.shape} and {b.shape}")
    return a - b


def seconds_to_eta(seconds):
    """把整數秒數轉成 MM:SS 或 H:MM:SS 的 ETA 字串。"""
    return tqdm.format_interval(int(seconds))
