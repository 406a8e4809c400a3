'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import matplotlib.pyplot as plt
import numpy as np


def accuracy(model, X, y_true):
    """計算預測準確率 (百分比)。"""
    y_pred = model.predict(X)
    return np.mean(y_pred == y_true) * 100


def show_result(model, X, y_true):
    """
    視覺化比較真實標籤和預測結果。

    參數:
        model: 訓練好的神經網路模型物件。
        X (np.array): 輸入資料。
        y_true (np.array): 真實標籤。
    """
    y_pred = model.predict(X)

    plt.figure(figsize=(12, 6))

    for position, (title, labels) in enumerate([("Ground Truth", y_true), ("Prediction", y_pred)], start=1):
        plt.subplot(1, 2, position)
        plt.title(title, fontsize=16)
        plt.scatter(X[labels.flatten() == 0][:, 0], X[labels.flatten() == 0][:, 1], c='red', marker='o', label='Class 0')
        plt.scatter(X[labels.flatten() == 1][:, 0], X[labels.flatten() == 1][:, 1], c='blue', marker='x', label='Class 1')
        plt.xlabel("x1")
        plt.ylabel("x2")
        plt.legend()
        plt.grid(True)

    plt.tight_layout()
    plt.show()
