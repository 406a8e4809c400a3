'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''


class TrainingError(Exception):
    """訓練過程中的錯誤基礎類別。"""


class EmptyTrainingSetError(TrainingError):
    """
    輸入或預期輸出為空時拋出。
    這是唯一無法繼續的錯誤，交由呼叫端決定是否結束程式。
    """
