'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
from .activation import Sigmoid, Tanh, ReLU, LeakyReLU, Identity, get_activation
from .errors import TrainingError, EmptyTrainingSetError
from .layers import Layer, InputLayer, Dense
from .model import Sequential, Trainable
from .trainer import Trainer
from .utils import subtract, seconds_to_eta
