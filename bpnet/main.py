'''
Name: bpnet
Topic: back-propagation
Date: 2026/10/17
'''
import argparse
import sys

import numpy as np

from .activation import ACTIVATIONS
from .dataset import generate_linear, generate_XOR_easy
from .errors import EmptyTrainingSetError
from .logger import logs
from .model import Sequential
from .show_result import accuracy, show_result
from .trainer import Trainer


def build_parser():
    parser = argparse.ArgumentParser(description='Back-propagation trainer')
    parser.add_argument('--dataset', type=str, default='xor', choices=['linear', 'xor'],
                        help='dataset to use (default: xor)')
    parser.add_argument('--iterations', type=int, default=5000, metavar='N',
                        help='number of passes over the training set (default: 5000)')
    parser.add_argument('--lr', type=float, default=0.5, metavar='LR',
                        help='learning rate (default: 0.5)')
    parser.add_argument('--hidden-dims', type=int, nargs='+', default=[4, 4],
                        help='dimensions of hidden layers (default: 4 4)')
    parser.add_argument('--activation', type=str, default='sigmoid', choices=sorted(ACTIVATIONS),
                        help='hidden layer activation (default: sigmoid)')
    parser.add_argument('--seed', type=int, default=1, metavar='S',
                        help='random seed (default: 1)')
    parser.add_argument('--quiet', action='store_true',
                        help='disable progress reporting')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='directory for rotating log files (default: stderr only)')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='minimum log level (default: INFO)')
    parser.add_argument('--plot', action='store_true',
                        help='plot ground truth against predictions after training')
    return parser


def main(argv=None):
    """
    主函式，負責解析命令列參數、建構模型並執行訓練。
    """
    args = build_parser().parse_args(argv)
    logs.configure(log_dir=args.log_dir, level=args.log_level)
    np.random.seed(args.seed)

    # --- 資料準備 ---
    if args.dataset == 'linear':
        X, y = generate_linear(n=100)
    else:
        X, y = generate_XOR_easy()
    logs.info(f"Dataset: {args.dataset} ({len(X)} samples)")

    # --- 模型建構 ---
    model = Sequential.build(X.shape[1], args.hidden_dims, y.shape[1],
                             activation=args.activation, learning_rate=args.lr)
    logs.info("Layers: " + " -> ".join(layer.__class__.__name__ for layer in model.layers))

    # --- 模型訓練 ---
    try:
        Trainer(model).train(X, y, args.iterations, quiet=args.quiet)
    except EmptyTrainingSetError:
        sys.exit(1)

    logs.info(f"Accuracy: {accuracy(model, X, y):.2f}%")

    if args.plot:
        show_result(model, X, y)
    return 0


if __name__ == '__main__':
    sys.exit(main())
