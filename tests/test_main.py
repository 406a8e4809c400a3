import numpy as np
import pytest

from bpnet import main as cli


def test_main_trains_and_reports_accuracy(capsys):
    assert cli.main(['--dataset', 'linear', '--iterations', '2', '--quiet']) == 0

    err = capsys.readouterr().err
    assert "Dataset: linear (100 samples)" in err
    assert "Accuracy: " in err


def test_main_exits_on_empty_dataset(monkeypatch):
    monkeypatch.setattr(cli, 'generate_XOR_easy', lambda: (np.empty((0, 2)), np.empty((0, 1))))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--iterations', '1'])
    assert excinfo.value.code == 1
