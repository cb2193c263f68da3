import json

import pytest

from schreier.config import SchreierConfig, getConfig, set_config_factory


def test_default_config():
    cfg = getConfig()
    assert cfg.max_rounds is None
    assert cfg.unique_generators
    assert not cfg.log_rounds


def test_fromdict():
    cfg = SchreierConfig.fromdict({'max_rounds': 3, 'log_rounds': True})
    assert cfg.max_rounds == 3
    assert cfg.log_rounds
    with pytest.raises(KeyError):
        SchreierConfig.fromdict({'rounds': 3})


def test_fromfile(tmp_path):
    path = tmp_path / 'schreier.json'
    path.write_text(json.dumps({'unique_generators': False}))
    cfg = SchreierConfig.fromfile(path)
    assert not cfg.unique_generators
    assert cfg.max_rounds is None


def test_config_factory():
    cfg = SchreierConfig(max_rounds=7)
    set_config_factory(lambda: cfg)
    try:
        assert getConfig() is cfg
    finally:
        set_config_factory(None)
    assert getConfig().max_rounds is None


def test_log_rounds(caplog):
    from schreier import Cycles, build

    set_config_factory(lambda: SchreierConfig(log_rounds=True))
    try:
        with caplog.at_level('DEBUG', logger='schreier.vector'):
            build([Cycles(1, 2, 3)], 1)
    finally:
        set_config_factory(None)
    assert len(caplog.records) == 3
