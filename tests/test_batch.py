import logging

import pytest

from passgen.batch import generate_batch, GeneratedPassword
from passgen.charset import EmptyCharsetError
from passgen.config import PasswordConfig, ConfigError
from passgen.rng import SeededRandomSource
from passgen.strength import score


def test_generate_batch():
    batch = generate_batch(PasswordConfig())
    assert len(batch) == 3
    assert len({item.id for item in batch}) == 3
    for item in batch:
        assert isinstance(item, GeneratedPassword)
        assert len(item.password) == 16
        assert item.strength == score(item.password)
        assert item.tier == 'Very Strong'


def test_batch_size():
    batch = generate_batch(PasswordConfig(length=4), 10, SeededRandomSource(1))
    assert len(batch) == 10
    assert len({item.id for item in batch}) == 10
    assert [item.id.split('-')[1] for item in batch] == [str(i) for i in range(10)]


def test_no_class():
    config = PasswordConfig(include_uppercase=False, include_lowercase=False,
                            include_numbers=False, include_symbols=False)
    with pytest.raises(EmptyCharsetError):
        generate_batch(config)


@pytest.mark.parametrize('length', [0, 3, 51])
def test_invalid_length(length):
    with pytest.raises(ConfigError):
        generate_batch(PasswordConfig(length=length))


def test_invalid_batch_size():
    with pytest.raises(ConfigError):
        generate_batch(PasswordConfig(), 0)


def test_no_draws_on_failure():
    class Recorder:
        calls = 0

        def randbelow(self, n):
            self.calls += 1
            return 0

    rng = Recorder()
    with pytest.raises(ConfigError):
        generate_batch(PasswordConfig(length=100), 3, rng)
    assert rng.calls == 0


def test_debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger='passgen.batch')
    batch = generate_batch(PasswordConfig(), 3)
    assert "Generating 3 passwords" in caplog.text
    for item in batch:
        assert item.password not in caplog.text
