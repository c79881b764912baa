import pytest

from passgen.charset import EmptyCharsetError
from passgen.config import PasswordConfig, Config, ConfigError, parse_option


def test_defaults():
    config = PasswordConfig()
    assert config.length == 16
    assert config.enabled_classes() == ('uppercase', 'lowercase', 'numbers', 'symbols')
    assert not config.exclude_similar
    config.validate()


def test_replace():
    config = PasswordConfig()
    modified = config.replace(include_numbers=False, length=8)
    assert config.include_numbers
    assert modified.enabled_classes() == ('uppercase', 'lowercase', 'symbols')
    assert modified.length == 8


def test_validate():
    PasswordConfig(length=4).validate()
    PasswordConfig(length=50).validate()
    with pytest.raises(ConfigError):
        PasswordConfig(length=3).validate()
    with pytest.raises(ConfigError):
        PasswordConfig(length=51).validate()
    with pytest.raises(EmptyCharsetError):
        PasswordConfig(include_uppercase=False, include_lowercase=False,
                       include_numbers=False, include_symbols=False).validate()


def test_parse_option():
    assert parse_option('length', '20') == ('length', 20)
    assert parse_option('symbols', 'off') == ('include_symbols', False)
    assert parse_option('exclude_similar', 'Yes') == ('exclude_similar', True)
    with pytest.raises(ConfigError):
        parse_option('length', 'long')
    with pytest.raises(ConfigError):
        parse_option('numbers', 'maybe')


def test_config_file(tmp_path, capsys):
    config_file = tmp_path / 'passgen.conf'
    config_file.write_text("[passgen]\n"
                           "length = 24\n"
                           "symbols = no\n"
                           "exclude_similar = yes\n"
                           "batch_size = 5\n"
                           "colour = blue\n"
                           "[other]\n"
                           "x = 1\n", encoding='utf-8')
    cfg = Config(config_file)
    assert cfg.password_config == PasswordConfig(length=24, include_symbols=False,
                                                 exclude_similar=True)
    assert cfg.batch_size == 5
    out = capsys.readouterr().out
    assert "WARNING: unknown key ['passgen'] 'colour'" in out
    assert "WARNING: unknown section 'other'" in out


def test_missing_config_file(tmp_path):
    cfg = Config(tmp_path / 'does_not_exist.conf')
    assert cfg.password_config == PasswordConfig()
    assert cfg.batch_size == 3


def test_invalid_config_file(tmp_path):
    config_file = tmp_path / 'passgen.conf'
    config_file.write_text("[passgen]\nbatch_size = many\n", encoding='utf-8')
    with pytest.raises(ConfigError):
        Config(config_file)
