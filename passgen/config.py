# PasswordConfig, Config
# (generator options and config file)
#

import configparser
from pathlib import Path
from typing import NamedTuple

from .charset import CLASS_ORDER, EmptyCharsetError

MIN_LENGTH = 4
MAX_LENGTH = 50
DEFAULT_LENGTH = 16
BATCH_SIZE = 3

DATA_DIR = Path('~/.passgen')
DEFAULT_CONFIG = DATA_DIR / 'passgen.conf'


class ConfigError(ValueError):
    pass


class PasswordConfig(NamedTuple):

    """Options for password generation. Immutable, use `replace` to modify."""

    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False

    def enabled_classes(self) -> tuple:
        flags = (self.include_uppercase, self.include_lowercase,
                 self.include_numbers, self.include_symbols)
        return tuple(name for name, flag in zip(CLASS_ORDER, flags) if flag)

    def validate(self):
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ConfigError(f"Length must be between {MIN_LENGTH} "
                              f"and {MAX_LENGTH}, got {self.length}.")
        if not self.enabled_classes():
            raise EmptyCharsetError("No character class selected.")

    def replace(self, **kwargs) -> 'PasswordConfig':
        return self._replace(**kwargs)


# Config file keys: (PasswordConfig field, parser)
_CONFIG_KEYS = {
    'length':          ('length', int),
    'uppercase':       ('include_uppercase', bool),
    'lowercase':       ('include_lowercase', bool),
    'numbers':         ('include_numbers', bool),
    'symbols':         ('include_symbols', bool),
    'exclude_similar': ('exclude_similar', bool),
}

# Short option names accepted by shell `set` and `toggle`
OPTION_NAMES = {key: field for key, (field, _parser) in _CONFIG_KEYS.items()}


def parse_bool(value: str) -> bool:
    state = configparser.ConfigParser.BOOLEAN_STATES.get(value.lower())
    if state is None:
        raise ConfigError(f"Not a boolean: {value!r}")
    return state


def parse_option(key: str, value: str):
    """Convert `value` of option `key` to (field_name, typed_value)."""
    field, parser = _CONFIG_KEYS[key]
    try:
        return field, parse_bool(value) if parser is bool else parser(value)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key!r}: {value!r}") from e


class Config:

    """Defaults loaded from INI config file, section [passgen]."""

    def __init__(self, config_file=DEFAULT_CONFIG):
        self.password_config = PasswordConfig()
        self.batch_size = BATCH_SIZE
        self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        options = {}
        for section in config.sections():
            if section != 'passgen':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key == 'batch_size':
                    try:
                        self.batch_size = int(section[key])
                    except ValueError as e:
                        raise ConfigError(f"Invalid value for 'batch_size': "
                                          f"{section[key]!r}") from e
                elif key in _CONFIG_KEYS:
                    field, value = parse_option(key, section[key])
                    options[field] = value
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                    continue
        self.password_config = self.password_config.replace(**options)
