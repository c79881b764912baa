from .charset import EmptyCharsetError, build_pools
from .config import PasswordConfig, ConfigError
from .pwgen import generate_password
from .strength import score, tier
from .batch import GeneratedPassword, generate_batch

__all__ = (
    'EmptyCharsetError', 'build_pools',
    'PasswordConfig', 'ConfigError',
    'generate_password',
    'score', 'tier',
    'GeneratedPassword', 'generate_batch',
)
