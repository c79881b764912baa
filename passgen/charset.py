# charset
# (character classes and pool building)
#

from types import MappingProxyType

CLASS_ORDER = ('uppercase', 'lowercase', 'numbers', 'symbols')

CHARSET = MappingProxyType({
    'uppercase': 'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'lowercase': 'abcdefghijklmnopqrstuvwxyz',
    'numbers':   '0123456789',
    'symbols':   '!@#$%^&*()_+-=[]{}|;:,.<>?',
})

# Visually ambiguous characters
SIMILAR = 'il1Lo0O'


class EmptyCharsetError(ValueError):

    """Configuration selects no usable characters."""


def filter_similar(chars: str, similar: str = SIMILAR) -> str:
    return ''.join(c for c in chars if c not in similar)


def build_pools(config, table=CHARSET, similar=SIMILAR) -> tuple:
    """Build character pools for enabled classes of `config`.

    :param config: PasswordConfig (or anything with `enabled_classes()`
                   and `exclude_similar`)
    :param table: Mapping of class name to its base characters
    :param similar: Characters removed when `config.exclude_similar` is set
    :returns: (full_pool, pools) where `pools` maps class name
              to filtered characters, in class order
    :raises EmptyCharsetError: No class enabled or some enabled class
                               has no characters left after filtering

    """
    classes = config.enabled_classes()
    if not classes:
        raise EmptyCharsetError("No character class selected.")
    pools = {}
    for name in classes:
        chars = table[name]
        if config.exclude_similar:
            chars = filter_similar(chars, similar)
        if not chars:
            raise EmptyCharsetError(
                f"No {name} characters left after excluding similar ones.")
        pools[name] = chars
    return ''.join(pools.values()), pools
