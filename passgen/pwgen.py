# pwgen
# (random password generator)
#

from .charset import EmptyCharsetError
from .rng import default_source


def generate_password(config, pools: dict, full_pool: str, rng=None) -> str:
    """Generate random password according to `config`.

    One character is drawn from each pool in `pools` first, so every
    enabled class is represented. Remaining positions up to `config.length`
    are drawn from `full_pool`. The result is shuffled.

    The password is never truncated: when `config.length` is smaller
    than the number of pools, its length equals the number of pools.

    :param config: PasswordConfig
    :param pools: Class name -> characters, as returned by `build_pools`
    :param full_pool: All characters, as returned by `build_pools`
    :param rng: Random source with `randbelow(n)`. Default is OS entropy.
    :returns: The password.

    """
    if not full_pool:
        raise EmptyCharsetError("No characters to choose from.")
    if rng is None:
        rng = default_source()
    # Guarantee each class
    charlist = [pool[rng.randbelow(len(pool))] for pool in pools.values()]
    # Fill up to length
    while len(charlist) < config.length:
        charlist.append(full_pool[rng.randbelow(len(full_pool))])
    # Fisher-Yates
    for i in range(len(charlist) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        charlist[i], charlist[j] = charlist[j], charlist[i]
    return ''.join(charlist)


if __name__ == '__main__':
    from .config import PasswordConfig
    from .charset import build_pools
    cfg = PasswordConfig()
    full, per_class = build_pools(cfg)
    for _ in range(10):
        print(generate_password(cfg, per_class, full))
