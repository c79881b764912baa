# RandomSource
# (uniform index sources for the generator)
#

import random

from . import backend


class RandomSource:

    """Draws uniform random integers in [0, n).

    The generator only ever calls `randbelow`, so any object
    providing this method can be passed in as the random source.

    """

    def randbelow(self, n: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):

    """OS entropy via `random.SystemRandom` (default)."""

    def __init__(self):
        self._random = random.SystemRandom()

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


class ByteRandomSource(RandomSource):

    """Rejection sampling over random bytes from the crypto backend.

    Uses libsodium (pynacl) when installed, `os.urandom` otherwise.

    """

    def __init__(self, randombytes=None):
        self._randombytes = randombytes or backend.randombytes

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Upper bound must be positive.")
        num_bytes = ((n - 1).bit_length() + 7) // 8 or 1
        # Largest multiple of n which fits into num_bytes
        limit = (256 ** num_bytes // n) * n
        while True:
            value = int.from_bytes(self._randombytes(num_bytes), 'big')
            if value < limit:
                return value % n


class SeededRandomSource(RandomSource):

    """Reproducible pseudo-random source. Not for real passwords."""

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


def default_source() -> RandomSource:
    """libsodium bytes when pynacl is installed, `SystemRandom` otherwise."""
    if backend.provider('randombytes') == 'pynacl':
        return ByteRandomSource()
    return SystemRandomSource()
