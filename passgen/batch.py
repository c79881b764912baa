# generate_batch
# (several passwords per request)
#

import logging
import time
from typing import NamedTuple

from .charset import build_pools
from .config import BATCH_SIZE, ConfigError
from .pwgen import generate_password
from .rng import default_source
from .strength import score, tier

log = logging.getLogger(__name__)


class GeneratedPassword(NamedTuple):
    password: str
    strength: int
    id: str

    @property
    def tier(self) -> str:
        return tier(self.strength)


def generate_batch(config, batch_size: int = BATCH_SIZE, rng=None) -> list:
    """Generate `batch_size` passwords according to `config`.

    The config is validated before generating anything, so either all
    passwords are returned or an exception is raised.

    :raises ConfigError: Length out of range or `batch_size` < 1
    :raises EmptyCharsetError: No characters to choose from
    :returns: List of GeneratedPassword in generation order

    """
    if batch_size < 1:
        raise ConfigError(f"Batch size must be at least 1, got {batch_size}.")
    config.validate()
    full_pool, pools = build_pools(config)
    if rng is None:
        rng = default_source()
    log.debug("Generating %d passwords: length=%d classes=%s exclude_similar=%s",
              batch_size, config.length, ','.join(pools), config.exclude_similar)
    # Ids are unique within batch thanks to the index
    stamp = int(time.time() * 1000)
    batch = []
    for i in range(batch_size):
        password = generate_password(config, pools, full_pool, rng)
        batch.append(GeneratedPassword(password, score(password), f"{stamp}-{i}"))
    return batch
