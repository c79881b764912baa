# BaseUI, GeneratorUI
# (generate, list, show/hide, copy)
#

from functools import wraps

from blessed import Terminal
import pyperclip

from .batch import generate_batch
from .charset import EmptyCharsetError
from .config import PasswordConfig, ConfigError, OPTION_NAMES, BATCH_SIZE, parse_option
from .strength import score, tier, TIER_COLORS

MASK_CHAR = '•'


def with_batch(func):
    """Require generated passwords. Decorator for UI commands."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if self._batch:
            func(self, *args, **kwargs)
        else:
            print("Nothing generated yet. See `help generate`.")
    return wrapper


class BaseUI:

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)


class GeneratorUI(BaseUI):

    """UI base commands.

    Holds current options and the last generated batch.
    Passwords are hidden until shown by `cmd_show`.
    New batch replaces the previous one and resets show/copy state.

    """

    def __init__(self, config=None, batch_size=BATCH_SIZE, rng=None):
        self._config = config or PasswordConfig()
        self._batch_size = batch_size
        self._rng = rng
        self._batch = []
        self._visible = set()  # ids
        self._copied_id = None
        self._term = Terminal()

    @property
    def config(self):
        return self._config

    @property
    def batch(self):
        return self._batch

    def generate(self) -> bool:
        """Replace current batch by a new one. Returns success."""
        try:
            batch = generate_batch(self._config, self._batch_size, self._rng)
        except (EmptyCharsetError, ConfigError) as e:
            print(e)
            return False
        self._batch = batch
        self._visible = set()
        self._copied_id = None
        return True

    def set_visible(self, num=None, visible=True):
        """Show/hide item `num` (1-based) or all items. Returns success."""
        if num is None:
            items = self._batch
        else:
            item = self._get_item(num)
            if item is None:
                return False
            items = [item]
        for item in items:
            if visible:
                self._visible.add(item.id)
            else:
                self._visible.discard(item.id)
        return True

    def format_item(self, n, item) -> str:
        if item.id in self._visible:
            text = item.password
        else:
            text = MASK_CHAR * len(item.password)
        label = item.tier
        colored = getattr(self._term, TIER_COLORS[label])(label)
        copied = '  (copied)' if item.id == self._copied_id else ''
        return f"[{n}] {text}  {item.strength}  {colored}{copied}"

    ###############
    # UI Commands #
    ###############

    def cmd_generate(self):
        """Generate new passwords with current options"""
        if self.generate():
            self.cmd_list()

    @with_batch
    def cmd_list(self):
        """Print generated passwords with their strength"""
        for n, item in enumerate(self._batch, 1):
            print(self.format_item(n, item))

    @with_batch
    def cmd_show(self, num=None):
        """Show password `num` or all passwords"""
        if self.set_visible(num, True):
            self.cmd_list()

    @with_batch
    def cmd_hide(self, num=None):
        """Hide password `num` or all passwords"""
        if self.set_visible(num, False):
            self.cmd_list()

    @with_batch
    def cmd_copy(self, num):
        """Copy password `num` to clipboard"""
        item = self._get_item(num)
        if item is None:
            return
        try:
            self._copy(item.password)
        except pyperclip.PyperclipException as e:
            print("Copy failed:", e)
            return
        self._copied_id = item.id
        print(f"Copied [{num}] to clipboard.")

    def cmd_set(self, option, value):
        """Set option to value

        Options: length, uppercase, lowercase, numbers, symbols,
        exclude_similar, batch_size.
        Boolean options accept on/off, yes/no, true/false, 1/0.

        """
        key = self._get_option(option, tuple(OPTION_NAMES) + ('batch_size',))
        if key is None:
            return
        try:
            if key == 'batch_size':
                self._set_batch_size(value)
                return
            field, typed_value = parse_option(key, value)
            config = self._config.replace(**{field: typed_value})
            config.validate()
        except EmptyCharsetError as e:
            print("Warning:", e)
        except ConfigError as e:
            return print(e)
        self._config = config

    def cmd_toggle(self, option):
        """Switch boolean option on or off"""
        key = self._get_option(option, tuple(k for k in OPTION_NAMES if k != 'length'))
        if key is None:
            return
        field = OPTION_NAMES[key]
        config = self._config.replace(**{field: not getattr(self._config, field)})
        try:
            config.validate()
        except EmptyCharsetError as e:
            print("Warning:", e)
        except ConfigError as e:
            return print(e)
        self._config = config
        print(key, 'on' if getattr(config, field) else 'off')

    def cmd_config(self):
        """Print current options"""
        for key, field in OPTION_NAMES.items():
            value = getattr(self._config, field)
            if isinstance(value, bool):
                value = 'on' if value else 'off'
            print(key.ljust(16), value, sep='')
        print('batch_size'.ljust(16), self._batch_size, sep='')

    def cmd_score(self, password):
        """Print strength of a password"""
        strength = score(password)
        print(strength, tier(strength), sep='  ')

    ###########
    # Helpers #
    ###########

    def _get_item(self, num):
        try:
            n = int(num)
        except ValueError:
            print("Invalid number:", num)
            return None
        if not 1 <= n <= len(self._batch):
            print("Invalid number:", num)
            return None
        return self._batch[n - 1]

    @staticmethod
    def _get_option(option, names):
        candidates = [name for name in names if name.startswith(option.lower())]
        if option.lower() in names:
            return option.lower()
        if len(candidates) != 1:
            print("Unknown option:", option)
            return None
        return candidates[0]

    def _set_batch_size(self, value):
        try:
            batch_size = int(value)
        except ValueError:
            raise ConfigError(f"Invalid value for 'batch_size': {value!r}")
        if batch_size < 1:
            raise ConfigError(f"Batch size must be at least 1, got {batch_size}.")
        self._batch_size = batch_size
