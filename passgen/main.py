import sys
import argparse
import logging

from . import shell, ui, backend
from .config import Config, ConfigError, DEFAULT_CONFIG, MIN_LENGTH, MAX_LENGTH
from .charset import SIMILAR
from .strength import score, tier

log = logging.getLogger(__name__)


def load_config(config_file, length=None, count=None, no_upper=False,
                no_lower=False, no_digits=False, no_symbols=False,
                exclude_similar=False):
    """Load config file and apply command line overrides.

    Returns (PasswordConfig, batch_size).

    """
    cfg = Config(config_file)
    overrides = {}
    if length is not None:
        overrides['length'] = length
    if no_upper:
        overrides['include_uppercase'] = False
    if no_lower:
        overrides['include_lowercase'] = False
    if no_digits:
        overrides['include_numbers'] = False
    if no_symbols:
        overrides['include_symbols'] = False
    if exclude_similar:
        overrides['exclude_similar'] = True
    password_config = cfg.password_config.replace(**overrides)
    batch_size = cfg.batch_size if count is None else count
    log.debug("Using %r, batch size %d", password_config, batch_size)
    return password_config, batch_size


def run_gen(config_file, show, copy, **options):
    password_config, batch_size = load_config(config_file, **options)
    gen_ui = ui.GeneratorUI(password_config, batch_size)
    if not gen_ui.generate():
        return
    if show:
        gen_ui.set_visible()
    gen_ui.cmd_list()
    if copy is not None:
        gen_ui.cmd_copy(copy)


def run_score(passwords):
    if passwords == ['-']:
        passwords = [line.rstrip('\n') for line in sys.stdin]
    for password in passwords:
        strength = score(password)
        print(str(strength).rjust(3), tier(strength).ljust(12), password)


def run_shell(config_file, timeout, **options):
    password_config, batch_size = load_config(config_file, **options)
    shell.SHELL_TIMEOUT_SECS = timeout
    shell_ui = shell.ShellUI(password_config, batch_size)
    shell_ui.start()


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="passgen",
                                 description="Random password generator",
                                 formatter_class=argparse.RawTextHelpFormatter)

    # Sub-commands
    sp = ap.add_subparsers()
    ap_shell = sp.add_parser("shell", aliases=['sh'],
                             help="start shell (default)")
    ap_shell.set_defaults(func=run_shell)
    ap_gen = sp.add_parser("gen", aliases=['g'],
                           help="generate a batch of random passwords")
    ap_gen.set_defaults(func=run_gen)
    ap_score = sp.add_parser("score", aliases=['s'],
                             help="print strength score of passwords")
    ap_score.set_defaults(func=run_score)

    for subparser in (ap_shell, ap_gen, ap_score):
        subparser.add_argument('--debug', action='store_true',
                               help="print debug messages to stderr")

    for subparser in (ap_shell, ap_gen):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG,
                               help="config file (default: %(default)s)")
        subparser.add_argument('-l', '--length', dest='length', type=int,
                               help=f"length of password, {MIN_LENGTH} to {MAX_LENGTH} "
                                    f"(default: 16)")
        subparser.add_argument('-n', '--count', dest='count', type=int,
                               help="number of passwords to generate (default: 3)")
        subparser.add_argument('-U', '--no-upper', action='store_true',
                               help="no uppercase letters")
        subparser.add_argument('-L', '--no-lower', action='store_true',
                               help="no lowercase letters")
        subparser.add_argument('-D', '--no-digits', action='store_true',
                               help="no digits")
        subparser.add_argument('-S', '--no-symbols', action='store_true',
                               help="no symbols")
        subparser.add_argument('-x', '--exclude-similar', action='store_true',
                               help=f"exclude similar characters ({SIMILAR})")

    ap_gen.add_argument('--show', action='store_true',
                        help="print passwords instead of masking them")
    ap_gen.add_argument('--copy', type=int, metavar='N',
                        help="copy N-th password to clipboard")

    ap_shell.add_argument('--timeout', type=int, default=shell.SHELL_TIMEOUT_SECS,
                          help="Quit when timeout expires "
                               "(default: %(default)s)")

    ap_score.add_argument('passwords', nargs='+', metavar='password',
                          help="password to be scored ('-' to read lines from stdin)")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_shell.parse_args([], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    run_func = args.func
    delattr(args, 'func')
    debug = args.debug
    delattr(args, 'debug')
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        run_func(**vars(args))
    except ConfigError as e:
        print(e)
    except backend.MissingError as e:
        print(e)
