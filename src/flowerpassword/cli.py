"""
A command line interface for Flower Password.
"""

import os
import subprocess
import sys
from functools import wraps

import click
import pyperclip
from click import echo

from flowerpassword import __version__
from flowerpassword.crypto import fp_code
from flowerpassword.exceptions import FlowerPasswordError
from flowerpassword.model import Config

DEFAULT_CONFIG_PATH = os.path.expanduser('~/.flowerpassword.toml')


def bail(message):
    """
    Abort the CLI with a message.
    """
    raise click.ClickException(message)


def handle_flowerpassword_errors(f):
    """
    Translate FlowerPasswordErrors to ClickExceptions.

    Args:
        f (function): the function to decorate.

    Raises:
        click.ClickException: when the function raises a FlowerPasswordError.

    Returns:
        function: the decorated function.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except FlowerPasswordError as e:
            bail(str(e))

    return decorated_function


def clear_clipboard(timeout):
    """
    Clear the clipboard after a timeout.

    Args:
        timeout (int): the timeout.
    """
    code = f"import pyperclip, time; time.sleep({timeout}); pyperclip.copy('');"
    command = f'{sys.executable} -c "{code}"'
    subprocess.Popen(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        shell=True,
    )


def copy_to_clipboard(text, timeout=None):
    """
    Copy the given text to clipboard.

    Args:
        text (str): the text to copy to the clipboard.
        timeout (int): clear the clipboard after this amount of seconds.
    """
    pyperclip.copy(text)

    if timeout:
        clear_clipboard(timeout)


def read_config(path):
    """
    Read the Config from the given path, falling back to the defaults.

    Args:
        path (str): the path to the Config.

    Returns:
        Config: the read or default Config.
    """
    try:
        return Config.from_path(path)
    except OSError:
        return Config()


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(
    __version__,
    '-v',
    '--version',
    prog_name='flowerpassword',
    message='%(prog)s %(version)s',
)
@click.argument('key', required=False)
@click.option(
    '--password',
    '-p',
    envvar='FLOWERPASSWORD_MASTER',
    help='The master password. Prompted for when not given.',
)
@click.option('--length', '-l', type=int, help='The length of the generated password.')
@click.option(
    '--clipboard/--no-clipboard',
    default=None,
    help='Whether to copy the password to the clipboard or print it out.',
)
@click.option(
    '--config',
    '-c',
    type=click.Path(dir_okay=False),
    envvar='FLOWERPASSWORD_CONFIG',
    default=DEFAULT_CONFIG_PATH,
    help='The path to the Flower Password configuration.',
)
@handle_flowerpassword_errors
def cli(key, password, length, clipboard, config):
    """
    Generate a Flower Password.

    Derive a password for the key KEY, usually a domain name, from the master
    password.
    """
    config = read_config(config)

    if length is None:
        length = config.length

    if clipboard is None:
        clipboard = config.clipboard

    if not key:
        key = click.prompt('Enter key')

    if password is None:
        password = click.prompt('Enter master password', hide_input=True)

    secret = fp_code(password, key, length)

    if clipboard:
        copy_to_clipboard(secret, timeout=config.timeout)
        echo('Password copied to clipboard.')
    else:
        echo(secret)
