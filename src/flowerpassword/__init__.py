"""
Flower Password is a deterministic password generator.
"""

__title__ = 'flowerpassword'
__version__ = '1.0.0'
__url__ = 'https://github.com/flowerpassword/flowerpassword.py'
__author__ = 'Flower Password Contributors'
__author_email__ = 'flowerpassword@users.noreply.github.com'
__license__ = 'MIT'
__description__ = 'Deterministic password generation with the Flower Password algorithm.'

from flowerpassword.crypto import fp_code
from flowerpassword.exceptions import (
    ConfigurationError,
    FlowerPasswordError,
    InvalidLength,
)

__all__ = [
    'ConfigurationError',
    'FlowerPasswordError',
    'InvalidLength',
    'exceptions',
    'fp_code',
]
