"""
The Flower Password generation algorithm.
"""

import string
from hashlib import md5

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC

from flowerpassword.exceptions import InvalidLength

MIN_LENGTH = 2
MAX_LENGTH = 32
DEFAULT_LENGTH = 16

# These values must never change, every previously generated password depends
# on them.
MAGIC = 'sunlovesnow1990090127xykab'
RULE_SALT = 'kise'
SOURCE_SALT = 'snow'
FIRST_LETTER = 'K'


def to_bytes(s):
    """
    Encode a string as UTF-8, leaving bytes untouched.
    """
    if isinstance(s, bytes):
        return s

    return s.encode('utf-8')


def hmac_md5(message, key):
    """
    HMAC-MD5 hash a message.

    An empty key produces the plain MD5 hash of the message, this is how the
    original JavaScript `md5(string, key)` function behaves.

    Args:
        message (str): the message to hash.
        key (str): the HMAC key.

    Returns:
        str: the hash as a lowercase hex string.
    """
    if not key:
        return md5(to_bytes(message)).hexdigest()

    h = HMAC(to_bytes(key), hashes.MD5(), backend=default_backend())
    h.update(to_bytes(message))
    return h.finalize().hex()


def flowerify(rule_hash, source_hash, length):
    """
    Create a password from a rule hash and a source hash.

    Each letter in the source hash is uppercased when the rule hash character
    at the same position appears in the magic string. Digits are kept as is.
    The first character is then forced to be a letter.

    Args:
        rule_hash (str): the hex string deciding which letters to uppercase.
        source_hash (str): the hex string supplying the characters.
        length (int): the password length.

    Returns:
        str: the password.
    """
    chars = [
        c.upper() if c not in string.digits and r in MAGIC else c
        for r, c in zip(rule_hash, source_hash)
    ]

    if chars[0] in string.digits:
        chars[0] = FIRST_LETTER

    return ''.join(chars[:length])


def validate_length(length):
    """
    Check that a password length is supported.

    Raises:
        InvalidLength: if the length is not between 2 and 32.
    """
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLength(length, minimum=MIN_LENGTH, maximum=MAX_LENGTH)


def fp_code(password, key, length=DEFAULT_LENGTH):
    """
    Generate a Flower Password from a master password and a key.

    Args:
        password (str): the master password.
        key (str): the key, usually the domain or name of a service.
        length (int): the password length, between 2 and 32.

    Returns:
        str: the generated password.

    Raises:
        InvalidLength: if the length is not between 2 and 32.
    """
    validate_length(length)

    base_hash = hmac_md5(password, key)
    rule_hash = hmac_md5(base_hash, RULE_SALT)
    source_hash = hmac_md5(base_hash, SOURCE_SALT)

    return flowerify(rule_hash, source_hash, length)
