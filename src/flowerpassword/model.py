"""
Extensions for serde for use in Flower Password.
"""

import toml
from serde import Model as BaseModel
from serde import fields
from serde.exceptions import SerdeError

from flowerpassword.crypto import DEFAULT_LENGTH
from flowerpassword.exceptions import ConfigurationError


class Model(BaseModel):
    """
    A custom Model that is stored as TOML.
    """

    def to_toml(self, **kwargs):
        """
        Dump the model as a TOML string.

        Args:
            **kwargs: extra keyword arguments to pass directly to `toml.dumps`.

        Returns:
            str: a TOML representation of this model.
        """
        return toml.dumps(self.to_dict(), **kwargs)

    def to_path(self, p, **kwargs):
        """
        Dump the model to a file path.

        Args:
            p (str): the file path to write to.
            **kwargs: extra keyword arguments to pass directly to `toml.dumps`.
        """
        with open(p, 'w') as f:
            f.write(self.to_toml(**kwargs))

    @classmethod
    def from_toml(cls, s, **kwargs):
        """
        Load the model from a TOML string.

        Args:
            s (str): the TOML string.
            **kwargs: extra keyword arguments to pass directly to `toml.loads`.

        Returns:
            Model: an instance of this model.

        Raises:
            ConfigurationError: if the string is not valid TOML or does not
                match this model.
        """
        try:
            return cls.from_dict(toml.loads(s, **kwargs))
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f'invalid TOML: {e}')
        except SerdeError as e:
            raise ConfigurationError(f'invalid {cls.__name__.lower()}: {e}')

    @classmethod
    def from_path(cls, p, **kwargs):
        """
        Load the model from a file path.

        Args:
            p (str): the file path to read from.
            **kwargs: extra keyword arguments to pass directly to `toml.loads`.

        Returns:
            Model: an instance of this model.
        """
        with open(p) as f:
            return cls.from_toml(f.read(), **kwargs)


class Config(Model):
    """
    Represents and defines config for the Flower Password command line.
    """

    length: fields.Optional(fields.Int, default=DEFAULT_LENGTH)
    clipboard: fields.Optional(fields.Bool, default=True)
    timeout: fields.Optional(fields.Int, default=20)
