"""
Errors used in Flower Password.
"""


class FlowerPasswordError(Exception):
    """
    A base error class.
    """

    def __init__(self, message):
        """
        Create a new FlowerPasswordError.

        Args:
            message (str): the error message.
        """
        super().__init__(message)

    @property
    def message(self):
        """
        Return the error message.
        """
        return self.args[0]

    def __str__(self):
        """
        Return a string representation of this FlowerPasswordError.
        """
        return self.message

    def __repr__(self):
        """
        Return the canonical string representation of this FlowerPasswordError.
        """
        return (
            f'{self.__class__.__module__}.{self.__class__.__name__}({self.message!r})'
        )


class InvalidLength(FlowerPasswordError):
    """
    Raised when a requested password length is outside the supported range.
    """

    def __init__(self, length, minimum=2, maximum=32):
        """
        Create a new InvalidLength error.

        Args:
            length (int): the requested length.
            minimum (int): the smallest supported length.
            maximum (int): the largest supported length.
        """
        super().__init__(
            f'Length must be between {minimum} and {maximum}, got: {length}'
        )
        self.length = length
        self.minimum = minimum
        self.maximum = maximum

    def __repr__(self):
        """
        Return the canonical string representation of this InvalidLength.
        """
        return (
            f'{self.__class__.__module__}.{self.__class__.__name__}({self.length!r})'
        )


class ConfigurationError(FlowerPasswordError):
    """
    An error related to the Flower Password configuration.
    """
