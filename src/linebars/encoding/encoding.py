from abc import ABC, abstractmethod

from ..errors import InvalidCharacter, InvalidLength


class BarcodeEncoding(ABC):
    """Linear barcode base class

Subclasses declare which data they accept through ``valid_len`` and
``valid_chars``. ``parse`` checks data against those rules and is shared
by every symbology."""
    dimensionality = "linear"

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    @abstractmethod
    def valid_len(cls):
        """Range of accepted data lengths"""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def valid_chars(cls):
        """Set of characters the symbology can encode"""
        raise NotImplementedError

    @classmethod
    def parse(cls, data):
        """Checks data against the symbology rules

    :param str data:        Data to encode
    :return:                The same data, unchanged
    :raises InvalidLength:  Data is too short or too long
    :raises InvalidCharacter: Data contains a character outside
                            of the symbology alphabet"""
        valid_len = cls.valid_len()
        if len(data) not in valid_len:
            raise InvalidLength(cls.__name__, len(data), valid_len)
        valid_chars = cls.valid_chars()
        for position, char in enumerate(data):
            if char not in valid_chars:
                raise InvalidCharacter(cls.__name__, position, char)
        return data

    @abstractmethod
    def encode(self):
        raise NotImplementedError

    @classmethod
    def bars(cls, data):
        """Encodes data to series of bits, 1 for black bar, 0 for background"""
        yield from cls(data).encode()
