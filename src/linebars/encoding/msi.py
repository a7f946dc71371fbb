"""Encoder for MSI (Modified Plessey) barcodes.

MSI is used mostly for inventory control, marking storage containers
and shelves in warehouses. It encodes digits only and ends with
a modulo 10 check digit.
"""
import logging

from .encoding import BarcodeEncoding
from .helpers import join_slices

logger = logging.getLogger(__name__)

# every digit is 4 binary cells, 0 cell is 100, 1 cell is 110
PATTERNS = (
    0b100100100100,  # 0
    0b100100100110,  # 1
    0b100100110100,  # 2
    0b100100110110,  # 3
    0b100110100100,  # 4
    0b100110100110,  # 5
    0b100110110100,  # 6
    0b100110110110,  # 7
    0b110100100100,  # 8
    0b110100100110,  # 9
)

CODE_BITLENGTH = 12

LEFT_GUARD = (1, 1, 0)
RIGHT_GUARD = (1, 0, 0, 1)

ENCODINGS = tuple(
    tuple(BarcodeEncoding.bits(pattern, CODE_BITLENGTH))
    for pattern in PATTERNS
)

MOD_10 = 10


class Msi(BarcodeEncoding):
    """Encoder for MSI barcodes with modulo 10 check digit.

    :param str data:        1 to 49 digits
    :raises InvalidLength:  Data is empty or longer than 49 digits
    :raises InvalidCharacter: Data contains something else than 0-9
    """
    left_guard = LEFT_GUARD
    right_guard = RIGHT_GUARD
    encodings = ENCODINGS

    def __init__(self, data):
        digits = []
        for char in self.parse(data):
            digit = ord(char) - ord("0")
            assert 0 <= digit <= 9, \
                "{!r} passed validation but is not a digit".format(char)
            digits.append(digit)
        self.digits = tuple(digits)
        logger.debug("MSI barcode for %d digits", len(self.digits))

    def __len__(self):
        return len(self.digits)

    def __repr__(self):
        return "{}({!r})".format(
            type(self).__name__,
            "".join(str(digit) for digit in self.digits)
        )

    @classmethod
    def valid_len(cls):
        # MSI has no fixed length, 49 digits is an arbitrary cap
        return range(1, 50)

    @classmethod
    def valid_chars(cls):
        return frozenset("0123456789")

    def check_digit(self):
        """Computes modulo 10 check digit

Digits at even distance from the right end are doubled and the two
decimal digits of the product are summed, the other digits are added
as they are. Returns 10, not 0, when the sum is a multiple of 10.

    :return:                Integer 1-10"""
        checksum = 0
        for distance, digit in enumerate(reversed(self.digits)):
            if distance % 2 == 0:
                doubled = digit * 2
                checksum += doubled // MOD_10 + doubled % MOD_10
            else:
                checksum += digit
        check = MOD_10 - checksum % MOD_10
        logger.debug("MSI checksum %d, check digit %d", checksum, check)
        return check

    def encode(self):
        """Encodes digits and check digit to a list of bits,
1 for black bar, 0 for background"""
        payload = join_slices(*(self.encodings[digit] for digit in self.digits))
        # check digit 10 has no pattern of its own, it is drawn as 0
        check = self.check_digit() % MOD_10
        modules = join_slices(
            self.left_guard,
            payload,
            self.encodings[check],
            self.right_guard,
        )
        logger.debug("MSI barcode encoded to %d modules", len(modules))
        return modules
