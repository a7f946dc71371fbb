from .encoding import BarcodeEncoding, Msi, encoding_classes, get_encoding
from .encoding.helpers import join_slices, runs
from .encoding.msi import ENCODINGS, LEFT_GUARD, RIGHT_GUARD
from .errors import (
    BarcodeError,
    InvalidCharacter,
    InvalidLength,
    UnknownSymbology,
)

__version__ = "0.1.0"
