from ..errors import UnknownSymbology
from .encoding import BarcodeEncoding
from .msi import Msi

encoding_classes = {
    "msi": Msi,
}


def get_encoding(name):
    """Returns encoder class registered for symbology name"""
    encoding = encoding_classes.get(name)
    if encoding is None:
        raise UnknownSymbology(name, encoding_classes)
    return encoding
