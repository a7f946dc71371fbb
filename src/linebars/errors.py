class BarcodeError(ValueError):
    """Data can't be encoded in the requested symbology."""


class InvalidLength(BarcodeError):
    def __init__(self, symbology, length, valid_len):
        self.symbology = symbology
        self.length = length
        self.valid_len = valid_len
        super().__init__(
            "{} accepts {} to {} characters, got {}".format(
                symbology, valid_len.start, valid_len.stop - 1, length
            )
        )


class InvalidCharacter(BarcodeError):
    def __init__(self, symbology, position, char):
        self.symbology = symbology
        self.position = position
        self.char = char
        super().__init__(
            "{!r} at position {} can't be encoded in {}".format(
                char, position, symbology
            )
        )


class UnknownSymbology(BarcodeError):
    def __init__(self, name, available):
        self.name = name
        super().__init__(
            "Unknown barcode encoding {!r}, expected one of: {}".format(
                name, ", ".join(sorted(available))
            )
        )
