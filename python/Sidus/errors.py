"""
Exceptions raised while reading and decoding a star catalog.

Every failure is terminal for a conversion run, main.py turns
them into a single diagnostic line and a non-zero exit status.
"""


class CatalogError(Exception):
    """Base class for all catalog decoding failures"""


class CatalogIOError(CatalogError):
    """The catalog file could not be opened or read"""


class TruncatedInput(CatalogError):
    """Buffer is shorter than the header or the declared record region"""


class AmbiguousFormat(CatalogError):
    """Neither byte order gives a plausible magnitude count"""


class WrongEndianness(CatalogError):
    """The requested byte order gives an implausible magnitude count"""


class EpochMismatch(CatalogError):
    """Requested epoch differs from the one encoded in the header"""


class InvalidHeader(CatalogError):
    """A header field is outside its known range"""


class TooFewMagnitudes(CatalogError):
    """Header declares no magnitude fields per star"""


class RecordOverrun(CatalogError):
    """
    A record layout needs more bytes than the declared stride.
    """

    def __init__(self, record_offset: int, stride: int, position: int):
        self.record_offset = record_offset
        self.stride = stride
        self.position = position
        super().__init__(
            f"record at offset {record_offset} needs {position} bytes "
            f"but bytes per star is {stride}"
        )
