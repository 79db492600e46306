"""Error types raised while reading jobs, decoding images and writing results.

All of them carry the offending path plus the underlying cause, and keep
their constructor arguments in ``args`` so they survive pickling across
worker processes.
"""


class ImageCompareError(Exception):
    """Base class for every error this package raises on purpose."""

    def __init__(self, path: str, reason: str):
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"'{self.path}': {self.reason}"


class JobTableUnreadable(ImageCompareError):
    """The job table can't be opened or parsed."""

    def __str__(self) -> str:
        return f"Cannot read job table '{self.path}': {self.reason}"


class UnsupportedFormat(ImageCompareError):
    """The image extension is not one of the known raster formats."""

    def __init__(self, path: str, extension: str):
        super().__init__(path, extension)
        self.extension = extension

    def __str__(self) -> str:
        ext = self.extension or "<none>"
        return f"Unsupported image type '{ext}' for '{self.path}'"


class DecodeError(ImageCompareError):
    """The file has a known extension but its bytes can't be decoded."""

    def __str__(self) -> str:
        return f"Cannot decode '{self.path}': {self.reason}"


class ResultsWriteError(ImageCompareError):
    """The results table can't be created or written."""

    def __str__(self) -> str:
        return f"Cannot write results '{self.path}': {self.reason}"
