"""Error types raised while loading input files and writing the report."""


class TopUpError(Exception):
    """Base class for every fatal error of a report run."""


class LoadError(TopUpError):
    """An input file could not be turned into validated records."""

    def __init__(self, path, message):
        self.path = path
        super().__init__(message)


class NotFoundError(LoadError):
    def __init__(self, path):
        super().__init__(path, f"Error - {path} does not exist")


class ReadFailureError(LoadError):
    def __init__(self, path, reason):
        self.reason = reason
        super().__init__(path, f"Error reading file {path}: {reason}")


class ParseFailureError(LoadError):
    def __init__(self, path, reason):
        self.reason = reason
        super().__init__(path, f"Error - {path} is not valid JSON: {reason}")


class SchemaViolationError(LoadError):
    """Raised when parsed data does not match the declared record shape.

    ``location`` is the path of the offending value (``[2].email``, or an
    empty string for the top-level value) and ``detail`` the expectation it
    failed.
    """

    def __init__(self, location, detail, path=None):
        self.location = location
        self.detail = detail
        super().__init__(path, self._build_message(path))

    def _build_message(self, path):
        where = self.location or "top-level value"
        if path is None:
            return f"Invalid format at {where}: {self.detail}"
        return f"Error - {path} is in an invalid format at {where}: {self.detail}"

    def with_path(self, path):
        """Return a copy of this error that names the file it came from."""
        return SchemaViolationError(self.location, self.detail, path=path)


class WriteFailureError(TopUpError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing report to {path}: {reason}")
