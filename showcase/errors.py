# showcase/errors.py


class ManifestError(Exception):
    """A category manifest could not be turned into project records."""


class SourceUnavailable(ManifestError):
    """The manifest could not be fetched (network, HTTP status, missing file)."""


class MalformedSource(ManifestError):
    """The manifest was fetched but is not JSON of the expected shape."""
