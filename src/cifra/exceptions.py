class CifraError(Exception):
    """Base exception for cifra."""


class FetchError(CifraError):
    """Raised when an HTTP request for a remote document fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class DocumentReadError(CifraError):
    """Raised when a local document cannot be read or decoded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Could not read {location}: {reason}")


class LibraryError(CifraError):
    """Raised when the JSON library file is malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Library error in {path}: {reason}")


class UnknownClassifierError(CifraError):
    """Raised when no line classifier is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No classifier registered as: {name}")
