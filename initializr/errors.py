"""Error kinds raised by the wizard components."""


class InitializrError(Exception):
    """Base class for every error the wizard reports to the user."""


class FetchError(InitializrError):
    """Metadata could not be retrieved: transport, HTTP status or body shape."""


class SchemaError(InitializrError):
    """A metadata category is missing or does not have the expected shape."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class SpawnError(InitializrError):
    """The external scaffolding tool could not be started."""
