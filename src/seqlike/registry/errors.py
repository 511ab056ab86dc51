"""Exceptions for backend registry operations."""


class RegistryError(Exception):
    """Base class for backend registry errors.

    Attributes:
        label (str): The backend label involved (e.g. "chunk").
    """

    def __init__(self, label: str, message: str | None = None):
        super().__init__(message or f"backend registry error for '{label}'")
        self.label = label


class BackendAlreadyRegisteredError(RegistryError):
    """Conflict: a backend is already registered under this label."""

    def __init__(self, label: str):
        super().__init__(label, f"Backend '{label}' is already registered.")


class UnknownBackendError(RegistryError):
    """No backend is registered under this label.

    Attributes:
        label (str): The label that was requested.
        known (tuple[str, ...]): Labels that are registered.
    """

    def __init__(self, label: str, known: tuple[str, ...] = ()):
        known_str = ", ".join(known) if known else "<none>"
        super().__init__(
            label, f"Unknown backend '{label}' (registered: {known_str})."
        )
        self.known = known
