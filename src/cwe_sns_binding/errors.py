"""Base exception shared by every failure raised while binding events."""


class BindingError(RuntimeError):
    """Raised when a ``cweSns`` binding cannot be applied to a template."""
