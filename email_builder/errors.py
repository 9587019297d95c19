"""Exceptions email_builder."""


class LayoutError(ValueError):
    """Layout invalide (plusieurs blocs répétés, syntaxe, binding manquant)."""


class BackendError(RuntimeError):
    """Échange HTTP avec le backend en échec (transport ou statut non-2xx)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
