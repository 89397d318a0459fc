"""Shared error types for the model catalog."""


class ModelRegistryError(Exception):
    """Base error for all catalog and resolution failures."""


class InvalidSyntaxError(ModelRegistryError):
    """A ``provider/model`` string is malformed."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        msg = f"Invalid model syntax: {text!r} (use provider/model)"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownBaseModelError(ModelRegistryError):
    """An alias was registered for a model id the registry does not hold."""

    def __init__(self, model_id: str) -> None:
        self.model_id = model_id
        super().__init__(f"Base model {model_id!r} not found")


class ModelNotFoundError(ModelRegistryError):
    """Neither the alias table nor an exact id lookup produced a model."""

    def __init__(self, identifier: str, provider: str | None = None) -> None:
        self.identifier = identifier
        self.provider = provider
        if provider:
            msg = f"model {identifier!r} not found for provider {provider!r}"
        else:
            msg = f"model {identifier!r} not found in registry"
        super().__init__(msg)


class EmptyBackendError(ModelRegistryError):
    """Backend-based resolution found no models registered for the backend."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"No models registered for backend {backend!r}")


class DuplicateDefaultError(ModelRegistryError):
    """A second model was marked as the registry default."""

    def __init__(self, existing_id: str, new_id: str) -> None:
        self.existing_id = existing_id
        self.new_id = new_id
        super().__init__(
            f"Cannot mark {new_id!r} as default: {existing_id!r} is already the default model"
        )


class RegistryMisconfiguredError(ModelRegistryError):
    """The registry cannot produce a default model.

    Raised when no model is flagged as default and the hardcoded fallback
    is not registered either.  This is a population bug, not user error.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Registry misconfigured" + (f": {detail}" if detail else ""))
