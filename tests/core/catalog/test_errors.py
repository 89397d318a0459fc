"""Tests for the catalog error hierarchy."""

from modelhub.core.catalog.errors import (
    DuplicateDefaultError,
    EmptyBackendError,
    InvalidSyntaxError,
    ModelNotFoundError,
    ModelRegistryError,
    RegistryMisconfiguredError,
    UnknownBaseModelError,
)


class TestErrorHierarchy:
    def test_all_derive_from_base(self) -> None:
        for cls in (
            InvalidSyntaxError,
            UnknownBaseModelError,
            ModelNotFoundError,
            EmptyBackendError,
            DuplicateDefaultError,
            RegistryMisconfiguredError,
        ):
            assert issubclass(cls, ModelRegistryError)


class TestInvalidSyntaxError:
    def test_message_with_reason(self) -> None:
        err = InvalidSyntaxError("", "model syntax cannot be empty")
        assert err.text == ""
        assert "cannot be empty" in str(err)

    def test_message_mentions_input(self) -> None:
        err = InvalidSyntaxError("a/b/c")
        assert "'a/b/c'" in str(err)
        assert "provider/model" in str(err)


class TestModelNotFoundError:
    def test_with_provider(self) -> None:
        err = ModelNotFoundError("gpt-9", "openai")
        assert err.identifier == "gpt-9"
        assert err.provider == "openai"
        assert str(err) == "model 'gpt-9' not found for provider 'openai'"

    def test_without_provider(self) -> None:
        err = ModelNotFoundError("gpt-9")
        assert err.provider is None
        assert "not found in registry" in str(err)


class TestOtherErrors:
    def test_unknown_base_model(self) -> None:
        err = UnknownBaseModelError("ghost")
        assert err.model_id == "ghost"
        assert "ghost" in str(err)

    def test_empty_backend(self) -> None:
        err = EmptyBackendError("bedrock")
        assert err.backend == "bedrock"
        assert "bedrock" in str(err)

    def test_duplicate_default(self) -> None:
        err = DuplicateDefaultError("a", "b")
        assert err.existing_id == "a"
        assert err.new_id == "b"
        assert "'a'" in str(err) and "'b'" in str(err)

    def test_misconfigured(self) -> None:
        err = RegistryMisconfiguredError("no models")
        assert err.detail == "no models"
        assert "no models" in str(err)
