"""Keep CLI tests away from a real ~/.modelhub catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from modelhub.sdk.loader import CATALOG_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CATALOG_ENV_VAR, str(tmp_path / "no-catalog.yaml"))
