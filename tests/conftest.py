"""Root test configuration: keep tests isolated from the caller's environment"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test in an empty working directory with no DOCSTORE_* env vars."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)
