import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env and NS_FANOUT_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("NS_FANOUT_"):
            monkeypatch.delenv(key, raising=False)
