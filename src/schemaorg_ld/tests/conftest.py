"""
Pytest fixtures for schemaorg_ld tests.
"""

import pytest

from schemaorg_ld.config import LEGACY_MINIFIED_ENV, reset_config


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate configuration: empty cwd and home config dir, no related env vars."""
    for var in (LEGACY_MINIFIED_ENV, "SCHEMAORG_LD_CONFIG",
                "SCHEMAORG_LD_minified_json", "SCHEMAORG_LD_MINIFIED_JSON",
                "SCHEMAORG_LD_production", "SCHEMAORG_LD_PRODUCTION"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("schemaorg_ld.config.HOME_CONFIG_DIR", tmp_path / "home")
    reset_config()
    yield tmp_path
    reset_config()


@pytest.fixture
def event_document():
    return {
        "@context": "http://schema.org",
        "@type": "Event",
        "name": "Jazz Night",
        "startDate": "2026-11-01T20:00",
        "location": {
            "@type": "Place",
            "name": "Town Hall",
            "address": {"@type": "PostalAddress", "address_locality": "Leipzig"},
        },
        "performer": [
            {"@type": "Person", "name": "Ada"},
            {"@type": "Organization", "name": "Big Band"},
        ],
    }
