from __future__ import annotations

import pytest
from pydantic import ValidationError

from stencil.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    USER_AGENT_ENV,
    PackageManager,
    detect,
    detect_from_environment,
    dev_directions,
)


def test_detect_parses_first_token():
    assert detect("npm/9.1.0 node/v20.1.0 darwin arm64") == PackageManager(
        name="npm", version="9.1.0"
    )


def test_detect_yarn_user_agent():
    manager = detect("yarn/1.22.19 npm/? node/v18.17.0 linux x64")
    assert manager is not None
    assert manager.name == "yarn"
    assert manager.version == "1.22.19"


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "malformed", "/1.0.0 node/v20", "npm/ node/v20", " yarn/1.0.0 node/v20"],
)
def test_detect_returns_none_for_unusable_input(value):
    assert detect(value) is None


def test_detect_from_environment_reads_user_agent(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(USER_AGENT_ENV, "pnpm/8.6.0 npm/? node/v20.3.0 linux x64")
    assert detect_from_environment() == PackageManager(name="pnpm", version="8.6.0")


def test_detect_from_environment_accepts_mapping():
    assert detect_from_environment({}) is None
    assert detect_from_environment({USER_AGENT_ENV: "bun/1.0.0"}).name == "bun"


def test_dev_directions():
    assert dev_directions("yarn") == ["yarn", "yarn dev"]
    assert dev_directions("pnpm") == ["pnpm install", "pnpm run dev"]
    assert dev_directions(DEFAULT_PACKAGE_MANAGER) == ["npm install", "npm run dev"]


def test_package_manager_is_frozen():
    manager = PackageManager(name="npm", version="9.0.0")
    with pytest.raises(ValidationError):
        manager.name = "yarn"


def test_package_manager_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        PackageManager.model_validate({"name": "npm", "version": "9.0.0", "os": "linux"})
