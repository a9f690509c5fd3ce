from __future__ import annotations

import socket
from pathlib import Path

import pytest
from hypothesis import settings

from actiondocs.config import GeneratorConfig
from actiondocs.core.context import RunContext
from helpers import ROOT_README, UNIT_README, write_action

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile("action-docs", deadline=None, database=None)
settings.load_profile("action-docs")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig(formatter=())


@pytest.fixture
def action_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "README.md").write_text(ROOT_README, encoding="utf-8")
    write_action(
        repo,
        "setup-tool",
        "name: b setup\n"
        "description: Install the tool.\n"
        "inputs:\n"
        "  token:\n"
        "    description: Auth token\n"
        "    required: true\n"
        "  version:\n"
        "    description: Tool version\n"
        "    default: lts/*\n"
        "outputs:\n"
        "  cache-hit:\n"
        "    description: Whether the cache was hit\n",
        UNIT_README.format(name="setup-tool"),
    )
    write_action(repo, "announce", "name: A announce\n")
    return repo


@pytest.fixture
def run_ctx(action_repo: Path) -> RunContext:
    return RunContext.from_args(str(action_repo), "text", quiet=True, run_id="test-run")
