from __future__ import annotations

from pathlib import Path

from actiondocs.core.paths import repo_relative
from actiondocs.core.yaml_utils import load_yaml


def test_repo_relative_uses_posix_paths_inside_the_root(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    assert repo_relative(root, root / "setup-tool" / "README.md") == "setup-tool/README.md"


def test_repo_relative_falls_back_to_the_path_outside_the_root(tmp_path: Path) -> None:
    root = (tmp_path / "repo").resolve()
    outside = tmp_path / "elsewhere.md"
    assert repo_relative(root, outside) == str(outside)


def test_load_yaml_resolves_scalars_with_the_core_schema(tmp_path: Path) -> None:
    path = tmp_path / "doc.yml"
    path.write_text(
        "on: push\nyes: 1\nflag: True\ncount: 12\nhex: 0x1f\nratio: 0.5\n"
        "mode: 0755\nwhen: 2024-01-01\ntime: 1:30\nnothing: ~\n",
        encoding="utf-8",
    )
    assert load_yaml(path) == {
        "on": "push",
        "yes": 1,
        "flag": True,
        "count": 12,
        "hex": 31,
        "ratio": 0.5,
        "mode": "0755",
        "when": "2024-01-01",
        "time": "1:30",
        "nothing": None,
    }
