from __future__ import annotations

from pathlib import Path

ROOT_README = """# Actions

Intro text that must survive.

<!-- start action docs -->
stale content
<!-- end action docs -->

## Footer
"""

UNIT_README = """# {name}

<!-- start inputs -->
<!-- end inputs -->

<!-- start outputs -->
<!-- end outputs -->
"""


def write_action(repo: Path, identifier: str, definition: str, readme: str | None = None) -> Path:
    unit = repo / identifier
    unit.mkdir(parents=True, exist_ok=True)
    (unit / "action.yml").write_text(definition, encoding="utf-8")
    if readme is not None:
        (unit / "README.md").write_text(readme, encoding="utf-8")
    return unit
