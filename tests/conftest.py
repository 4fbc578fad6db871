from __future__ import annotations

from pathlib import Path

import pytest

THING_A = """<?xml version="1.0" encoding="utf-8"?>
<Defs>
  <ThingDef>
    <defName>A</defName>
    <label>steel thing</label>
    <costList>
      <Steel>10</Steel>
    </costList>
  </ThingDef>
</Defs>
"""

THING_B = """<?xml version="1.0" encoding="utf-8"?>
<Defs>
  <ThingDef ParentName="A">
    <defName>B</defName>
    <comps>
      <li Class="SomeMod.SpecialThing">
        <compClass>CompGlower</compClass>
      </li>
    </comps>
  </ThingDef>
  <recipeDef>
    <defName>Make_B</defName>
    <products>
      <B>1</B>
    </products>
  </recipeDef>
</Defs>
"""

BROKEN = """<?xml version="1.0" encoding="utf-8"?>
<Defs>
  <ThingDef>
    <defName>Broken</defName>
  </ThingDefx>
  <ThingDef><defName>NeverSeen</defName></ThingDef>
</Defs>
"""


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def game_root(tmp_path: Path) -> Path:
    """A minimal installation: Data/Core with two good files, one broken file and a non-XML file."""
    root = tmp_path / "Game"
    defs_dir = root / "Data" / "Core" / "Defs"
    write_file(defs_dir / "Things_A.xml", THING_A)
    write_file(defs_dir / "Things_B.xml", THING_B)
    write_file(defs_dir / "Broken.xml", BROKEN)
    write_file(defs_dir / "readme.txt", "not markup")
    write_file(root / "Version.txt", "1.5.4104 rev435\n")
    return root
