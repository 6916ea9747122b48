import textwrap
from pathlib import Path

import pytest

UNATTEND_NS = "urn:schemas-microsoft-com:unattend"

TEMPLATE = textwrap.dedent(
    f"""\
    <?xml version="1.0" encoding="utf-8"?>
    <unattend xmlns="{UNATTEND_NS}">
      <settings pass="specialize">
        <component name="Microsoft-Windows-Deployment"/>
      </settings>
      <Extensions>
        <ExtractScript>param($Document);</ExtractScript>
        {{entries}}
      </Extensions>
    </unattend>
    """
)


def write_template(path: Path, entries: str = "") -> Path:
    path.write_text(TEMPLATE.format(entries=entries))
    return path


def write_mapping(path: Path, rows: list[tuple[str, str]]) -> Path:
    lines = ["FileOrigin,FileDestination"]
    lines += [f"{origin},{destination}" for origin, destination in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture()
def workspace(tmp_path, monkeypatch):
    """A working directory with a template and three scripts."""
    monkeypatch.chdir(tmp_path)
    write_template(tmp_path / "autounattend_template.xml")
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    (scripts / "a.ps1").write_text("Write-Host 'a'\n")
    (scripts / "b.cmd").write_text("@echo off\r\necho b\r\n")
    (scripts / "c.ps1").write_text("if ($x -lt 1 -and $y) { '<ok>' }\n")
    return tmp_path
