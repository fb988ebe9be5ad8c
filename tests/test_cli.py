import subprocess
import sys
from pathlib import Path

import pytest

from simple_component.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write_components(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_bem_command(capsys):
    main(["bem", "btn", "--element", "label", "-m", "primary", "-m", "large"])
    assert capsys.readouterr().out == "btn__label btn__label--primary btn__label--large\n"


def test_bemx_command(capsys):
    main(["bemx", "btn", "--parent", "menu-item", "-m", "primary", "-p", "expanded"])
    assert capsys.readouterr().out == "btn btn--primary menu-item__btn menu-item__btn--expanded\n"


def test_bemx_command_reports_wrapped_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["bemx", " "])
    assert excinfo.value.code == "[BEMX] [BEM] Invalid block name: cannot be empty."


def test_render_command_prints_html(tmp_path: Path, capsys):
    path = _write_components(
        tmp_path / "c.yaml",
        "- tag: p\n  id: intro\n  contents: ['a < b']\n- tag: hr\n  closed: false\n",
    )
    main(["render", str(path)])
    assert capsys.readouterr().out == '<p id="intro">\na &lt; b\n</p>\n<hr>\n'


def test_render_command_writes_page(tmp_path: Path):
    path = _write_components(
        tmp_path / "c.yaml",
        "page:\n  title: From file\ncomponents:\n  - tag: p\n    contents: [hello]\n",
    )
    out = tmp_path / "out" / "index.html"
    main(["render", str(path), "--page", "--title", "Override", "--out", str(out)])
    html_text = out.read_text(encoding="utf-8")
    assert "<title>Override</title>" in html_text
    assert "<p>\nhello\n</p>" in html_text


def test_render_command_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit, match="Components file not found"):
        main(["render", str(tmp_path / "nope.yaml")])


def test_render_command_invalid_component(tmp_path: Path):
    path = _write_components(tmp_path / "c.yaml", "- tag: '  '\n")
    with pytest.raises(SystemExit, match="The tag of this component is empty"):
        main(["render", str(path)])


def test_validate_command(tmp_path: Path, capsys):
    good = _write_components(tmp_path / "good.yaml", "- tag: p\n- tag: div\n")
    main(["validate", str(good)])
    assert "Validated 2 component(s)" in capsys.readouterr().out

    bad = _write_components(
        tmp_path / "bad.yaml",
        "- tag: p\n- tag: span\n  aria: {label: ''}\n- tag: div\n  bem: {block: ''}\n",
    )
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(bad)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "component 2 <span>: An aria value cannot be empty" in err
    assert "component 3 <div>: [BEM] Invalid block name" in err


def test_no_command_prints_help(capsys):
    main([])
    assert "usage:" in capsys.readouterr().out


def test_module_entrypoint():
    result = subprocess.run(
        [sys.executable, "-m", "simple_component.cli", "render", str(REPO_ROOT / "config" / "user_card.yaml")],
        check=True,
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )
    assert '<label class="label user-card__label user-card__label--name">\nAkido\n</label>' in result.stdout
