import json
from pathlib import Path

import pytest

from tagmaker.cli import build_parser, main

TREE_YAML = """
tag: div
classes: card
id: intro
children:
  - tag: h1
    children: Welcome
  - tag: p
    children:
      - "5 > 3 & 2 < 4"
  - kind: wrap
    tags: [blockquote, p]
    children: [quoted]
"""


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_render_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", TREE_YAML)

    main(["render", "--in", str(tree)])

    out = capsys.readouterr().out
    assert out == (
        '<div id="intro" class="card"><h1>Welcome</h1><p>5 &gt; 3 &amp; 2 &lt; 4</p>'
        "<blockquote><p>quoted</p></blockquote></div>\n"
    )


def test_render_to_file_with_json_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = tmp_path / "tree.json"
    tree.write_text(json.dumps({"tag": "ul", "children": [{"tag": "li", "children": ["One"]}]}), encoding="utf-8")
    output = tmp_path / "out" / "list.html"

    main(["render", "--in", str(tree), "--out", str(output)])

    assert output.read_text(encoding="utf-8") == "<ul><li>One</li></ul>\n"
    assert "Rendered" in capsys.readouterr().out


def test_render_pretty_flags_override_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: div\nchildren:\n  - tag: p\n    children: x\n")
    config = _write(tmp_path / "render.yaml", "formatOutput: false\nindent: 8\n")

    main(["render", "--in", str(tree), "--config", str(config), "--pretty", "--indent", "3"])

    out = capsys.readouterr().out
    assert "\n   <p>" in out
    assert "".join(out.split()) == "<div><p>x</p></div>"


def test_render_uses_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: div\nchildren:\n  - tag: p\n    children: x\n")
    config = _write(tmp_path / "render.yaml", "formatOutput: true\nindent: 4\n")

    main(["render", "--in", str(tree), "--config", str(config)])

    assert "\n    <p>" in capsys.readouterr().out


def test_render_reports_void_violation(tmp_path: Path) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: img\nchildren: [caption]\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tree)])

    assert "Cannot add children to a void element <img>." in str(excinfo.value.code)


def test_render_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tmp_path / "missing.yaml")])

    assert "File not found" in str(excinfo.value.code)


def test_render_reports_invalid_yaml(tmp_path: Path) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: [unclosed\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tree)])

    assert "Could not parse" in str(excinfo.value.code)


def test_render_reports_directory_input(tmp_path: Path) -> None:
    folder = tmp_path / "trees"
    folder.mkdir()

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(folder)])

    assert "Could not read" in str(excinfo.value.code)


def test_render_reports_undecodable_input(tmp_path: Path) -> None:
    tree = tmp_path / "tree.yaml"
    tree.write_bytes(b"\xff\xfetag: div\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tree)])

    assert "Could not read" in str(excinfo.value.code)


def test_render_reports_invalid_config(tmp_path: Path) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: div\n")
    config = _write(tmp_path / "render.yaml", "indent: -2\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tree), "--config", str(config)])

    assert "Invalid render options" in str(excinfo.value.code)


def test_validate_counts_elements(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", TREE_YAML)

    main(["validate", "--in", str(tree)])

    assert capsys.readouterr().out.strip() == "Validated tree with 5 element(s)."


def test_validate_lists_schema_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: div\nchildren:\n  - kind: bogus\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", "--in", str(tree)])

    assert excinfo.value.code == 1
    assert str(tree) in capsys.readouterr().err


def test_validate_reports_void_violation(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write(tmp_path / "tree.yaml", "tag: br\nchildren: [x]\n")

    with pytest.raises(SystemExit):
        main(["validate", "--in", str(tree)])

    assert "void element <br>" in capsys.readouterr().err


def test_parser_requires_input() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["render"])


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "usage: tagmaker" in capsys.readouterr().out
