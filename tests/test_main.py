from pathlib import Path

import pytest

from svg_inline.main import main

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SVG_INLINE_CONFIG", str(tmp_path / "absent.json"))


def test_render_file_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "i.svg").write_text(f'<svg xmlns="{SVG_NS}" viewBox="0 0 16 8"/>', encoding="utf-8")
    code = main(
        [
            "--alias",
            f"@icons={tmp_path}",
            "--fill",
            "",
            "file",
            "@icons/i.svg",
            "--width",
            "32",
            "--class",
            "icon",
            "--css",
            "color=red",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == (
        f'<svg xmlns="{SVG_NS}" viewBox="0 0 16 8" width="32" height="16" aria-hidden="true" '
        f'role="img" class="icon" style="color:red"/>'
    )


def test_fallback_from_command_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fallback = tmp_path / "fallback.svg"
    fallback.write_text('<svg id="fb"/>', encoding="utf-8")
    code = main(["--fallback", str(fallback), "file", str(tmp_path / "missing.svg")])
    assert code == 0
    assert 'id="fb"' in capsys.readouterr().out


def test_render_failure_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["file", str(tmp_path / "missing.svg")])
    assert code == 1
    assert "svg-inline:" in capsys.readouterr().err


def test_bad_alias_argument_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--alias", "noequals", "file", "x.svg"])
    assert exc.value.code == 2


def test_unknown_fontawesome_style(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["fa", "house", "--style", "duotone"]) == 1
    assert "duotone" in capsys.readouterr().err
