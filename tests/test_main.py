"""
tests/test_main.py
==================
Headless runner end to end against a throwaway SQLite file.
"""
import pytest

import main
from core.logging_config import LoggingConfig
from database.models import reset_engine


@pytest.fixture
def run(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(LoggingConfig, "setup_logging", staticmethod(lambda **kwargs: None))
    monkeypatch.setenv("FLUID_SPACE_DATA_DIR", str(tmp_path))
    db_url = f"sqlite:///{tmp_path / 'space.db'}"

    def _run(*args):
        code = main.main(["--db", db_url, *args])
        return code, capsys.readouterr().out

    yield _run
    reset_engine()


class TestMain:

    def test_prints_class_css(self, run):
        code, out = run()
        assert code == 0
        assert ".space-md {\n  margin: clamp(8px, 6.7952px + 0.3213vw, 12px);\n}" in out

    def test_variables_in_rem(self, run):
        code, out = run("--kind", "vars", "--unit", "rem")
        assert code == 0
        assert "  --sp-md: clamp(0.500rem, 0.4247rem + 0.3213vw, 0.750rem);" in out

    def test_selected_entry(self, run):
        code, out = run("--selected", "md")
        assert code == 0
        assert out.strip() == ".space-md {\n  margin: clamp(8px, 6.7952px + 0.3213vw, 12px);\n}"

    def test_unknown_selected_entry(self, run):
        code, _ = run("--selected", "huge")
        assert code == 2

    def test_preview(self, run):
        code, out = run("--preview", "768")
        assert "/* Tablet (portrait) @ 768px */" in out
        assert "/* md: 9px (anchor) */" in out

    def test_save_persists_overrides(self, run):
        run("--min-base", "10", "--save")
        _, out = run("--selected", "md")
        assert "clamp(10px," in out

    def test_preview_labels_scale_ratios(self, run):
        _, out = run("--preview", "768")
        assert "/* scale: 1.125 Major Second -> 1.250 Major Third */" in out

    @pytest.mark.parametrize("option,value,expected", [
        ("--max-scale", "minor-third", 1.2),
        ("--max-scale", "Perfect Fourth", 1.333),
        ("--min-scale", "1.1", 1.1),
    ])
    def test_scale_presets(self, option, value, expected):
        args = main.build_parser().parse_args([option, value])
        assert getattr(args, option[2:].replace("-", "_")) == expected

    def test_unknown_scale_preset(self, capsys):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["--max-scale", "tritone"])
        assert "minor-third" in capsys.readouterr().err

    def test_preset_changes_output(self, run):
        _, out = run("--min-scale", "major-second", "--max-scale", "minor-third", "--selected", "lg")
        assert "clamp(9px," in out
        assert "14px);" in out
