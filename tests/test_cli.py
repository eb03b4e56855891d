"""Tests for the command line interface."""

import json

import pytest

from wc_reactor.cli import create_parser, main


@pytest.fixture(autouse=True)
def in_tmp_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


class TestParser:
    def test_defaults_leave_options_unset(self):
        args = create_parser().parse_args(["analysis.json"])
        assert args.web_component == "analysis.json"
        assert args.components is None
        assert args.dest is None
        assert args.bundle is None
        assert args.verbose is None

    def test_options(self):
        args = create_parser().parse_args(
            ["a.json", "-c", "x-a", "x-b", "-d", "out", "--bundle", "--bundle-name", "B.js", "-v"]
        )
        assert args.components == ["x-a", "x-b"]
        assert args.dest == "out"
        assert args.bundle is True
        assert args.bundle_name == "B.js"
        assert args.verbose is True


class TestMain:
    def test_builds_every_component(self, analysis_file, tmp_path, capsys):
        assert main([str(analysis_file), "-d", "out"]) == 0
        assert (tmp_path / "out" / "TestElement" / "TestElement.js").is_file()
        assert (tmp_path / "out" / "OtherElement" / "index.js").is_file()
        assert "React component(s) written to out" in capsys.readouterr().out

    def test_default_dest(self, analysis_file, tmp_path):
        assert main([str(analysis_file)]) == 0
        assert (tmp_path / "build" / "WebComponentsImports.js").is_file()

    def test_selected_components(self, analysis_file, tmp_path):
        assert main([str(analysis_file), "-c", "other-element", "-d", "out"]) == 0
        assert sorted(path.name for path in (tmp_path / "out").iterdir()) == [
            "OtherElement",
            "WebComponentsImports.js",
        ]

    def test_bundle(self, analysis_file, tmp_path):
        assert main([str(analysis_file), "--bundle", "--bundle-name", "All.js", "-d", "out"]) == 0
        assert sorted(path.name for path in (tmp_path / "out").iterdir()) == ["All.js"]

    def test_debug_file_removed_after_success(self, analysis_file, tmp_path):
        assert main([str(analysis_file), "-v", "-d", "out"]) == 0
        assert not (tmp_path / "wc-reactor.log").exists()

    def test_unknown_component(self, analysis_file, tmp_path):
        assert main([str(analysis_file), "-c", "missing-element", "-d", "out"]) == 1
        assert not (tmp_path / "out").exists()
        assert (tmp_path / "wc-reactor.log").is_file()

    def test_missing_analysis(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_missing_source(self, capsys):
        assert main([]) == 2
        assert '"web_component" property is required' in capsys.readouterr().out

    def test_config_file(self, analysis_file, tmp_path):
        config = tmp_path / "reactor.json"
        config.write_text(
            json.dumps({"webComponent": str(analysis_file), "dest": "from-config"}),
            encoding="utf-8",
        )
        assert main(["--config", str(config)]) == 0
        assert (tmp_path / "from-config" / "WebComponentsImports.js").is_file()

    def test_arguments_override_config_file(self, analysis_file, tmp_path):
        config = tmp_path / "reactor.json"
        config.write_text(
            json.dumps({"webComponent": str(analysis_file), "dest": "from-config"}),
            encoding="utf-8",
        )
        assert main(["--config", str(config), "-d", "from-args"]) == 0
        assert (tmp_path / "from-args").is_dir()
        assert not (tmp_path / "from-config").exists()

    def test_invalid_config_file(self, tmp_path):
        config = tmp_path / "reactor.json"
        config.write_text("{", encoding="utf-8")
        assert main(["--config", str(config)]) == 2

    def test_invalid_config_values(self, tmp_path):
        config = tmp_path / "reactor.json"
        config.write_text(json.dumps({"webComponent": "a.json", "bundle": "yes"}), encoding="utf-8")
        assert main(["--config", str(config)]) == 2
