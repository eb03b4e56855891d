"""Tests for the build driver."""

import logging

import pytest

from wc_reactor import Reactor, build
from wc_reactor.codegen import NotFoundError
from wc_reactor.options import BuildOptions, OptionsError
from wc_reactor.reactor import DEBUG_FILE_NAME
from wc_reactor.utils import AnalysisLoadError


class RecordingLogger:
    """Minimal logger object collecting messages by level."""

    def __init__(self):
        self.messages = []

    def _log(self, level, msg, *args):
        self.messages.append((level, msg % args if args else msg))

    def info(self, msg, *args):
        self._log("info", msg, *args)

    def warning(self, msg, *args):
        self._log("warning", msg, *args)

    def error(self, msg, *args):
        self._log("error", msg, *args)


@pytest.fixture
def build_options(analysis_file, tmp_path, quiet_logger):
    return {
        "web_component": str(analysis_file),
        "dest": str(tmp_path / "build"),
        "logger": quiet_logger,
    }


class TestBuild:
    def test_component_modules(self, build_options, tmp_path):
        result = Reactor(build_options).build()

        assert result.success
        dest = tmp_path / "build"
        assert (dest / "TestElement" / "TestElement.js").is_file()
        assert (dest / "TestElement" / "index.js").is_file()
        assert (dest / "OtherElement" / "OtherElement.js").is_file()
        assert (dest / "WebComponentsImports.js").is_file()
        assert result.metadata["dest"] == str(dest)
        assert result.metadata["written"][-1] == str(dest / "WebComponentsImports.js")

    def test_selected_component(self, build_options, tmp_path):
        build_options["react_components"] = ["other-element"]
        result = Reactor(build_options).build()

        assert result.metadata["components"] == ["other-element"]
        assert not (tmp_path / "build" / "TestElement").exists()

    def test_bundle(self, build_options, tmp_path):
        build_options.update({"bundle": True, "bundle_name": "Elements.js"})
        result = Reactor(build_options).build()

        assert result.success
        assert sorted(path.name for path in (tmp_path / "build").iterdir()) == ["Elements.js"]
        content = (tmp_path / "build" / "Elements.js").read_text(encoding="utf-8")
        assert "export class TestElement extends React.Component {" in content
        assert "export class OtherElement extends React.Component {" in content

    def test_default_dest(self, build_options, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        del build_options["dest"]
        result = Reactor(build_options).build()

        assert result.success
        assert (tmp_path / "build" / "WebComponentsImports.js").is_file()

    def test_accepts_build_options(self, build_options):
        result = Reactor(BuildOptions.from_dict(build_options)).build()
        assert result.success

    def test_build_helper(self, build_options):
        assert build(build_options).success

    def test_logs_to_given_logger(self, build_options):
        build_options["logger"] = recorder = RecordingLogger()
        Reactor(build_options).build()
        messages = [message for _, message in recorder.messages]
        assert "Analyzing Polymer components" in messages
        assert "Building React wrappers for 2 web components" in messages
        assert messages[-1] == "React components ready"


class TestBuildFailures:
    def test_unknown_component(self, build_options, tmp_path):
        build_options["react_components"] = ["missing-element"]
        result = Reactor(build_options).build()

        assert not result.success
        assert isinstance(result.exception, NotFoundError)
        assert "Component missing-element couldn't be found." in result.error_message
        assert not (tmp_path / "build").exists()

    def test_missing_analysis(self, build_options, tmp_path):
        build_options["web_component"] = str(tmp_path / "missing.json")
        result = Reactor(build_options).build()

        assert not result.success
        assert isinstance(result.exception, AnalysisLoadError)

    def test_raise_if_failed(self, build_options):
        build_options["react_components"] = ["missing-element"]
        with pytest.raises(NotFoundError):
            Reactor(build_options).build().raise_if_failed()

    def test_invalid_options(self):
        recorder = RecordingLogger()
        with pytest.raises(OptionsError, match="Options did not pass validation."):
            Reactor({"dest": "out", "logger": recorder})
        assert recorder.messages == [("error", '"web_component" property is required')]

    def test_failure_is_logged(self, build_options):
        build_options["logger"] = recorder = RecordingLogger()
        build_options["react_components"] = ["missing-element"]
        Reactor(build_options).build()
        assert recorder.messages[-1] == (
            "error",
            "Build failed: Component missing-element couldn't be found.",
        )

    def test_no_options(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(OptionsError):
            Reactor()


class TestDebugFile:
    @pytest.fixture(autouse=True)
    def in_tmp_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

    def test_removed_after_success(self, analysis_file, tmp_path):
        result = Reactor(
            {"web_component": str(analysis_file), "dest": "out", "verbose": True}
        ).build()

        assert result.success
        assert not (tmp_path / DEBUG_FILE_NAME).exists()

    def test_kept_after_failure(self, analysis_file, tmp_path):
        result = Reactor(
            {
                "web_component": str(analysis_file),
                "react_components": ["missing-element"],
                "verbose": True,
            }
        ).build()

        assert not result.success
        debug_file = tmp_path / DEBUG_FILE_NAME
        assert debug_file.is_file()
        assert "Component missing-element couldn't be found." in debug_file.read_text(
            encoding="utf-8"
        )

    def test_not_written_with_own_logger(self, build_options, tmp_path):
        build_options["react_components"] = ["missing-element"]
        Reactor(build_options).build()
        assert not (tmp_path / DEBUG_FILE_NAME).exists()

    def test_incomplete_logger_falls_back_to_package_logger(self, analysis_file, tmp_path):
        reactor = Reactor(
            {"web_component": str(analysis_file), "dest": "out", "logger": object()}
        )
        assert reactor.logger is logging.getLogger("wc_reactor")

        result = reactor.build()
        assert result.warnings[0] == (
            "Used logger is missing required functions: info, warning, error"
        )
