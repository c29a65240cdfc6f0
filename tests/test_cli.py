"""Tests for the droidkit CLI."""

from click.testing import CliRunner

from droidkit.__main__ import cli
from droidkit.core.events import events
from droidkit.models import DirectiveKind


class TestKinds:
    def test_lists_every_kind(self):
        result = CliRunner().invoke(cli, ["kinds"])
        assert result.exit_code == 0
        for kind in DirectiveKind:
            assert kind.value in result.output


class TestResolve:
    def test_legacy_java(self):
        result = CliRunner().invoke(cli, ["resolve", "src/android/Foo.java", "src/com/example"])
        assert result.exit_code == 0
        assert "app/src/main/java/com/example/Foo.java" in result.output

    def test_native_library(self):
        result = CliRunner().invoke(cli, ["resolve", "libfoo.so", "libs/armeabi"])
        assert "app/src/main/jniLibs/armeabi/libfoo.so" in result.output

    def test_verbose_flag(self):
        try:
            result = CliRunner().invoke(cli, ["-v", "resolve", "Foo.java", "app"])
            assert result.exit_code == 0
            assert events.verbose is True
        finally:
            events.verbose = False
