"""Tests for copy_file / copy_new_file / symlink_tree."""

import os

import pytest

from droidkit.core.errors import AlreadyExistsError, PathEscapeError, SourceNotFoundError
from droidkit.fs import copy_file, copy_new_file, symlink_tree


@pytest.fixture
def dirs(tmp_path):
    plugin = tmp_path / "plugin"
    project = tmp_path / "project"
    (plugin / "src" / "android").mkdir(parents=True)
    (plugin / "src" / "android" / "Foo.java").write_text("class Foo {}")
    (plugin / "tree" / "sub").mkdir(parents=True)
    (plugin / "tree" / "a.txt").write_text("a")
    (plugin / "tree" / "sub" / "b.txt").write_text("b")
    project.mkdir()
    return plugin, project


class TestCopyFile:
    def test_copies_file_and_creates_parents(self, dirs):
        plugin, project = dirs
        dest = copy_file(plugin, "src/android/Foo.java", project, "app/src/main/java/Foo.java")
        assert dest == project / "app" / "src" / "main" / "java" / "Foo.java"
        assert dest.read_text() == "class Foo {}"
        assert not dest.is_symlink()

    def test_copies_tree(self, dirs):
        plugin, project = dirs
        copy_file(plugin, "tree", project, "out/tree")
        assert (project / "out" / "tree" / "a.txt").read_text() == "a"
        assert (project / "out" / "tree" / "sub" / "b.txt").read_text() == "b"

    def test_overwrites_existing(self, dirs):
        plugin, project = dirs
        (project / "Foo.java").write_text("old")
        copy_file(plugin, "src/android/Foo.java", project, "Foo.java")
        assert (project / "Foo.java").read_text() == "class Foo {}"

    def test_tree_replaces_symlinked_destination(self, dirs, tmp_path):
        plugin, project = dirs
        outside = tmp_path / "outside"
        outside.mkdir()
        os.symlink(outside, project / "out")
        copy_file(plugin, "tree", project, "out")
        assert list(outside.iterdir()) == []
        assert not (project / "out").is_symlink()
        assert (project / "out" / "a.txt").read_text() == "a"

    def test_tree_over_linked_install_keeps_plugin_sources(self, dirs):
        plugin, project = dirs
        copy_file(plugin, "tree", project, "out", link=True)
        (plugin / "tree" / "a.txt").write_text("a2")
        copy_file(plugin, "tree", project, "out")
        assert not (project / "out" / "a.txt").is_symlink()
        assert (project / "out" / "a.txt").read_text() == "a2"
        assert (plugin / "tree" / "a.txt").read_text() == "a2"
        assert not (plugin / "tree" / "a.txt").is_symlink()

    def test_missing_source(self, dirs):
        plugin, project = dirs
        with pytest.raises(SourceNotFoundError):
            copy_file(plugin, "nope.java", project, "nope.java")
        assert list(project.iterdir()) == []

    def test_source_symlink_escape(self, dirs, tmp_path):
        plugin, project = dirs
        secret = tmp_path / "secret.txt"
        secret.write_text("secret")
        os.symlink(secret, plugin / "innocent.txt")
        with pytest.raises(PathEscapeError):
            copy_file(plugin, "innocent.txt", project, "innocent.txt")
        assert not (project / "innocent.txt").exists()

    def test_source_traversal(self, dirs, tmp_path):
        plugin, project = dirs
        (tmp_path / "outside.txt").write_text("x")
        with pytest.raises(PathEscapeError):
            copy_file(plugin, "../outside.txt", project, "outside.txt")

    def test_destination_escape(self, dirs, tmp_path):
        plugin, project = dirs
        with pytest.raises(PathEscapeError, match="outside the project"):
            copy_file(plugin, "src/android/Foo.java", project, "../../Foo.java")
        assert not (tmp_path / "Foo.java").exists()

    def test_destination_escape_creates_nothing(self, dirs):
        plugin, project = dirs
        with pytest.raises(PathEscapeError):
            copy_file(plugin, "src/android/Foo.java", project, "app/../../evil/Foo.java")
        assert list(project.iterdir()) == []


class TestCopyFileLinked:
    def test_file_becomes_relative_symlink(self, dirs):
        plugin, project = dirs
        dest = copy_file(plugin, "src/android/Foo.java", project, "app/Foo.java", link=True)
        assert dest.is_symlink()
        assert not os.path.isabs(os.readlink(dest))
        assert dest.read_text() == "class Foo {}"

    def test_tree_mirrors_leaves(self, dirs):
        plugin, project = dirs
        copy_file(plugin, "tree", project, "out", link=True)
        assert (project / "out").is_dir()
        assert not (project / "out").is_symlink()
        assert (project / "out" / "sub").is_dir()
        assert (project / "out" / "a.txt").is_symlink()
        assert (project / "out" / "sub" / "b.txt").read_text() == "b"

    def test_replaces_existing(self, dirs):
        plugin, project = dirs
        (project / "Foo.java").write_text("old")
        copy_file(plugin, "src/android/Foo.java", project, "Foo.java", link=True)
        assert (project / "Foo.java").is_symlink()
        assert (project / "Foo.java").read_text() == "class Foo {}"

    def test_relink_over_existing_link(self, dirs):
        plugin, project = dirs
        copy_file(plugin, "src/android/Foo.java", project, "Foo.java", link=True)
        copy_file(plugin, "src/android/Foo.java", project, "Foo.java", link=True)
        assert (project / "Foo.java").read_text() == "class Foo {}"


class TestSymlinkTree:
    def test_existing_directory_replaced(self, dirs):
        plugin, project = dirs
        stale = project / "out"
        stale.mkdir()
        (stale / "stale.txt").write_text("stale")
        symlink_tree(plugin / "tree", stale)
        assert not (stale / "stale.txt").exists()
        assert (stale / "a.txt").is_symlink()


class TestCopyNewFile:
    def test_copies_when_absent(self, dirs):
        plugin, project = dirs
        copy_new_file(plugin, "src/android/Foo.java", project, "Foo.java")
        assert (project / "Foo.java").exists()

    def test_refuses_existing(self, dirs):
        plugin, project = dirs
        (project / "Foo.java").write_text("mine")
        with pytest.raises(AlreadyExistsError, match="already exists"):
            copy_new_file(plugin, "src/android/Foo.java", project, "Foo.java")
        assert (project / "Foo.java").read_text() == "mine"

    def test_refuses_before_checking_source(self, dirs):
        plugin, project = dirs
        (project / "nope.java").write_text("mine")
        with pytest.raises(AlreadyExistsError):
            copy_new_file(plugin, "nope.java", project, "nope.java")

    def test_refuses_dangling_symlink(self, dirs):
        plugin, project = dirs
        os.symlink(project / "gone", project / "Foo.java")
        with pytest.raises(AlreadyExistsError):
            copy_new_file(plugin, "src/android/Foo.java", project, "Foo.java")
