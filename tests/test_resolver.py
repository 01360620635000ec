"""Tests for command path resolution."""

import pytest

from helptree.commands.models import CommandNode, Dispatcher
from helptree.models import LeafHasNoChildren, RootCommandNotFound, SubCommandNotFound
from helptree.resolver import detect_command, resolve_path


@pytest.fixture
def marked_root():
    root = Dispatcher(aliases=("root",))
    root.register(CommandNode(aliases=("//foo",)))
    root.register(CommandNode(aliases=("/bar",)))
    root.register(CommandNode(aliases=("//baz",)))
    root.register(CommandNode(aliases=("/baz",)))
    sub = root.register(Dispatcher(aliases=("sub",)))
    sub.register(CommandNode(aliases=("//foo",)))
    return root


class TestDetectCommand:
    def test_exact(self, marked_root):
        assert detect_command(marked_root, "//foo", True) is marked_root.get("//foo")

    def test_double_marker_first(self, marked_root):
        assert detect_command(marked_root, "baz", True) is marked_root.get("//baz")

    def test_single_marker(self, marked_root):
        assert detect_command(marked_root, "bar", True) is marked_root.get("/bar")

    def test_no_normalization_below_root(self, marked_root):
        assert detect_command(marked_root.get("sub"), "foo", False) is None

    def test_no_normalization_with_separator(self, marked_root):
        assert detect_command(marked_root, "x/foo", True) is None


class TestResolvePath:
    def test_empty_path_is_root(self, marked_root):
        resolution = resolve_path(marked_root, [])
        assert resolution.node is marked_root
        assert resolution.visited == []
        assert resolution.is_dispatcher

    @pytest.mark.parametrize("token", ["foo", "/foo", "//foo", "FOO"])
    def test_root_marker_normalization(self, marked_root, token):
        resolution = resolve_path(marked_root, [token])
        assert resolution.node is marked_root.get("//foo")
        assert resolution.visited == [token]

    def test_single_marker_is_distinct(self, marked_root):
        assert resolve_path(marked_root, ["/baz"]).node is marked_root.get("/baz")
        assert resolve_path(marked_root, ["//baz"]).node is marked_root.get("//baz")
        assert resolve_path(marked_root, ["baz"]).node is marked_root.get("//baz")

    def test_multi_token_no_normalization(self, marked_root):
        with pytest.raises(SubCommandNotFound) as info:
            resolve_path(marked_root, ["sub", "foo"])
        assert info.value.token == "foo"
        assert info.value.visited == ["sub"]
        assert info.value.message == "The sub-command 'foo' under 'sub' could not be found."

    def test_sub_command(self, marked_root):
        resolution = resolve_path(marked_root, ["sub", "//foo"])
        assert resolution.node is marked_root.get("sub").get("//foo")
        assert resolution.visited == ["sub", "//foo"]
        assert not resolution.is_dispatcher

    def test_root_not_found(self, marked_root):
        with pytest.raises(RootCommandNotFound) as info:
            resolve_path(marked_root, ["nosuch"])
        assert info.value.token == "nosuch"
        assert info.value.message == "The command 'nosuch' could not be found."

    def test_root_not_found_reports_typed_token(self, marked_root):
        with pytest.raises(RootCommandNotFound) as info:
            resolve_path(marked_root, ["/nosuch"])
        assert info.value.token == "/nosuch"

    def test_separator_alone(self, marked_root):
        with pytest.raises(RootCommandNotFound):
            resolve_path(marked_root, ["/"])

    def test_leaf_has_no_children(self, sample_tree):
        with pytest.raises(LeafHasNoChildren) as info:
            resolve_path(sample_tree, ["group1", "cmd", "extra"])
        assert info.value.visited == ["group1", "cmd"]
        assert info.value.token == "extra"
        assert info.value.message == "'group1 cmd' has no sub-commands. (Maybe 'extra' is for a parameter?)"

    def test_nested(self, sample_tree):
        resolution = resolve_path(sample_tree, ["g1", "NESTED", "deep"])
        assert resolution.node.description == "Deepest leaf"
        assert resolution.visited == ["g1", "NESTED", "deep"]

    def test_idempotent(self, sample_tree):
        first = resolve_path(sample_tree, ["group1", "cmd"])
        second = resolve_path(sample_tree, ["group1", "cmd"])
        assert first.node is second.node
        assert [n.primary_alias for n in sample_tree.commands()][-2:] == ["group1", "misc"]


def test_leaf_and_dispatcher_kinds(sample_tree):
    assert resolve_path(sample_tree, ["group1", "nested"]).is_dispatcher
    assert not resolve_path(sample_tree, ["g1", "other"]).is_dispatcher
