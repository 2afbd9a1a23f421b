"""Tests for console reporters."""

import io

import pytest
from rich.console import Console

from tally.progress import (
    Group,
    ProgressReporter,
    SimpleReporter,
    create_reporter,
    render_tree,
)


@pytest.fixture
def tree():
    root = Group("job")
    fetch = root.new_item("fetch", 10)
    unpack = root.new_group("unpack", weight=3)
    unpack.new_item("files", 4)
    return root, fetch, unpack


def make_console():
    return Console(file=io.StringIO(), width=100, force_terminal=False)


class TestProgressReporter:
    """Rich progress bar reporter."""

    def test_subscribes_while_open(self, tree):
        root, fetch, _ = tree
        reporter = ProgressReporter(root, console=make_console())

        with reporter:
            assert reporter._on_change in root._listeners
            fetch.complete_work(10)
            task = reporter.progress.tasks[0]
            assert task.completed == pytest.approx(25)
            assert reporter.last_name == "fetch"

        assert reporter._on_change not in root._listeners

    def test_description_defaults_to_tracker_name(self, tree):
        root, *_ = tree
        assert ProgressReporter(root).description == "job"
        assert ProgressReporter(Group()).description == "Progress"

    def test_final_state_rendered_on_exit(self, tree):
        root, *_ = tree
        console = make_console()
        with ProgressReporter(root, console=console) as reporter:
            root.finish()

        assert reporter.progress.tasks[0].completed == pytest.approx(100)
        assert "job" in console.file.getvalue()

    def test_markup_in_names_is_escaped(self):
        root = Group("[bold]raw")
        leaf = root.new_item("[red]leaf", 1)
        with ProgressReporter(root, console=make_console()) as reporter:
            leaf.finish()
            assert "\\[red]leaf" in reporter.progress.tasks[0].description

    def test_summary(self, tree):
        root, *_ = tree
        console = make_console()
        reporter = ProgressReporter(root, console=console)
        reporter.print_summary()
        assert "0% complete" in console.file.getvalue()


class TestSimpleReporter:
    """Plain text reporter."""

    def test_prints_on_percent_change(self, tree, capsys):
        root, fetch, _ = tree
        with SimpleReporter(root):
            fetch.complete_work(2)
            fetch.complete_work(0)
            fetch.complete_work(8)

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Tracking: job", "[  5%] fetch", "[ 25%] fetch"]

    def test_unsubscribes_on_exit(self, tree, capsys):
        root, fetch, _ = tree
        with SimpleReporter(root):
            pass
        fetch.finish()
        assert capsys.readouterr().out == "Tracking: job\n"

    def test_custom_stream(self, tree):
        root, fetch, _ = tree
        out = io.StringIO()
        with SimpleReporter(root, stream=out):
            fetch.finish()
        assert "[ 25%] fetch" in out.getvalue()


def test_create_reporter(tree):
    root, *_ = tree
    assert isinstance(create_reporter(root), ProgressReporter)
    assert isinstance(create_reporter(root, plain=True), SimpleReporter)


class TestRenderTree:
    """Rich tree rendering."""

    def test_mirrors_structure(self, tree):
        root, fetch, unpack = tree
        fetch.finish()

        rendered = render_tree(root)
        assert "job" in rendered.label
        assert len(rendered.children) == 2
        assert "weight 3" in rendered.children[1].label
        assert "files" in rendered.children[1].children[0].label

    def test_printable(self, tree):
        root, *_ = tree
        console = make_console()
        console.print(render_tree(root))
        output = console.file.getvalue()
        for name in ("job", "fetch", "unpack", "files"):
            assert name in output

    def test_leaf_tracker(self):
        leaf = Group().new_item("solo", 2)
        rendered = render_tree(leaf)
        assert "solo" in rendered.label
        assert rendered.children == []
