"""Tests for catalog and reward rendering."""

from rich.tree import Tree

import ui
from catalog import Catalog
from models import Item


class TestFormatCatalog:

    def test_build_tree_label(self, stocked):
        tree = ui.build_tree(stocked, "LOOT")
        assert isinstance(tree, Tree)
        assert str(tree.label) == "LOOT"
        # three items/branches at root: Staff, weapons, equipment
        assert len(tree.children) == 3

    def test_items_before_branches(self, stocked):
        lines = [line.strip("│├└─ ") for line in ui.format_catalog(stocked).splitlines()]
        assert lines[:4] == ["ROOT", "Staff", "weapons", "Bat"]

    def test_one_line_per_node_and_item(self, stocked):
        text = ui.format_catalog(stocked)
        # root + 9 items + 4 branches
        assert len(text.splitlines()) == 14

    def test_no_markup_interpretation(self):
        catalog = Catalog([Item("[bold]Odd[/bold]")])
        assert "[bold]Odd[/bold]" in ui.format_catalog(catalog)


class TestRender:

    def test_render_rewards(self, capsys, monkeypatch):
        from rich.console import Console

        monkeypatch.setattr(ui, "console", Console(force_terminal=False, color_system=None, width=80))
        ui.render_rewards([Item("Bat"), Item("Bat"), Item("Uzi")])
        out = capsys.readouterr().out
        assert "Bat" in out and "Uzi" in out
        assert "2" in out

    def test_render_catalog(self, stocked, capsys, monkeypatch):
        from rich.console import Console

        monkeypatch.setattr(ui, "console", Console(force_terminal=False, color_system=None, width=80))
        ui.render_catalog(stocked)
        assert "Jacket" in capsys.readouterr().out


class TestConfigureLogging:

    def test_installs_rich_handler(self, monkeypatch):
        from rich.logging import RichHandler

        captured = {}
        monkeypatch.setattr(ui.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        ui.configure_logging("DEBUG")
        assert captured["level"] == "DEBUG"
        assert isinstance(captured["handlers"][0], RichHandler)

    def test_default_level_from_config(self, monkeypatch):
        import config

        captured = {}
        monkeypatch.setattr(ui.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        ui.configure_logging()
        assert captured["level"] == config.LOG_LEVEL
