"""Tests for the demonstration catalogue."""

import importlib

import pytest

from patternkit.catalog import DEFAULT_ENTRIES, Category, DemoCatalog, DemoEntry
from patternkit.config.manager import get_config_manager
from patternkit.domain.base.exceptions import CapabilityNotFoundError

EXPECTED_TAGS = {
    Category.BEHAVIOURAL: {
        "chain_of_responsibility", "command", "iterator", "mediator", "memento",
        "observer", "state", "strategy", "template", "visitor",
    },
    Category.CREATIONAL: {"abstract_factory", "builder", "factory", "prototype", "singleton"},
    Category.STRUCTURAL: {"adapter", "bridge", "decorator", "flyweight", "proxy"},
}


class TestDemoCatalog:
    """Test catalogue lookup and filtering."""

    def setup_method(self):
        self.catalog = DemoCatalog()

    def test_all_twenty_demonstrations_are_registered(self):
        assert len(self.catalog) == 20
        assert set(self.catalog.tags()) == set().union(*EXPECTED_TAGS.values())

    @pytest.mark.parametrize("category", list(Category))
    def test_filter_by_category(self, category):
        entries = self.catalog.entries(category)

        assert {entry.tag for entry in entries} == EXPECTED_TAGS[category]
        assert all(entry.category is category for entry in entries)

    def test_filter_accepts_category_value(self):
        assert len(self.catalog.entries("creational")) == 5

    @pytest.mark.parametrize("tag", ["Abstract-Factory", "ABSTRACT_FACTORY", "abstract_factory"])
    def test_lookup_normalises_tags(self, tag):
        assert self.catalog.get(tag).tag == "abstract_factory"
        assert tag in self.catalog

    def test_unknown_tag(self):
        with pytest.raises(CapabilityNotFoundError) as exc_info:
            self.catalog.get("monostate")

        assert exc_info.value.kind == "Demo"
        assert "state" in exc_info.value.available

    def test_custom_entries(self):
        entry = DemoEntry("decorator", "Decorator", Category.STRUCTURAL, "Toppings.",
                          "patternkit.patterns.structural.decorator")
        catalog = DemoCatalog([entry])

        assert catalog.tags() == ["decorator"]
        assert catalog.entries() == [entry]

    def test_entry_to_dict(self):
        data = self.catalog.get("proxy").to_dict()

        assert data == {
            "tag": "proxy",
            "title": "Proxy",
            "category": "structural",
            "summary": "Caching proxy in front of a video downloader.",
            "module": "patternkit.patterns.structural.proxy",
        }

    def test_run_invokes_demonstration(self, capsys):
        self.catalog.run("decorator")

        assert "Total Cost: $9.5" in capsys.readouterr().out


@pytest.mark.parametrize("entry", DEFAULT_ENTRIES, ids=lambda entry: entry.tag)
def test_every_entry_points_at_a_runnable_main(entry):
    module = importlib.import_module(entry.module)

    assert callable(entry.load_main())
    assert module.__doc__


@pytest.mark.parametrize("entry", DEFAULT_ENTRIES, ids=lambda entry: entry.tag)
def test_every_demonstration_prints_output(entry, capsys, small_forest_config):
    get_config_manager(small_forest_config)

    entry.run()

    assert capsys.readouterr().out.strip()
