"""Catalogue of pattern demonstrations, keyed by tag."""
from __future__ import annotations

import importlib
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry import CapabilityRegistry, case_insensitive

logger = get_logger(__name__)


class Category(str, Enum):
    BEHAVIOURAL = "behavioural"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


@dataclass(frozen=True)
class DemoEntry:
    """One runnable demonstration."""
    tag: str
    title: str
    category: Category
    summary: str
    module: str

    def load_main(self) -> Callable[[], None]:
        """Import the demonstration module and return its ``main``."""
        return getattr(importlib.import_module(self.module), "main")

    def run(self) -> None:
        self.load_main()()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
            "module": self.module,
        }


_PACKAGE = "patternkit.patterns"

DEFAULT_ENTRIES: List[DemoEntry] = [
    # Behavioural
    DemoEntry("chain_of_responsibility", "Chain of Responsibility", Category.BEHAVIOURAL,
              "Support requests pass along handlers until one accepts them.",
              f"{_PACKAGE}.behavioural.chain_of_responsibility"),
    DemoEntry("command", "Command", Category.BEHAVIOURAL,
              "Remote control buttons bound to undoable commands.",
              f"{_PACKAGE}.behavioural.command"),
    DemoEntry("iterator", "Iterator", Category.BEHAVIOURAL,
              "Walk a playlist without exposing its storage.",
              f"{_PACKAGE}.behavioural.iterator"),
    DemoEntry("mediator", "Mediator", Category.BEHAVIOURAL,
              "Document session relays edits between collaborators.",
              f"{_PACKAGE}.behavioural.mediator"),
    DemoEntry("memento", "Memento", Category.BEHAVIOURAL,
              "Resume editor snapshots with undo.",
              f"{_PACKAGE}.behavioural.memento"),
    DemoEntry("observer", "Observer", Category.BEHAVIOURAL,
              "Channel subscribers are notified of uploads.",
              f"{_PACKAGE}.behavioural.observer"),
    DemoEntry("state", "State", Category.BEHAVIOURAL,
              "Order lifecycle driven by a transition table.",
              f"{_PACKAGE}.behavioural.state"),
    DemoEntry("strategy", "Strategy", Category.BEHAVIOURAL,
              "Interchangeable ride matching algorithms.",
              f"{_PACKAGE}.behavioural.strategy"),
    DemoEntry("template", "Template", Category.BEHAVIOURAL,
              "Fixed notification skeleton with injected steps.",
              f"{_PACKAGE}.behavioural.template"),
    DemoEntry("visitor", "Visitor", Category.BEHAVIOURAL,
              "Invoice and shipping operations over cart items.",
              f"{_PACKAGE}.behavioural.visitor"),
    # Creational
    DemoEntry("abstract_factory", "Abstract Factory", Category.CREATIONAL,
              "Region factories create matching gateways and invoices.",
              f"{_PACKAGE}.creational.abstract_factory"),
    DemoEntry("builder", "Builder", Category.CREATIONAL,
              "Fluent construction of immutable burger meals.",
              f"{_PACKAGE}.creational.builder"),
    DemoEntry("factory", "Factory", Category.CREATIONAL,
              "Logistics modes created by tag.",
              f"{_PACKAGE}.creational.factory"),
    DemoEntry("prototype", "Prototype", Category.CREATIONAL,
              "Email templates cloned from registered prototypes.",
              f"{_PACKAGE}.creational.prototype"),
    DemoEntry("singleton", "Singleton", Category.CREATIONAL,
              "Eager, lazy and registry-backed single instances.",
              f"{_PACKAGE}.creational.singleton"),
    # Structural
    DemoEntry("adapter", "Adapter", Category.STRUCTURAL,
              "Third-party payment API behind the checkout interface.",
              f"{_PACKAGE}.structural.adapter"),
    DemoEntry("bridge", "Bridge", Category.STRUCTURAL,
              "Players and streaming qualities vary independently.",
              f"{_PACKAGE}.structural.bridge"),
    DemoEntry("decorator", "Decorator", Category.STRUCTURAL,
              "Stackable pizza toppings adding description and cost.",
              f"{_PACKAGE}.structural.decorator"),
    DemoEntry("flyweight", "Flyweight", Category.STRUCTURAL,
              "A million trees sharing one tree type.",
              f"{_PACKAGE}.structural.flyweight"),
    DemoEntry("proxy", "Proxy", Category.STRUCTURAL,
              "Caching proxy in front of a video downloader.",
              f"{_PACKAGE}.structural.proxy"),
]


class DemoCatalog:
    """Registry of demonstrations with lookup by tag and category."""

    def __init__(self, entries: Optional[List[DemoEntry]] = None):
        self._registry: CapabilityRegistry[DemoEntry] = CapabilityRegistry(
            "Demo", normalize=_normalize_tag
        )
        for entry in entries if entries is not None else DEFAULT_ENTRIES:
            self.register(entry)

    def register(self, entry: DemoEntry) -> None:
        self._registry.register(entry.tag, entry)

    def get(self, tag: str) -> DemoEntry:
        """
        Look up a demonstration.

        Raises:
            CapabilityNotFoundError: If the tag is unknown
        """
        return self._registry.resolve(tag)

    def entries(self, category: Optional[Category] = None) -> List[DemoEntry]:
        entries = [self._registry.resolve(tag) for tag in self._registry.registered_tags()]
        if category is not None:
            entries = [entry for entry in entries if entry.category == Category(category)]
        return entries

    def tags(self) -> List[str]:
        return self._registry.registered_labels()

    def run(self, tag: str) -> None:
        """Run one demonstration's ``main``."""
        entry = self.get(tag)
        logger.info("Running demonstration", tag=entry.tag)
        entry.run()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, tag: str) -> bool:
        return tag in self._registry


def _normalize_tag(tag: Any) -> Any:
    tag = case_insensitive(tag)
    return tag.replace("-", "_") if isinstance(tag, str) else tag
