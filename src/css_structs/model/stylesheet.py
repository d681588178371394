"""Stylesheet model: an ordered collection of rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from css_structs.config import DEFAULT_FORMAT, FormatConfig
from css_structs.model.rule import Rule
from css_structs.parser.primitives import normalize_selector


@dataclass
class Stylesheet:
    """All rules of a stylesheet, in source order.

    Rules sharing a selector are kept separate; nothing is merged.
    """

    rules: list[Rule] = field(default_factory=list)

    @classmethod
    def from_string(cls, source: str) -> Stylesheet:
        from css_structs.parser.grammar import parse_stylesheet

        return parse_stylesheet(source)

    def push(self, rule: Rule) -> None:
        self.rules.append(rule)

    def find(self, selector: str) -> list[Rule]:
        """Return every rule whose selector matches *selector* after normalization."""
        wanted = normalize_selector(selector)
        return [r for r in self.rules if r.selector == wanted]

    @property
    def declaration_count(self) -> int:
        return sum(len(r.declarations) for r in self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def to_css(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        return config.rule_separator.join(r.to_css(config) for r in self.rules)

    def __str__(self) -> str:
        return self.to_css()
