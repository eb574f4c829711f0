"""Client predicates used by the view pipeline.

Predicates are frozen dataclasses so that two commands built from the
same input compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass

from clientbook.domain.client import Client
from clientbook.domain.fields import Priority


def _contains_word(sentence: str, word: str) -> bool:
    """Case-insensitive whole-word match of *word* within *sentence*."""
    target = word.strip().lower()
    if not target:
        return False
    return target in (part.lower() for part in sentence.split())


@dataclass(frozen=True)
class ShowAll:
    def __call__(self, client: Client) -> bool:
        return True


SHOW_ALL = ShowAll()


@dataclass(frozen=True)
class KeywordPredicate:
    """Matches when any keyword is a whole word of the name, a tag, or the preference label."""

    keywords: tuple[str, ...]

    def __call__(self, client: Client) -> bool:
        return any(self._matches(client, keyword) for keyword in self.keywords)

    @staticmethod
    def _matches(client: Client, keyword: str) -> bool:
        if _contains_word(client.name.full_name, keyword):
            return True
        if any(tag.name.lower() == keyword.lower() for tag in client.tags):
            return True
        preference = client.product_preference
        return preference is not None and _contains_word(preference.label, keyword)


@dataclass(frozen=True)
class PreferencePredicate:
    """Matches when the preference label contains *keyword* (case-insensitive)."""

    keyword: str

    def __call__(self, client: Client) -> bool:
        preference = client.product_preference
        if preference is None:
            return False
        return self.keyword.lower() in preference.label.lower()


@dataclass(frozen=True)
class PriorityPredicate:
    priority: Priority

    def __call__(self, client: Client) -> bool:
        return client.priority == self.priority
