"""
Domain Service: Entity Matcher

Decides whether a candidate phrase plausibly refers to a known entity.
"""

from typing import Iterable, Optional


class EntityMatcher:
    """
    Case-insensitive substring containment in either direction.

    "the Zen Tea House" matches "Zen Tea House" (name inside phrase) and
    "Zen" matches "Zen Tea House" (phrase inside name).
    """

    @staticmethod
    def matches_entity(phrase: Optional[str], entity_name: Optional[str]) -> bool:
        if not phrase or not entity_name:
            return False
        p, e = phrase.lower(), entity_name.lower()
        return p in e or e in p

    def matches(self, phrase: Optional[str], known_entities: Iterable[str]) -> bool:
        if not phrase:
            return False
        return any(self.matches_entity(phrase, name) for name in known_entities)
