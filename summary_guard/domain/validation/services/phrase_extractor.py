"""
Domain Service: Phrase Extractor

Finds candidate proper-noun phrases (runs of capitalized words) in free text.
Pure business logic with no infrastructure dependencies.
"""

import re
from typing import Iterator, List, Optional

from ..entities import ValidationRules

# Letters and digits only: apostrophes, hyphens and all other punctuation split words.
# "Bob's Burgers" therefore tokenizes to Bob / s / Burgers.
# Commas and hyphens between capitalized words also end a phrase: "Alpha, Beta" is two.
_WORD_RE = re.compile(r"[^\W_]+")


class PhraseExtractor:
    """
    Domain service for candidate phrase extraction.

    A token is capitalized when it starts with an uppercase letter and is at
    least two characters long. Adjacent capitalized tokens separated only by
    whitespace merge into one phrase; punctuation or a lower-case token ends
    the phrase. Lone stopwords ("The", "This", ...) are dropped, multi-word
    runs never are.
    """

    def __init__(self, rules: ValidationRules):
        self.stopwords = rules.stopwords

    @staticmethod
    def is_capitalized(token: str) -> bool:
        return len(token) >= 2 and token[0].isupper()

    def iter_phrases(self, text: Optional[str]) -> Iterator[str]:
        """
        Lazily yield candidate phrases in order of appearance.

        Args:
            text: Text to scan; None or empty yields nothing

        Yields:
            Each candidate phrase, words joined by a single space
        """
        if not text:
            return

        run: List[str] = []
        prev_end = 0
        for match in _WORD_RE.finditer(text):
            token = match.group()
            gap = text[prev_end:match.start()]
            prev_end = match.end()

            if run and gap.strip():
                yield from self._flush(run)
                run = []

            if self.is_capitalized(token):
                run.append(token)
            elif run:
                yield from self._flush(run)
                run = []

        if run:
            yield from self._flush(run)

    def extract(self, text: Optional[str]) -> List[str]:
        """Eager variant of iter_phrases."""
        return list(self.iter_phrases(text))

    def _flush(self, run: List[str]) -> Iterator[str]:
        if len(run) == 1 and run[0] in self.stopwords:
            return
        yield " ".join(run)
