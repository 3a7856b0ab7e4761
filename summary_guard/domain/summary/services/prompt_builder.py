"""
Domain Service: Prompt Builder

Constructs the profile-summary prompt from a snapshot of experience records.
Pure business logic with no infrastructure dependencies.
"""

from collections import Counter
from statistics import fmean
from typing import List, Optional, Sequence

from summary_guard.models import ReferenceRecord


class PromptBuilder:
    """
    Domain service for building generation prompts.

    The prompt lists only the places present in the records and restates
    the limits the validator enforces, so a well-behaved provider produces
    text that passes validation on the first try.
    """

    def __init__(self, max_sentences: int = 3):
        self.max_sentences = max_sentences

    @staticmethod
    def _mean(values: Sequence[Optional[float]]) -> Optional[float]:
        present = [v for v in values if v is not None]
        return fmean(present) if present else None

    def build_profile_summary_prompt(
        self, subject_id: str, records: Sequence[ReferenceRecord]
    ) -> str:
        """
        Construct prompt for a taste-profile summary.

        Args:
            subject_id: User the summary is about
            records: Snapshot of that user's logged experiences

        Returns:
            Prompt text for the generation provider

        Raises:
            ValueError: If records is empty
        """
        if not records:
            raise ValueError("cannot build a profile summary prompt without records")

        visits = Counter(r.entity_name for r in records)
        avg_rating = self._mean([r.rating for r in records])
        avg_sweetness = self._mean([r.sweetness for r in records])
        avg_strength = self._mean([r.strength for r in records])

        prompt = f"""You are summarizing a user's tasting history.

User: {subject_id}
Logged experiences: {len(records)}
Average rating: {avg_rating:.2f}
"""
        if avg_sweetness is not None:
            prompt += f"Average sweetness: {avg_sweetness:.2f}\n"
        if avg_strength is not None:
            prompt += f"Average strength: {avg_strength:.2f}\n"

        prompt += "\nPlaces visited:\n"
        for name, count in visits.most_common():
            place_ratings = [r.rating for r in records if r.entity_name == name]
            prompt += f"- {name}: {count} visit(s), average rating {fmean(place_ratings):.1f}\n"

        notes: List[str] = [f"- {r.entity_name}: {r.notes}" for r in records if r.notes]
        if notes:
            prompt += "\nUser notes:\n" + "\n".join(notes) + "\n"

        prompt += f"""
Instructions:
1. Write at most {self.max_sentences} sentences addressed to the user ("You ...")
2. Mention only places from the list above, spelled exactly as listed
3. Keep the tone consistent with the average rating
4. End with a period, exclamation mark or question mark

Summary:"""

        return prompt
