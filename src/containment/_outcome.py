from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class MatchOutcome:
    """Verdict of one comparison plus the four messages describing it.

    ``failure_message`` explains a ``matched=False`` verdict and
    ``negated_failure_message`` explains a ``matched=True`` one. The
    mid-sentence variants are the same explanations shaped for embedding
    after "but" or "and" in a composed sentence.
    """

    matched: bool
    failure_message: str
    negated_failure_message: str
    mid_sentence_failure_message: str
    mid_sentence_negated_failure_message: str

    @classmethod
    def of(cls, matched: bool, failure_message: str, negated_failure_message: str) -> MatchOutcome:
        """Three-message form: mid-sentence variants repeat the plain ones."""
        return cls(
            matched,
            failure_message,
            negated_failure_message,
            failure_message,
            negated_failure_message,
        )

    def negated(self) -> MatchOutcome:
        return MatchOutcome(
            not self.matched,
            self.negated_failure_message,
            self.failure_message,
            self.mid_sentence_negated_failure_message,
            self.mid_sentence_failure_message,
        )

    @property
    def message(self) -> str:
        """The message describing the verdict actually reached."""
        return self.negated_failure_message if self.matched else self.failure_message

    def to_json(self) -> dict[str, Any]:
        return {
            "matched": self.matched,
            "failure_message": self.failure_message,
            "negated_failure_message": self.negated_failure_message,
            "mid_sentence_failure_message": self.mid_sentence_failure_message,
            "mid_sentence_negated_failure_message": self.mid_sentence_negated_failure_message,
        }
