"""
The capability bundle every language implements.

A strategy turns a CanonicalDecimal into words in four steps:

    integer digits ──► segment() ──► chunk_to_words() ──► scale_phrase()
                                                              │
    fraction digits ──► fraction_to_words()      assemble() ◄─┘

Subclasses normally supply only tables plus chunk_to_words(); scale_phrase()
and assemble() are overridden where the language's grammar needs it.
Strategies hold nothing but immutable class-level tables, so one shared
instance per language is safe to use from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..chunking import segment
from ..exceptions import MagnitudeOverflowError
from ..models import CanonicalDecimal, Chunk, LanguageInfo, SpecialValue


@dataclass(frozen=True)
class Phrase:
    """The words for one non-zero chunk, scale word included."""

    chunk: Chunk
    text: str


class LanguageStrategy:
    """Base strategy: space-joined groups with an invariant scale word."""

    code: str = ""
    name: str = ""

    # ─── Grouping ───────────────────────────────────────────────────
    grouping_width: int = 3
    first_group_width: int | None = None  # units group width, if different
    scales: tuple[str, ...] = ("",)  # indexed by Chunk.position

    # ─── Words ──────────────────────────────────────────────────────
    digit_words: tuple[str, ...] = ()  # 0-9, used for the fraction part
    zero_word: str = ""
    integer_zero_word: str | None = None  # integer part of e.g. 0.5
    negative_prefix: str = ""
    decimal_marker: str = ""
    marker_separator: str = " "
    digit_separator: str = " "
    joiner: str = " "
    fuse_thousands: bool = False  # "duemila" + "trecento" written as one word

    # ─── Fixed phrases ──────────────────────────────────────────────
    invalid_phrase: str = ""
    infinity_phrase: str = ""
    negative_infinity_phrase: str = ""
    too_large_phrase: str = ""

    # ─── Entry point ────────────────────────────────────────────────

    def verbalize(self, number: CanonicalDecimal) -> str:
        """Convert a canonical decimal to words.

        Raises:
            MagnitudeOverflowError: more digit groups than named scales.
        """
        parts: list[str] = []
        if number.is_negative:
            parts.append(self.negative_prefix)
        parts.append(self.integer_to_words(number.integer_digits))
        parts.append(self.fraction_to_words(number.fraction_digits))
        return "".join(parts)

    def special_phrase(self, special: SpecialValue) -> str:
        return {
            SpecialValue.ZERO: self.zero_word,
            SpecialValue.POSITIVE_INFINITY: self.infinity_phrase,
            SpecialValue.NEGATIVE_INFINITY: self.negative_infinity_phrase,
            SpecialValue.INVALID: self.invalid_phrase,
        }[special]

    def info(self) -> LanguageInfo:
        return LanguageInfo(code=self.code, name=self.name, grouping_width=self.grouping_width)

    # ─── Integer part ───────────────────────────────────────────────

    @property
    def max_groups(self) -> int:
        return len(self.scales)

    @property
    def max_integer_digits(self) -> int:
        """Longest integer part the scale table can name."""
        first = self.first_group_width or self.grouping_width
        return first + self.grouping_width * (self.max_groups - 1)

    def integer_to_words(self, integer_digits: str) -> str:
        if integer_digits == "0":
            return self.integer_zero_word or self.zero_word
        return self.assemble(self.chunk_phrases(self.segment(integer_digits)))

    def segment(self, integer_digits: str) -> list[Chunk]:
        chunks = segment(integer_digits, self.grouping_width, self.first_group_width)
        if len(chunks) > self.max_groups:
            raise MagnitudeOverflowError(
                f"{len(integer_digits)}-digit integer exceeds the largest {self.name} scale",
                details={
                    "language": self.code,
                    "digits": len(integer_digits),
                    "groups": len(chunks),
                    "max_groups": self.max_groups,
                },
            )
        return chunks

    def chunk_phrases(self, chunks: list[Chunk]) -> list[Phrase]:
        """Verbalize every non-zero chunk; zero chunks produce no phrase."""
        phrases: list[Phrase] = []
        for index, chunk in enumerate(chunks):
            if chunk.value == 0:
                continue
            words = self.chunk_to_words(chunk, leading=index == 0)
            phrases.append(Phrase(chunk, self.scale_phrase(words, chunk)))
        return phrases

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        """Words for a single group value, without its scale word."""
        raise NotImplementedError

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        scale = self.scales[chunk.position]
        return f"{words} {scale}" if scale else words

    def assemble(self, phrases: list[Phrase]) -> str:
        parts: list[str] = []
        previous: Phrase | None = None
        for phrase in phrases:
            if (
                self.fuse_thousands
                and previous is not None
                and previous.chunk.position == 1
                and phrase.chunk.position == 0
            ):
                parts[-1] += phrase.text
            else:
                parts.append(phrase.text)
            previous = phrase
        return self.joiner.join(parts)

    # ─── Fraction part ──────────────────────────────────────────────

    def fraction_to_words(self, fraction_digits: str) -> str:
        """Read fraction digits one at a time after the decimal marker."""
        if not fraction_digits:
            return ""
        digits = self.digit_separator.join(self.digit_words[int(d)] for d in fraction_digits)
        return f"{self.marker_separator}{self.decimal_marker}{self.marker_separator}{digits}"
