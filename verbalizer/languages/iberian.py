"""
Spanish and Portuguese (long scale).

Both languages count in periods of six digits. The upper three digits of
a period take "mil", the period itself takes the period word, and the
period word is attached once, to the last non-zero group of the period:

    1_500_000_000 → mil quinientos millones         (es)
    5_000_000_000 → cinco mil millones              (es)
    1_000_000     → un millón / um milhão
    1_001_000_000 → mil un millones                 (es)

"mil" is never preceded by "un"/"um" (1000 → mil). Spanish shortens
"uno" to "un" before mil and the period words (veintiún mil).
Portuguese links the last group with "e" when it is below one hundred or
a round hundred (mil e quinhentos, dois milhões e um).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy, Phrase


class IberianStrategy(LanguageStrategy):
    """Shared six-digit period logic; subclasses supply tables and chunk words."""

    one_before_noun: str = ""
    period_singulars: tuple[str, ...] = ("",)
    period_plurals: tuple[str, ...] = ("",)

    def chunk_phrases(self, chunks: list[Chunk]) -> list[Phrase]:
        by_position = {chunk.position: chunk.value for chunk in chunks}
        phrases: list[Phrase] = []

        for index, chunk in enumerate(chunks):
            if chunk.value == 0:
                continue
            position, value = chunk.position, chunk.value
            period = position // 2
            words = self.chunk_to_words(chunk, leading=index == 0)

            if position % 2 == 1:
                words = "mil" if value == 1 else f"{self.before_noun(words)} mil"
                closes_period = by_position.get(position - 1, 0) == 0
            else:
                closes_period = True

            if period > 0 and closes_period:
                lower = by_position.get(2 * period, 0)
                upper = by_position.get(2 * period + 1, 0)
                if upper == 0 and lower == 1:
                    words = f"{self.one_before_noun} {self.period_singulars[period]}"
                elif position % 2 == 1:
                    words = f"{words} {self.period_plurals[period]}"
                else:
                    words = f"{self.before_noun(words)} {self.period_plurals[period]}"

            phrases.append(Phrase(chunk, words))

        return phrases

    def before_noun(self, words: str) -> str:
        """Form of a count used directly before mil or a period word."""
        return words


# ─── Spanish ─────────────────────────────────────────────────────────

_ES_ONES: tuple[str, ...] = (
    "", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve",
)

# 10-29 are single words in Spanish
_ES_TEN_TO_TWENTY_NINE: tuple[str, ...] = (
    "diez", "once", "doce", "trece", "catorce", "quince",
    "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    "veinte", "veintiuno", "veintidós", "veintitrés", "veinticuatro",
    "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
)

_ES_TENS: tuple[str, ...] = (
    "", "", "", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa",
)

_ES_HUNDREDS: tuple[str, ...] = (
    "", "ciento", "doscientos", "trescientos", "cuatrocientos", "quinientos",
    "seiscientos", "setecientos", "ochocientos", "novecientos",
)


class SpanishStrategy(IberianStrategy):
    code = "es"
    name = "Spanish"

    one_before_noun = "un"
    period_singulars = ("", "millón", "billón", "trillón", "cuatrillón", "quintillón", "sextillón")
    period_plurals = ("", "millones", "billones", "trillones", "cuatrillones", "quintillones", "sextillones")
    scales = ("", "mil") + tuple(
        scale
        for singular, plural in zip(period_singulars[1:], period_plurals[1:])
        for scale in (singular, f"mil {plural}")
    )

    digit_words = ("cero",) + _ES_ONES[1:]
    zero_word = "Cero"
    integer_zero_word = "cero"
    negative_prefix = "Menos "
    decimal_marker = "punto"

    invalid_phrase = "Número Inválido"
    infinity_phrase = "Infinito"
    negative_infinity_phrase = "Infinito Negativo"
    too_large_phrase = "Número demasiado grande"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        if chunk.value == 100:
            return "cien"
        hundreds, rest = divmod(chunk.value, 100)
        parts: list[str] = []
        if hundreds:
            parts.append(_ES_HUNDREDS[hundreds])
        if rest >= 30:
            tens, units = divmod(rest, 10)
            parts.append(f"{_ES_TENS[tens]} y {_ES_ONES[units]}" if units else _ES_TENS[tens])
        elif rest >= 10:
            parts.append(_ES_TEN_TO_TWENTY_NINE[rest - 10])
        elif rest:
            parts.append(_ES_ONES[rest])
        return " ".join(parts)

    def before_noun(self, words: str) -> str:
        if words.endswith("veintiuno"):
            return words[: -len("veintiuno")] + "veintiún"
        if words.endswith("uno"):
            return words[: -len("uno")] + "un"
        return words


# ─── Portuguese ──────────────────────────────────────────────────────

_PT_ONES: tuple[str, ...] = (
    "", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove",
)

_PT_TEENS: tuple[str, ...] = (
    "dez", "onze", "doze", "treze", "catorze",
    "quinze", "dezasseis", "dezassete", "dezoito", "dezanove",
)

_PT_TENS: tuple[str, ...] = (
    "", "dez", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa",
)

_PT_HUNDREDS: tuple[str, ...] = (
    "", "cento", "duzentos", "trezentos", "quatrocentos", "quinhentos",
    "seiscentos", "setecentos", "oitocentos", "novecentos",
)


class PortugueseStrategy(IberianStrategy):
    code = "pt"
    name = "Portuguese"

    one_before_noun = "um"
    period_singulars = ("", "milhão", "bilião", "trilião", "quatrilião", "quintilião", "sextilião")
    period_plurals = ("", "milhões", "biliões", "triliões", "quatriliões", "quintiliões", "sextiliões")
    scales = ("", "mil") + tuple(
        scale
        for singular, plural in zip(period_singulars[1:], period_plurals[1:])
        for scale in (singular, f"mil {plural}")
    )

    digit_words = ("zero",) + _PT_ONES[1:]
    zero_word = "Zero"
    integer_zero_word = "zero"
    negative_prefix = "Menos "
    decimal_marker = "vírgula"

    invalid_phrase = "Número Inválido"
    infinity_phrase = "Infinito"
    negative_infinity_phrase = "Infinito Negativo"
    too_large_phrase = "Número demasiado grande"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        if chunk.value == 100:
            return "cem"
        hundreds, rest = divmod(chunk.value, 100)
        parts: list[str] = []
        if hundreds:
            parts.append(_PT_HUNDREDS[hundreds])
        if rest >= 20:
            tens, units = divmod(rest, 10)
            parts.append(_PT_TENS[tens])
            if units:
                parts.append(_PT_ONES[units])
        elif rest >= 10:
            parts.append(_PT_TEENS[rest - 10])
        elif rest:
            parts.append(_PT_ONES[rest])
        return " e ".join(parts)

    def assemble(self, phrases: list[Phrase]) -> str:
        if len(phrases) < 2:
            return super().assemble(phrases)
        *head, last = phrases
        if last.chunk.value < 100 or last.chunk.value % 100 == 0:
            return f"{super().assemble(head)} e {last.text}"
        return super().assemble(phrases)
