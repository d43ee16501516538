"""One strategy per supported language, in language-selector order."""

from .arabic import ArabicStrategy
from .base import LanguageStrategy, Phrase
from .chinese import ChineseStrategy, ChineseTraditionalStrategy
from .english import EnglishStrategy
from .french import FrenchStrategy
from .german import GermanStrategy
from .hindi import HindiStrategy
from .iberian import PortugueseStrategy, SpanishStrategy
from .italian import ItalianStrategy
from .japanese import JapaneseStrategy
from .korean import KoreanStrategy
from .malay import MalayStrategy
from .thai import ThaiStrategy
from .vietnamese import VietnameseStrategy

ALL_STRATEGIES: tuple[LanguageStrategy, ...] = (
    ArabicStrategy(),
    MalayStrategy(),
    ChineseStrategy(),
    ChineseTraditionalStrategy(),
    EnglishStrategy(),
    FrenchStrategy(),
    GermanStrategy(),
    HindiStrategy(),
    ItalianStrategy(),
    JapaneseStrategy(),
    KoreanStrategy(),
    PortugueseStrategy(),
    SpanishStrategy(),
    ThaiStrategy(),
    VietnameseStrategy(),
)

__all__ = ["ALL_STRATEGIES", "LanguageStrategy", "Phrase"]
