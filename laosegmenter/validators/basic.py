"""Basic grammar rule table: word guards plus rules 1-6."""

from typing import Optional

from ..charset import MAI_YAMOK, SPACE, is_lao
from ..models import WordVerdict
from .base import LEADING_VOWELS_BASIC, GrammarValidator


class BasicGrammarValidator(GrammarValidator):
    """The first rule table: spaces, single characters and non-Lao runs are
    decided up front, everything else goes through rules 1-6 and the
    consonant count limits."""

    leading_vowels = LEADING_VOWELS_BASIC

    def check_word(self, word: str) -> Optional[WordVerdict]:
        if word == SPACE:
            return WordVerdict(True)
        if not word:
            return WordVerdict(False, "empty")
        if len(word) == 1:
            if word == MAI_YAMOK:
                return WordVerdict(True)
            return WordVerdict(False, "single_char")
        if not is_lao(word[0]):
            return WordVerdict(True)
        return None
