"""Base classes and rule tables for grammar validators."""

from abc import ABC, abstractmethod
from typing import Optional

from ..charset import VOWEL_E, is_consonant
from ..models import WordVerdict

VOWEL_IA = "\u0EBD"  # ຽ

# Rule 1: leading vowels in the basic rule table (ໃ was added later)
LEADING_VOWELS_BASIC = frozenset({
    "\u0EC0",  # ເ
    "\u0EC1",  # ແ
    "\u0EC2",  # ໂ
    "\u0EC4",  # ໄ
})

# Rule 2: top vowels
TOP_VOWELS = frozenset({
    "\u0EB4",  # ິ
    "\u0EB5",  # ີ
    "\u0EB6",  # ຶ
    "\u0EB7",  # ື
})

# Rule 3: tone marks mai ek and mai tho
TONE_MARKS = frozenset({
    "\u0EC8",  # ່
    "\u0EC9",  # ້
})

# Rule 4: remaining diacritics (top vowels overlap and are handled by rule 2)
OTHER_DIACRITICS = frozenset({
    "\u0ECA",  # ໊
    "\u0ECB",  # ໋
    "\u0ECD",  # ໍ
    "\u0ECC",  # ໌
    "\u0EBB",  # ົ
    "\u0EB1",  # ັ
    "\u0EB4",  # ິ
    "\u0EB5",  # ີ
    "\u0EB6",  # ຶ
    "\u0EB7",  # ື
    "\u0EB8",  # ຸ
    "\u0EB9",  # ູ
    "\u0EBC",  # ຼ
})

# Rule 6: vowels A and AA
VOWELS_A_AA = frozenset({
    "\u0EB0",  # ະ
    "\u0EB2",  # າ
})

# Vowels and diacritics counted towards a word's vowel total
COUNTABLE_VOWELS = frozenset({
    "\u0EB0", "\u0EB2", "\u0EB4", "\u0EB5", "\u0EB6", "\u0EB7", "\u0EB8",
    "\u0EB9", "\u0ECD", "\u0EBC", "\u0ECA", "\u0EB1", "\u0EBB", "\u0EC8",
    "\u0EC9", "\u0ECB", "\u0ECC", "\u0EBD",
})

MAX_CONSONANTS = 4


def char_at(word: str, index: int) -> Optional[str]:
    """Return ``word[index]``, or None when the index falls outside the word."""
    if 0 <= index < len(word):
        return word[index]
    return None


class GrammarValidator(ABC):
    """Base class for per-word grammar validators.

    A validator runs a chain of word-level guards, then scans the word
    character by character. The first guard or rule that fails decides
    the verdict.
    """

    leading_vowels: frozenset = LEADING_VOWELS_BASIC

    def validate(self, word: str) -> bool:
        """Return True if the word is structurally well formed."""
        return self.diagnose(word).correct

    def diagnose(self, word: str) -> WordVerdict:
        """Validate a word and report which rule rejected it.

        Args:
            word: A single segmented word

        Returns:
            WordVerdict with the verdict, the failing rule name (if any)
            and the consonant/vowel counts gathered by the scan
        """
        verdict = self.check_word(word)
        if verdict is not None:
            return verdict
        return self.scan(word)

    @abstractmethod
    def check_word(self, word: str) -> Optional[WordVerdict]:
        """Run word-level guards.

        Returns:
            A verdict if a guard decides the word, otherwise None
        """
        pass

    def scan(self, word: str) -> WordVerdict:
        consonant_count = 0
        vowel_count = 0

        for index, char in enumerate(word):
            if is_consonant(char):
                consonant_count += 1
            elif char in COUNTABLE_VOWELS:
                vowel_count += 1

            rule = self.check_char(word, index)
            if rule is not None:
                return WordVerdict(False, rule, consonant_count, vowel_count)

        if consonant_count == 0:
            return WordVerdict(False, "no_consonant", consonant_count, vowel_count)
        if consonant_count > MAX_CONSONANTS:
            return WordVerdict(
                False, "too_many_consonants", consonant_count, vowel_count
            )
        return WordVerdict(True, None, consonant_count, vowel_count)

    def check_char(self, word: str, index: int) -> Optional[str]:
        """Apply the primary character rules at ``index``.

        Returns:
            The name of the violated rule, or None
        """
        char = word[index]
        prev = char_at(word, index - 1)
        prev2 = char_at(word, index - 2)
        prev3 = char_at(word, index - 3)
        nxt = char_at(word, index + 1)

        if char in self.leading_vowels:
            if index != 0:
                if not (char == VOWEL_E and index == 1 and prev == VOWEL_E):
                    return "leading_vowel"
            elif nxt is None or not (
                is_consonant(nxt) or (char == VOWEL_E and nxt == VOWEL_E)
            ):
                return "leading_vowel"

        elif char in TOP_VOWELS:
            if not is_consonant(prev):
                return "top_vowel"

        elif char in TONE_MARKS:
            if not (is_consonant(prev) or is_consonant(prev2)):
                return "tone_mark"
            return self.check_tone_mark(word, index)

        elif char in OTHER_DIACRITICS:
            if not is_consonant(prev):
                return "diacritic"

        elif char == VOWEL_IA:
            if not is_consonant(nxt):
                return "vowel_ia"

        elif char in VOWELS_A_AA:
            if not (is_consonant(prev) or is_consonant(prev2) or is_consonant(prev3)):
                return "vowel_a"

        return None

    def check_tone_mark(self, word: str, index: int) -> Optional[str]:
        """Extra checks for a tone mark that already has a consonant nearby."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
