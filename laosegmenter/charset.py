"""Character classification over the Lao Unicode block (U+0E80-U+0EFF)."""

from enum import IntFlag, auto
from typing import Optional

LAO_BLOCK_START = 0x0E80
LAO_BLOCK_END = 0x0EFF

SPACE = " "
ZERO_WIDTH_SPACE = "\u200B"

MAI_YAMOK = "\u0EC6"  # ໆ
MAI_KANG = "\u0EB1"  # ັ
VOWEL_E = "\u0EC0"  # ເ
VOWEL_AM = "\u0EB3"  # ຳ
HO_SUNG = "ຫ"
WO = "ວ"
O = "ອ"

# 27 base consonants plus the two irregular aspirates ໜ and ໝ
CONSONANTS = frozenset({
    "ກ", "ຂ", "ຄ", "ງ", "ຈ", "ສ", "ຊ", "ຍ", "ດ", "ຕ", "ຖ", "ທ", "ນ",
    "ບ", "ປ", "ຜ", "ຝ", "ພ", "ຟ", "ມ", "ຢ", "ຣ", "ລ", "ວ", "ຫ", "ອ", "ຮ",
    "ໜ", "ໝ",
})

# Vowels written before their consonant; these may open a new word
LEADING_VOWELS = frozenset({
    "\u0EC0",  # ເ
    "\u0EC1",  # ແ
    "\u0EC2",  # ໂ
    "\u0EC4",  # ໄ
    "\u0EC3",  # ໃ
})

# Vowels, tone marks and diacritics attached after or around a consonant
MIDDLE_CHARS = frozenset({
    "\u0EB0",  # ະ
    "\u0EB2",  # າ
    "\u0EB4",  # ິ
    "\u0EB5",  # ີ
    "\u0EB6",  # ຶ
    "\u0EB7",  # ື
    "\u0EB8",  # ຸ
    "\u0EB9",  # ູ
    "\u0ECD",  # ໍ  vowel sign O
    "\u0EB3",  # ຳ  vowel sign AM
    "\u0EC8",  # ່  mai ek
    "\u0EC9",  # ້  mai tho
    "\u0ECA",  # ໊  mai ti
    "\u0ECB",  # ໋  mai catawa
    "\u0EBC",  # ຼ  semivowel sign lo
    "\u0ECC",  # ໌  cancellation mark
    "\u0EBD",  # ຽ  semivowel sign nyo
    "\u0EB1",  # ັ  mai kang
    "\u0EBB",  # ົ  mai kon
})

# Consonants that combine with a preceding ຫ into a digraph
DIGRAPH_FOLLOWERS = frozenset({"ງ", "ຍ", "ລ", "ວ", "ຣ"})

SPECIAL_ISOLATES = frozenset({MAI_YAMOK})


class CharCategory(IntFlag):
    """Category bits for a single character.

    Lao characters always carry ``LAO`` and may carry several of the
    structural bits at once (every digraph follower is also a consonant).
    """

    NON_LAO = auto()
    SPACE = auto()
    LAO = auto()
    CONSONANT = auto()
    LEADING_VOWEL = auto()
    MIDDLE_CHAR = auto()
    DIGRAPH_FOLLOWER = auto()
    SPECIAL_ISOLATE = auto()


def _build_table() -> tuple[CharCategory, ...]:
    table = [CharCategory.LAO] * (LAO_BLOCK_END - LAO_BLOCK_START + 1)
    for members, flag in (
        (CONSONANTS, CharCategory.CONSONANT),
        (LEADING_VOWELS, CharCategory.LEADING_VOWEL),
        (MIDDLE_CHARS, CharCategory.MIDDLE_CHAR),
        (DIGRAPH_FOLLOWERS, CharCategory.DIGRAPH_FOLLOWER),
        (SPECIAL_ISOLATES, CharCategory.SPECIAL_ISOLATE),
    ):
        for char in members:
            table[ord(char) - LAO_BLOCK_START] |= flag
    return tuple(table)


_CATEGORY_TABLE = _build_table()


def is_lao(char: Optional[str]) -> bool:
    """Return True if ``char`` lies in the Lao Unicode block."""
    if not char:
        return False
    return LAO_BLOCK_START <= ord(char[0]) <= LAO_BLOCK_END


def classify(char: Optional[str]) -> CharCategory:
    """Classify a single character.

    Args:
        char: One character. ``None`` or an empty string counts as non-Lao.

    Returns:
        The category flags for the character
    """
    if char == SPACE:
        return CharCategory.SPACE
    if not is_lao(char):
        return CharCategory.NON_LAO
    return _CATEGORY_TABLE[ord(char[0]) - LAO_BLOCK_START]


def _has(char: Optional[str], flag: CharCategory) -> bool:
    return bool(classify(char) & flag)


def is_consonant(char: Optional[str]) -> bool:
    return _has(char, CharCategory.CONSONANT)


def is_leading_vowel(char: Optional[str]) -> bool:
    return _has(char, CharCategory.LEADING_VOWEL)


def is_middle_char(char: Optional[str]) -> bool:
    return _has(char, CharCategory.MIDDLE_CHAR)


def is_digraph_follower(char: Optional[str]) -> bool:
    return _has(char, CharCategory.DIGRAPH_FOLLOWER)
