"""Tests for the basic and extended grammar rule tables."""

import pytest

from laosegmenter.models import WordVerdict
from laosegmenter.validators import (
    VALIDATOR_REGISTRY,
    BasicGrammarValidator,
    ExtendedGrammarValidator,
    get_validator,
)


@pytest.fixture
def basic():
    return BasicGrammarValidator()


@pytest.fixture
def extended():
    return ExtendedGrammarValidator()


class TestRegistry:
    """Tests for looking up rule sets by name."""

    def test_default_is_extended(self):
        assert isinstance(get_validator(), ExtendedGrammarValidator)

    def test_basic(self):
        assert isinstance(get_validator("basic"), BasicGrammarValidator)

    def test_unknown_rule_set(self):
        with pytest.raises(ValueError, match="Unknown rule set"):
            get_validator("strict")

    def test_registry_names(self):
        assert set(VALIDATOR_REGISTRY) == {"basic", "extended"}


class TestSharedGuards:
    """Guards both rule tables agree on."""

    @pytest.mark.parametrize("rule_set", ["basic", "extended"])
    @pytest.mark.parametrize("word", [" ", "ໆ", "abc", "123", "Hello"])
    def test_always_valid(self, rule_set, word):
        assert get_validator(rule_set).validate(word)

    @pytest.mark.parametrize("rule_set", ["basic", "extended"])
    def test_empty_word(self, rule_set):
        assert get_validator(rule_set).diagnose("") == WordVerdict(False, "empty")

    @pytest.mark.parametrize("rule_set", ["basic", "extended"])
    @pytest.mark.parametrize("word", ["ປ", "ເ", "\u0EB0"])
    def test_single_character(self, rule_set, word):
        verdict = get_validator(rule_set).diagnose(word)
        assert not verdict.correct
        assert verdict.rule == "single_char"

    @pytest.mark.parametrize("rule_set", ["basic", "extended"])
    @pytest.mark.parametrize(
        "word", ["ປະ", "ເທດ", "ລາວ", "ເປັນ", "ສິ່ງ", "ສວຍ", "ງາມ", "ເດືອນ", "ຜູ້", "ທ່ານ"]
    )
    def test_common_words(self, rule_set, word):
        assert get_validator(rule_set).validate(word)


class TestPrimaryRules:
    """Rules 1-6 and the consonant count limits."""

    def test_leading_vowel_not_first(self, extended):
        assert extended.diagnose("ກເດ").rule == "leading_vowel"

    def test_leading_vowel_without_consonant(self, extended):
        assert extended.diagnose("ເາ").rule == "leading_vowel"

    def test_doubled_e(self, basic, extended):
        """ເເ followed by a consonant is allowed."""
        assert basic.validate("ເເກ")
        assert extended.validate("ເເກ")

    def test_top_vowel_without_consonant(self, extended):
        assert extended.diagnose("ກ່ິ").rule == "top_vowel"

    def test_tone_mark_without_consonant(self, basic):
        assert basic.diagnose("\u0EC8ກ").rule == "tone_mark"

    def test_diacritic_without_consonant(self, extended):
        assert extended.diagnose("ກຸ່").rule == "diacritic"

    def test_vowel_ia_at_end(self, basic, extended):
        assert basic.diagnose("ພຽ").rule == "vowel_ia"
        assert extended.diagnose("ພຽ").rule == "vowel_ia"

    def test_vowel_a_without_consonant(self, extended):
        assert extended.diagnose("\u0EB0ກ").rule == "vowel_a"

    def test_no_consonant(self, basic):
        assert basic.diagnose("ໆໆ").rule == "no_consonant"

    def test_too_many_consonants(self, basic, extended):
        assert basic.diagnose("ກຂຄງຈ").rule == "too_many_consonants"
        assert extended.diagnose("ກຂຄງຈ").rule == "too_many_consonants"

    def test_counts(self, extended):
        assert extended.diagnose("ລາວ") == WordVerdict(True, None, 2, 1)
        assert extended.diagnose("ເທດ") == WordVerdict(True, None, 2, 0)


class TestBasicVersusExtended:
    """Words on which the two rule tables disagree."""

    def test_bare_consonants(self, basic, extended):
        assert basic.validate("ກກ")
        assert extended.diagnose("ກກ").rule == "bare_consonants"

    def test_consonant_with_vowel_carrier(self, extended):
        """A trailing ວ or ອ carries the vowel."""
        assert extended.validate("ລວ")
        assert extended.validate("ຂອ")

    def test_doubled_chars(self, extended):
        assert extended.diagnose("ໆໆ").rule == "doubled_chars"

    def test_tripled_chars(self, basic, extended):
        assert basic.validate("ກກກ")
        assert extended.diagnose("ກກກ").rule == "tripled_chars"

    def test_bare_am(self, basic, extended):
        assert basic.diagnose("\u0EB3").rule == "single_char"
        assert extended.diagnose("\u0EB3").rule == "bare_am"

    def test_ai_leading_vowel(self, basic, extended):
        """ໃ is a leading vowel only in the extended table."""
        assert basic.validate("ກໃ")
        assert extended.diagnose("ກໃ").rule == "leading_vowel"
        assert extended.validate("ໃຫ້")

    def test_tone_mark_on_two_char_word(self, basic, extended):
        assert basic.validate("ກ້")
        assert extended.diagnose("ກ້").rule == "tone_mark"

    def test_tone_mark_between_consonants(self, extended):
        assert extended.validate("ທ້ດ")

    @pytest.mark.parametrize("word", ["ກວ້", "ຫຍ້", "ກດ້"])
    def test_tone_mark_after_two_consonants(self, extended, word):
        """Cluster onsets and consonant pairs may carry a closing tone mark."""
        assert extended.validate(word)

    def test_tone_mark_after_leading_vowel_and_two_consonants(self, extended):
        assert extended.diagnose("ເກດ່").rule == "tone_mark"
        assert extended.validate("ເກ່ງ")


class TestNeighbourRules:
    """Rules 7-10 of the extended table."""

    def test_adjacent_vowels(self, extended):
        assert extended.diagnose("ກິາ").rule == "adjacent_vowels"

    def test_doubled_mark(self, extended):
        assert extended.diagnose("ກ່່").rule == "doubled_mark"

    def test_stacked_tones(self, extended):
        assert extended.diagnose("ກ່້າ").rule == "stacked_tones"

    def test_vowel_sequence_before_consonant_pair(self, extended):
        assert extended.diagnose("ກາກກ").rule == "vowel_sequence"

    def test_vowel_sequence_after_mark(self, extended):
        assert extended.diagnose("ກ໊າ").rule == "vowel_sequence"

    def test_basic_ignores_neighbour_rules(self, basic):
        assert basic.validate("ກ່້າ")


def test_repr():
    assert repr(ExtendedGrammarValidator()) == "ExtendedGrammarValidator()"
