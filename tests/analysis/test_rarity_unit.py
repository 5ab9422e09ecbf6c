#!/usr/bin/env python3

import pytest

from hashrarity.analysis.rarity import COMMON, RULES, RarityRule, classify
from hashrarity.analysis.types import HashRarity, RarityClassification


@pytest.mark.parametrize(
    "commit_hash,tier,explanation",
    [
        ("123456789abcdef0a1b2c3d4e5f6", HashRarity.UNCOMMON, "Starts with nine digits"),
        ("f0e1d2c3b4a5123456789", HashRarity.UNCOMMON, "Ends with nine digits"),
        ("ab999999999cd", HashRarity.UNCOMMON, "Contains nine continuous digits"),
        ("abcdefabc1234567890fedcba0987654321f0e1d2", HashRarity.RARE, "Starts with nine letters"),
        ("1a2b3c4d5efabcdefab", HashRarity.RARE, "Ends with nine letters"),
        ("12abcdefghi34", HashRarity.RARE, "Contains nine continuous letters"),
        ("3f2a9c1e7b4d8a6f0c5e2b9d7a1f4c8e6b3d0a9c", HashRarity.COMMON, ""),
    ],
)
def test_each_rule(commit_hash, tier, explanation):
    result = classify(commit_hash)
    assert result.tier is tier
    assert result.explanation == explanation


def test_digit_prefix_wins_over_digit_run():
    # The first nine characters are all digits, so rule 1 fires before rule 3
    assert classify("999999999abc") == RarityClassification(
        HashRarity.UNCOMMON, "Starts with nine digits"
    )


def test_nine_letters_start_rule_fires_before_substring_rule():
    assert classify("aaaaaaaaa").explanation == "Starts with nine letters"
    assert classify("abcdefghi").explanation == "Starts with nine letters"


def test_digit_rules_take_priority_over_letter_rules():
    # Starts with letters but ends with digits: the Uncommon rule wins
    result = classify("abcdefghij0123456789")
    assert result.tier is HashRarity.UNCOMMON
    assert result.explanation == "Ends with nine digits"


def test_uppercase_letters_count_as_letters():
    assert classify("ABCDEFGHI123").tier is HashRarity.RARE


def test_only_ascii_digits_count():
    arabic_indic = "١٢٣٤٥٦٧٨٩x"
    assert classify(arabic_indic) == COMMON


@pytest.mark.parametrize(
    "commit_hash,tier,explanation",
    [
        ("", HashRarity.UNCOMMON, "Starts with nine digits"),
        ("12345", HashRarity.UNCOMMON, "Starts with nine digits"),
        ("abcde", HashRarity.RARE, "Starts with nine letters"),
        ("abc123", HashRarity.COMMON, ""),
    ],
)
def test_short_hashes_match_vacuously(commit_hash, tier, explanation):
    result = classify(commit_hash)
    assert (result.tier, result.explanation) == (tier, explanation)


def test_common_has_empty_explanation_and_weight():
    result = classify("3f2a9c1e7b4d8a6f0c5e2b9d7a1f4c8e6b3d0a9c")
    assert result.explanation == ""
    assert result.estimated_frequency == pytest.approx(0.99)


def test_weights_follow_tier():
    assert classify("123456789").estimated_frequency == pytest.approx(0.01)
    assert classify("abcdefabc").estimated_frequency == pytest.approx(0.001)


def test_classify_is_deterministic():
    commit_hash = "1a2b3c4d5efabcdefab"
    assert classify(commit_hash) == classify(commit_hash)


def test_rule_table_is_ordered():
    assert [rule.tier for rule in RULES] == [HashRarity.UNCOMMON] * 3 + [HashRarity.RARE] * 3


def test_custom_rule_table():
    rules = (RarityRule(lambda h: h.startswith("0000"), HashRarity.RARE, "Leading zeros"),)
    assert classify("0000abc", rules) == RarityClassification(HashRarity.RARE, "Leading zeros")
    assert classify("123456789", rules) == COMMON
