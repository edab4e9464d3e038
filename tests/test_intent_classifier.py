import pytest

from kinarai.services.intent_classifier import FoodTypeQuery, LocationQuery, classify


@pytest.mark.parametrize("text", ["ส้มตำ", "pad thai", "spicy green curry", ""])
def test_short_unmatched_query_is_food_type(text):
    assert classify(text) == FoodTypeQuery(text)


@pytest.mark.parametrize("text", [
    "somewhere quiet by the river tonight",
    "ข้าว มัน ไก่ ตอน กลางคืน",
])
def test_long_unmatched_query_is_location(text):
    assert classify(text) == LocationQuery(text)


def test_in_clause_is_captured_as_location():
    assert classify("restaurants in Chiang Mai") == LocationQuery("Chiang Mai")


def test_location_wins_when_food_pattern_also_matches():
    # "food" and "in ..." both match; location is checked first
    assert classify("Thai food in Bangkok") == LocationQuery("Bangkok")


def test_near_clause():
    assert classify("places near Silom") == LocationQuery("Silom")


def test_location_without_capture_uses_whole_text():
    assert classify("best restaurants") == LocationQuery("best restaurants")


def test_keywords_are_case_insensitive():
    assert classify("RESTAURANTS IN PHUKET") == LocationQuery("PHUKET")


def test_food_keyword_without_location():
    assert classify("Italian cuisine") == FoodTypeQuery("Italian cuisine")


def test_thai_food_keyword_is_a_food_type():
    assert classify("ผัดไทย recipe") == FoodTypeQuery("ผัดไทย recipe")


def test_four_words_tip_over_to_location():
    text = "ข้าวซอย ข้าวมันไก่ ต้มยำ ส้มตำ"
    assert classify(text) == LocationQuery(text)
