import pytest

from finance_insights.classifiers.keyword import (
    KeywordClassifier,
    classify,
    suggest_category,
)


def test_single_keyword_match():
    res = classify("Pizza with friends")
    assert res.category.name == "Food & Dining"
    assert res.confidence == 0.75
    assert res.source == "keyword"

def test_confidence_grows_with_matches_and_caps():
    assert classify("pizza dinner").confidence == 0.9
    assert classify("coffee, lunch, breakfast snack").confidence == 0.95

@pytest.mark.parametrize("description", ["", "xyz unclassifiable text"])
def test_no_match_falls_back_to_other(description):
    res = classify(description)
    assert res.category.name == "Other"
    assert res.confidence == 0.3
    assert res.source == "fallback"

def test_matching_is_case_insensitive():
    assert classify("NETFLIX Subscription").category.name == "Entertainment"

def test_first_category_in_order_wins():
    # "taxi" is a Transportation keyword but Education is evaluated first.
    assert classify("taxi to the library").category.name == "Education"

def test_first_match_beats_higher_match_count():
    res = classify("uber, train and parking for the book fair")
    assert res.category.name == "Education"
    assert res.confidence == 0.75

def test_categories_listed_in_order_with_other_last():
    categories = KeywordClassifier().categories()
    assert categories == [
        "Food & Dining",
        "Education",
        "Transportation",
        "Entertainment",
        "Shopping",
        "Health",
        "Utilities",
        "Other",
    ]

def test_custom_rules():
    classifier = KeywordClassifier(rules=(("Pets", ("vet", "Kibble")), ("Other", ())))
    assert classifier.classify("kibble for the dog").category.name == "Pets"
    assert classifier.classify("Dinner").category.name == "Other"
    assert classifier.categories() == ["Pets", "Other"]

def test_unordered_rules_rejected():
    with pytest.raises(TypeError):
        KeywordClassifier(rules={"Pets": ("vet",)})

def test_suggest_category_gate():
    assert suggest_category("pizza").category.name == "Food & Dining"
    assert suggest_category("pizza", threshold=0.8) is None
    assert suggest_category("xyz") is None
    assert suggest_category("") is None
