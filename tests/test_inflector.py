import pytest

from modelgen.naming.inflector import camel, past_participle, pluralize, singularize, studly


@pytest.mark.parametrize("word, expected", [
    ("users", "user"),
    ("categories", "category"),
    ("order_items", "order_item"),
    ("role_user", "role_user"),
    ("user", "user"),
    ("addresses", "address"),
    ("people", "person"),
    ("address", "address"),
    ("class", "class"),
    ("business", "business"),
    ("status", "status"),
    ("billing_address", "billing_address"),
])
def test_singularize(word, expected):
    assert singularize(word) == expected


def test_pluralize_inflects_last_word_only():
    assert pluralize("post") == "posts"
    assert pluralize("category") == "categories"
    assert pluralize("orderItem") == "orderItems"
    assert pluralize("OrderItem") == "OrderItems"


def test_case_helpers():
    assert studly("order_item") == "OrderItem"
    assert camel("order_item") == "orderItem"
    assert camel("author") == "author"
    assert studly("orderItem") == "OrderItem"


@pytest.mark.parametrize("stem, expected", [
    ("author", "authored"),
    ("like", "liked"),
    ("reply", "replied"),
    ("comment", "commented"),
])
def test_past_participle(stem, expected):
    assert past_participle(stem) == expected


def test_past_participle_ignores_irregular_verbs():
    assert past_participle("write") == "writed"
