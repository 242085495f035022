import pytest

from modelgen.errors import NamingStrategyError
from modelgen.naming import (
    ColumnBasedNamingStrategy,
    LegacyNamingStrategy,
    NamingStrategy,
    get_naming_strategy,
)

from conftest import fk


@pytest.fixture
def legacy():
    return LegacyNamingStrategy()


@pytest.fixture
def column_based():
    return ColumnBasedNamingStrategy()


@pytest.mark.parametrize("table_name, model", [
    ("users", "User"),
    ("order_items", "OrderItem"),
    ("categories", "Category"),
    ("role_user", "RoleUser"),
    ("address", "Address"),
    ("addresses", "Address"),
    ("class", "Class"),
    ("business", "Business"),
])
def test_model_name_from_table(legacy, column_based, table_name, model):
    assert legacy.model_name_from_table(table_name) == model
    assert column_based.model_name_from_table(table_name) == model


def test_legacy_names_follow_target_model(legacy):
    key = fk("posts", "author_id", "users")

    assert legacy.belongs_to_function_name(key) == "user"
    assert legacy.has_many_function_name(key) == "posts"
    assert legacy.has_one_function_name(fk("profiles", "user_id", "users")) == "profile"


def test_legacy_names_keep_singular_tables_ending_in_s(legacy):
    key = fk("business", "address_id", "address")

    assert legacy.belongs_to_function_name(key) == "address"
    assert legacy.has_many_function_name(key) == "businesses"
    assert legacy.has_one_function_name(key) == "business"


def test_legacy_belongs_to_many(legacy):
    owner = fk("role_user", "user_id", "users")
    related = fk("role_user", "role_id", "roles")
    assert legacy.belongs_to_many_function_name(owner, related) == "roles"
    assert legacy.belongs_to_many_function_name(related, owner) == "users"


def test_column_based_belongs_to_strips_id_suffix(column_based):
    assert column_based.belongs_to_function_name(fk("posts", "author_id", "users")) == "author"
    assert column_based.belongs_to_function_name(fk("posts", "main_category_id", "categories")) == "mainCategory"


def test_column_based_belongs_to_without_suffix_falls_back(column_based):
    assert column_based.belongs_to_function_name(fk("posts", "owner", "users")) == "user"


def test_column_based_has_many_uses_column_stem(column_based):
    assert column_based.has_many_function_name(fk("posts", "author_id", "users")) == "authoredPosts"


def test_column_based_has_many_matching_parent_name_falls_back(column_based):
    """users <- posts.user_id is just "posts" """
    assert column_based.has_many_function_name(fk("posts", "user_id", "users")) == "posts"


def test_column_based_has_one_is_legacy(column_based):
    assert column_based.has_one_function_name(fk("profiles", "owner_id", "users")) == "profile"


def test_column_based_standard_pivot_falls_back(column_based):
    owner = fk("role_user", "user_id", "users")
    related = fk("role_user", "role_id", "roles")
    assert column_based.belongs_to_many_function_name(owner, related) == "roles"


@pytest.mark.parametrize("pivot", ["role_user", "user_role", "users_roles", "roles_users", "roleuser"])
def test_standard_pivot_names(pivot):
    assert ColumnBasedNamingStrategy.is_standard_pivot_name(pivot, "users", "roles")


def test_non_standard_pivot_prefixes_pivot_name(column_based):
    """users <- comments -> posts"""
    owner = fk("comments", "user_id", "users")
    related = fk("comments", "post_id", "posts")

    assert not ColumnBasedNamingStrategy.is_standard_pivot_name("comments", "users", "posts")
    assert column_based.belongs_to_many_function_name(owner, related) == "commentedPosts"
    assert column_based.belongs_to_many_function_name(related, owner) == "commentedUsers"


def test_get_naming_strategy_by_name():
    assert isinstance(get_naming_strategy("legacy"), LegacyNamingStrategy)
    assert isinstance(get_naming_strategy("column_based"), ColumnBasedNamingStrategy)
    assert isinstance(get_naming_strategy(None), ColumnBasedNamingStrategy)


def test_get_naming_strategy_by_path_class_or_instance():
    path = "modelgen.naming.legacy.LegacyNamingStrategy"
    assert isinstance(get_naming_strategy(path), LegacyNamingStrategy)
    assert isinstance(get_naming_strategy(ColumnBasedNamingStrategy), ColumnBasedNamingStrategy)

    instance = LegacyNamingStrategy()
    assert get_naming_strategy(instance) is instance


@pytest.mark.parametrize("bad", ["plural", "os.path", "modelgen.missing.Strategy", str, 42])
def test_unknown_naming_strategy_fails_fast(bad):
    with pytest.raises(NamingStrategyError):
        get_naming_strategy(bad)


def test_custom_strategy_subclass_is_accepted():
    class ShoutingStrategy(LegacyNamingStrategy):
        def belongs_to_function_name(self, foreign_key):
            return super().belongs_to_function_name(foreign_key).upper()

    strategy = get_naming_strategy(ShoutingStrategy)
    assert isinstance(strategy, NamingStrategy)
    assert strategy.belongs_to_function_name(fk("posts", "author_id", "users")) == "USER"
