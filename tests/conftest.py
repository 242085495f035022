import pytest

from modelgen.schema.models import Column, ForeignKey, PrimaryKeyColumn, SchemaFacts, Table


def fk(table, local, referenced_table, referenced="id", name=None):
    """Build a foreign key; ``local`` / ``referenced`` may be a column or a list of columns."""
    local_columns = local if isinstance(local, list) else [local]
    referenced_columns = referenced if isinstance(referenced, list) else [referenced]
    return ForeignKey(
        table_name=table,
        local_columns=local_columns,
        referenced_table=referenced_table,
        referenced_columns=referenced_columns,
        constraint_name=name or f"{table}_{'_'.join(local_columns)}_foreign",
    )


def pk(table, *columns):
    return [PrimaryKeyColumn(column_name=c, constraint_name=f"{table}_pkey") for c in columns]


def table(name, columns, primary=("id",), foreign_keys=()):
    return Table(
        table_name=name,
        columns=[Column(column_name=c, column_position=i + 1) for i, c in enumerate(columns)],
        primary_keys=pk(name, *primary),
        foreign_keys=list(foreign_keys),
    )


def schema(*tables):
    return SchemaFacts.from_tables(list(tables))


@pytest.fixture
def blog_schema():
    """users(id), posts(id, author_id -> users.id)"""
    return schema(
        table("users", ["id", "name"]),
        table("posts", ["id", "author_id", "title"],
              foreign_keys=[fk("posts", "author_id", "users")]),
    )


@pytest.fixture
def pivot_schema():
    """users, roles and a surrogate-keyed role_user pivot nobody references"""
    return schema(
        table("users", ["id", "name"]),
        table("roles", ["id", "name"]),
        table("role_user", ["id", "user_id", "role_id"],
              foreign_keys=[fk("role_user", "user_id", "users"),
                            fk("role_user", "role_id", "roles")]),
    )


@pytest.fixture
def profile_schema():
    """profiles.user_id is both the sole primary key and a foreign key to users"""
    return schema(
        table("users", ["id", "name"]),
        table("profiles", ["user_id", "bio"], primary=("user_id",),
              foreign_keys=[fk("profiles", "user_id", "users")]),
    )


@pytest.fixture
def composite_schema():
    """order_lines references orders through a two-column key"""
    return schema(
        table("orders", ["tenant_id", "number"], primary=("tenant_id", "number")),
        table("order_lines", ["id", "tenant_id", "order_number", "sku"],
              foreign_keys=[fk("order_lines", ["tenant_id", "order_number"], "orders",
                               ["tenant_id", "number"])]),
    )
