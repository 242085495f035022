import pytest

from config.settings import Settings
from modelgen.generators import Generator, ModelGenerator, TraitGenerator
from modelgen.naming import ColumnBasedNamingStrategy
from modelgen.relations import RelationshipBuilder


@pytest.fixture
def naming():
    return ColumnBasedNamingStrategy()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        MODEL_PATH=str(tmp_path / "Models"),
        TRAIT_PATH=str(tmp_path / "Models" / "Relations"),
        MODEL_NAMESPACE="App\\Models",
        TRAIT_NAMESPACE="App\\Models\\Relations",
        DB_CONNECTION="pgsql",
    )


def test_model_source_without_trait():
    source = ModelGenerator("pgsql", "users", "User", "App\\Models").render()

    assert "namespace App\\Models;" in source
    assert "use Illuminate\\Database\\Eloquent\\Model;" in source
    assert "class User extends Model" in source
    assert "protected $connection = 'pgsql';" in source
    assert "protected $table = 'users';" in source
    assert "protected $guarded = [];" in source
    assert "use HasUserRelations;" not in source


def test_model_source_with_trait():
    source = ModelGenerator("pgsql", "users", "User", "App\\Models").render("App\\Models\\Relations\\HasUserRelations")

    assert "use App\\Models\\Relations\\HasUserRelations;" in source
    assert "    use HasUserRelations;" in source


def test_trait_source(naming, blog_schema):
    registry = RelationshipBuilder(naming).build(blog_schema)
    source = TraitGenerator("HasUserRelations", "App\\Models", "App\\Models\\Relations",
                            registry.get("users")).render()

    assert "namespace App\\Models\\Relations;" in source
    assert "use App\\Models\\Post;" in source
    assert "trait HasUserRelations" in source
    assert "    use HasRelationships;" in source
    assert "public function authoredPosts()" in source
    assert "return $this->hasMany(Post::class, 'author_id', 'id');" in source


def test_trait_source_belongs_to_and_pivot(naming, pivot_schema):
    registry = RelationshipBuilder(naming).build(pivot_schema)

    users = TraitGenerator("HasUserRelations", "App\\Models", "App\\Models\\Relations",
                           registry.get("users")).render()
    assert "return $this->belongsToMany(Role::class, 'role_user', 'user_id', 'role_id');" in users
    assert users.count("use App\\Models\\RoleUser;") == 1

    pivot = TraitGenerator("HasRoleUserRelations", "App\\Models", "App\\Models\\Relations",
                           registry.get("role_user")).render()
    assert "return $this->belongsTo(User::class, 'user_id', 'id');" in pivot
    assert pivot.index("function user()") < pivot.index("function role()")


def test_generator_writes_models_and_traits(settings, naming, blog_schema, tmp_path):
    registry = RelationshipBuilder(naming).build(blog_schema)
    summary = Generator(settings, registry, naming).generate_all()

    assert summary == {"generated": ["users", "posts"], "skipped": [], "failed": []}
    assert (tmp_path / "Models" / "User.php").exists()
    assert (tmp_path / "Models" / "Post.php").exists()
    trait = (tmp_path / "Models" / "Relations" / "HasPostRelations.php").read_text()
    assert "public function author()" in trait


def test_generator_skips_trait_for_table_without_relations(settings, naming, tmp_path):
    from conftest import schema, table

    registry = RelationshipBuilder(naming).build(schema(table("settings", ["id", "value"])))
    Generator(settings, registry, naming).handle("settings")

    model = (tmp_path / "Models" / "Setting.php").read_text()
    assert "Relations" not in model
    assert not (tmp_path / "Models" / "Relations").exists()


def test_generator_keeps_existing_models_unless_overwrite(settings, naming, blog_schema, tmp_path):
    registry = RelationshipBuilder(naming).build(blog_schema)
    model_path = tmp_path / "Models" / "User.php"
    model_path.parent.mkdir(parents=True)
    model_path.write_text("hand written")

    assert Generator(settings, registry, naming).handle("users") is None
    assert model_path.read_text() == "hand written"

    assert Generator(settings, registry, naming, overwrite=True).handle("users") == model_path
    assert "class User extends Model" in model_path.read_text()


def test_one_failing_table_does_not_stop_the_rest(settings, naming, blog_schema):
    registry = RelationshipBuilder(naming).build(blog_schema)
    summary = Generator(settings, registry, naming).generate_all(["users", "ghosts", "posts"])

    assert summary["generated"] == ["users", "posts"]
    assert summary["failed"] == ["ghosts"]
