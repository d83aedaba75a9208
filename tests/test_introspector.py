"""Tests for model introspection."""

from model_describer.database import MetadataSchemaIntrospector, ScalarType, TypeMapper
from model_describer.introspector import BasicInfo, ModelIntrospector, PrimaryKeyInfo, PropertyInfo
from tests.fixtures.models import Account, Base, Setting, User


class TestBasicInfo:
    """Test the table/key/pagination snapshot."""

    def test_basic_info(self, users_schema):
        introspector = ModelIntrospector(users_schema, TypeMapper("sqlite"))

        info = introspector.basic_info(Account())

        assert info == BasicInfo(
            table_name="users",
            primary_key=PrimaryKeyInfo(name="id", storage_type="integer", incrementing=True),
            default_page_size=15,
        )

    def test_basic_info_does_not_touch_schema(self, users_schema):
        ModelIntrospector(users_schema, TypeMapper("sqlite")).basic_info(Account())
        assert users_schema.calls == []

    def test_sqlalchemy_model(self):
        introspector = ModelIntrospector(MetadataSchemaIntrospector(Base.metadata), TypeMapper("sqlite"))

        info = introspector.basic_info(Setting())

        assert info.table_name == "settings"
        assert info.primary_key == PrimaryKeyInfo(name="key", storage_type="string", incrementing=False)
        assert info.default_page_size == 50


class TestPropertyInfo:
    """Test the per-column snapshot."""

    def test_property_info(self, users_schema):
        introspector = ModelIntrospector(users_schema, TypeMapper("sqlite"))

        info = introspector.property_info(Account())

        assert info.scalar_types == {
            "id": ScalarType.INT,
            "name": ScalarType.STRING,
            "is_active": ScalarType.INTEGER,
        }
        assert info.storage_types == {"id": "integer", "name": "string", "is_active": "boolean"}
        assert info.fillable == frozenset({"name"})
        assert info.guarded == frozenset()
        assert info.hidden == frozenset()
        assert info.casts == {}

    def test_lists_columns_once_then_types_each(self, users_schema):
        ModelIntrospector(users_schema, TypeMapper("sqlite")).property_info(Account())

        assert users_schema.calls == [
            ("get_column_names", "users"),
            ("get_column_type", "users", "id"),
            ("get_column_type", "users", "name"),
            ("get_column_type", "users", "is_active"),
        ]

    def test_boolean_follows_default_engine(self, users_schema):
        info = ModelIntrospector(users_schema, TypeMapper("postgresql")).property_info(Account())
        assert info.scalar_types["is_active"] == ScalarType.BOOLEAN

    def test_sqlalchemy_model(self):
        introspector = ModelIntrospector(MetadataSchemaIntrospector(Base.metadata), TypeMapper("mysql"))

        info = introspector.property_info(User())

        assert info.scalar_types["created_at"] == ScalarType.STRING
        assert info.scalar_types["is_active"] == ScalarType.INTEGER
        assert info.fillable == {"name", "email"}
        assert info.guarded == {"*"}
        assert info.hidden == {"password"}
        assert info.casts["id"] == "integer"

    def test_unknown_storage_type_is_mixed(self):
        introspector = ModelIntrospector(MetadataSchemaIntrospector(Base.metadata), TypeMapper("sqlite"))
        info = introspector.property_info(Setting())
        assert info.storage_types["value"] == "json"
        assert info.scalar_types["value"] == ScalarType.MIXED

    def test_column_names(self, users_schema):
        introspector = ModelIntrospector(users_schema, TypeMapper("sqlite"))
        assert introspector.column_names(Account()) == ["id", "name", "is_active"]


class TestIdempotence:
    """Test that repeated introspection gives identical snapshots."""

    def test_repeated_calls_are_equal(self, users_schema):
        introspector = ModelIntrospector(users_schema, TypeMapper("sqlite"))
        model = Account()

        assert introspector.basic_info(model) == introspector.basic_info(model)
        assert introspector.property_info(model) == introspector.property_info(model)

    def test_empty_property_info(self):
        info = PropertyInfo()
        assert info.scalar_types == {}
        assert info.fillable == frozenset()
