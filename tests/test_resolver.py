"""Tests for property path resolution against element types."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from queryable_extensions import PropertyNotFoundError, resolve_property_path
from queryable_extensions.sorting.resolver import describe_type, unwrap_type
from tests.models import (
    Assembly,
    Category,
    CategoryRow,
    Coordinate,
    DiscountedProduct,
    OrderLine,
    PlainRecord,
    Point,
    Product,
    ProductRow,
    Shipment,
    SlottedPart,
    Supplier,
)
from tests.models_deferred import Item, Tag


class TestResolvePlainClasses:
    def test_segment_is_case_insensitive(self) -> None:
        path = resolve_property_path(Category, "NAME")
        assert path.attribute_names == ("name",)
        assert path.value_type is str

    def test_nested_path_walks_value_types(self) -> None:
        path = resolve_property_path(Product, "Category.Name")
        assert path.attribute_names == ("category", "name")
        assert path.owner_types == (Product, Category)
        assert path.value_type is str

    def test_properties_are_members(self) -> None:
        assert resolve_property_path(Product, "Label").value_type is str
        assert resolve_property_path(Product, "name_length").value_type is int

    def test_inherited_members_resolve(self) -> None:
        path = resolve_property_path(DiscountedProduct, "category.id")
        assert path.attribute_names == ("category", "id")
        assert resolve_property_path(DiscountedProduct, "label").value_type is str

    def test_private_members_are_not_public(self) -> None:
        with pytest.raises(PropertyNotFoundError):
            resolve_property_path(Product, "_secret")

    def test_get_value_reads_live_object(self) -> None:
        product = Product(id=1, name="Widget", category=Category(id=7, name="Tools"))
        assert resolve_property_path(Product, "category.name").get_value(product) == "Tools"

    def test_get_value_short_circuits_on_none(self) -> None:
        product = Product(id=1, name="Widget", category=None)
        assert resolve_property_path(Product, "category.name").get_value(product) is None


class TestResolveErrors:
    def test_message_names_segment_and_type(self) -> None:
        with pytest.raises(PropertyNotFoundError) as exc_info:
            resolve_property_path(Category, "NoSuchProp")
        assert "Property 'NoSuchProp' not found" in str(exc_info.value)
        assert "'Category'" in str(exc_info.value)

    def test_nested_failure_names_only_the_failing_segment(self) -> None:
        with pytest.raises(PropertyNotFoundError) as exc_info:
            resolve_property_path(Product, "Category.Missing")
        err = exc_info.value
        assert err.segment == "Missing"
        assert err.type_name == "Category"
        assert "Category.Missing" not in err.details
        assert err.to_dict() == {
            "error": "property_not_found",
            "details": "Property 'Missing' not found on type 'Category'.",
        }

    def test_is_an_invalid_argument_and_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_property_path(Product, "Nope")


class TestResolveOtherTypeShapes:
    def test_pydantic_model_fields(self) -> None:
        path = resolve_property_path(Shipment, "supplier.Country")
        assert path.owner_types == (Shipment, Supplier)
        assert path.value_type is str

    def test_pydantic_internals_are_not_members(self) -> None:
        with pytest.raises(PropertyNotFoundError):
            resolve_property_path(Supplier, "model_fields_set")

    def test_typeddict_reads_by_key(self) -> None:
        path = resolve_property_path(OrderLine, "Quantity")
        line: OrderLine = {"sku": "A-1", "quantity": 3}
        assert path.get_value(line) == 3

    def test_sqlalchemy_columns_and_relationships(self) -> None:
        path = resolve_property_path(ProductRow, "Category.Name")
        assert path.attribute_names == ("category", "name")
        assert path.owner_types == (ProductRow, CategoryRow)
        assert [m.kind for m in path.members] == ["relationship", "column"]
        assert path.value_type is str

    def test_namedtuple_fields(self) -> None:
        path = resolve_property_path(Point, "X")
        assert path.attribute_names == ("x",)
        assert path.get_value(Point(3, 4)) == 3

    def test_typed_namedtuple_fields(self) -> None:
        assert resolve_property_path(Coordinate, "lon").value_type is float

    def test_slotted_class_public_slots(self) -> None:
        assert resolve_property_path(SlottedPart, "Weight").get_value(SlottedPart("a", 2.5)) == 2.5
        assert resolve_property_path(Assembly, "part").attribute_names == ("part",)
        with pytest.raises(PropertyNotFoundError):
            resolve_property_path(SlottedPart, "_cache")

    def test_untyped_member_is_named_when_nesting_fails(self) -> None:
        with pytest.raises(PropertyNotFoundError) as exc_info:
            resolve_property_path(Assembly, "part.code")
        assert "Property 'code' not found" in str(exc_info.value)
        assert "'Assembly.part'" in str(exc_info.value)

    def test_attributes_set_only_in_init_are_not_members(self) -> None:
        with pytest.raises(PropertyNotFoundError, match="Property 'name' not found on type 'PlainRecord'"):
            resolve_property_path(PlainRecord, "name")


class TestPartlyResolvableAnnotations:
    def test_other_fields_still_resolve(self) -> None:
        path = resolve_property_path(Item, "Tag.Label")
        assert path.owner_types == (Item, Tag)
        assert path.value_type is str

    def test_unresolvable_field_is_still_a_member(self) -> None:
        path = resolve_property_path(Item, "cost")
        assert path.value_type is Any
        assert path.members[0].hint == "Optional[Decimal]"

    def test_nesting_through_unresolvable_field_names_it(self) -> None:
        with pytest.raises(PropertyNotFoundError) as exc_info:
            resolve_property_path(Item, "cost.real")
        err = exc_info.value
        assert err.segment == "real"
        assert err.type_name == "Optional[Decimal]"
        assert "'Any'" not in err.details
        assert "'Item.cost'" in err.details


        assert path.value_type is str


class TestTypeMetadata:
    def test_metadata_is_built_once_per_type(self) -> None:
        assert describe_type(Product) is describe_type(Product)

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [(Optional[int], int), (int | None, int), (str, str), (int | str, Any), ("Category", Any)],
    )
    def test_unwrap_type(self, hint: Any, expected: Any) -> None:
        assert unwrap_type(hint) is expected
