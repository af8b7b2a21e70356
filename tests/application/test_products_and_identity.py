"""Integration tests for catalog management and identity resolution."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.delete_product import DeleteProductHandler
from orderdesk.application.list_products import ListProductsHandler
from orderdesk.application.resolve_identity import ResolveIdentityHandler
from orderdesk.application.update_product import UpdateProductHandler
from orderdesk.domain.exceptions import ProductNotFound, ValidationError
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.service.claims_authorizer import ClaimsAuthorizer
from tests.fakes import FakeProductRepository


def _catalog() -> FakeProductRepository:
    return FakeProductRepository(
        [
            Product(id="1", name="Laptop", price=Money.of("999.99"), stock_quantity=50,
                    category="Electronics"),
            Product(id="2", name="Blender", price=Money.of("79.99"), stock_quantity=35,
                    category="Home & Kitchen"),
        ]
    )


class TestAddProduct:

    def test_assigns_next_id(self):
        repo = _catalog()
        dto = AddProductHandler(repo).handle(
            name="Watch", price="299.99", stock_quantity=25, category="Fashion"
        )
        assert dto.id == "3"
        assert dto.price == Decimal("299.99")
        assert repo.get_by_id("3").category == "Fashion"

    def test_first_product_gets_id_one(self):
        dto = AddProductHandler(FakeProductRepository()).handle(name="Backpack", price="59.99")
        assert dto.id == "1"

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(_catalog()).handle(name="laptop", price="1.00")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(_catalog()).handle(name=" ", price="1.00")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(_catalog()).handle(name="Thing", price="-1")


class TestUpdateProduct:

    def test_partial_update(self):
        repo = _catalog()
        dto = UpdateProductHandler(repo).handle("1", price="899.00", stock_quantity=10)
        assert dto.price == Decimal("899.00")
        assert dto.stock_quantity == 10
        assert dto.name == "Laptop"
        assert dto.category == "Electronics"

    def test_rename_to_existing_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(_catalog()).handle("1", name="Blender")

    def test_unknown_product(self):
        with pytest.raises(ProductNotFound):
            UpdateProductHandler(_catalog()).handle("99", price="1.00")


class TestDeleteAndListProducts:

    def test_delete(self):
        repo = _catalog()
        DeleteProductHandler(repo).handle("2")
        assert repo.get_by_id("2") is None

    def test_delete_unknown(self):
        with pytest.raises(ProductNotFound):
            DeleteProductHandler(_catalog()).handle("99")

    def test_list_by_category_is_case_insensitive(self):
        products = ListProductsHandler(_catalog()).handle(category="electronics")
        assert [p.name for p in products] == ["Laptop"]

    def test_list_all(self):
        assert len(ListProductsHandler(_catalog()).handle()) == 2

    def test_get_one(self):
        product = ListProductsHandler(_catalog()).get("1")
        assert product.name == "Laptop"
        assert product.price == Decimal("999.99")

    def test_get_unknown(self):
        with pytest.raises(ProductNotFound):
            ListProductsHandler(_catalog()).get("99")


class TestResolveIdentity:

    def test_full_profile(self):
        claims = {
            "sub": "f2c1",
            "iss": "https://sso.example.com/realms/shop",
            "exp": 1_700_003_600,
            "iat": 1_700_000_000,
            "preferred_username": "alice",
            "email": "alice@example.com",
            "given_name": "Alice",
            "family_name": "Liddell",
            "groups": ["/staff"],
            "realm_access": {"roles": ["admin"]},
            "resource_access": {"ecommerce-backend": {"roles": ["manager"]}},
        }
        identity = ResolveIdentityHandler(ClaimsAuthorizer()).handle(claims)

        assert identity.username == "alice"
        assert identity.roles == ["ADMIN", "MANAGER"]
        assert identity.groups == ["/staff"]
        assert identity.subject == "f2c1"
        assert identity.issuer == "https://sso.example.com/realms/shop"
        assert identity.issued_at == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)
        assert identity.is_admin and identity.is_manager
        assert not identity.is_employee and not identity.is_customer

    def test_missing_fields_are_none(self):
        identity = ResolveIdentityHandler(ClaimsAuthorizer()).handle({})
        assert identity.username is None
        assert identity.email is None
        assert identity.groups is None
        assert identity.expires_at is None
        assert identity.roles == []
        assert not identity.is_admin

    def test_default_authorities_count(self):
        identity = ResolveIdentityHandler(ClaimsAuthorizer()).handle(
            {}, default_authorities=["ROLE_CUSTOMER"]
        )
        assert identity.roles == ["CUSTOMER"]
        assert identity.is_customer

    def test_scopes_are_not_roles(self):
        identity = ResolveIdentityHandler(ClaimsAuthorizer()).handle(
            {"realm_access": {"roles": ["admin"]}},
            default_authorities=["SCOPE_profile", "SCOPE_email"],
        )
        assert identity.roles == ["ADMIN"]
