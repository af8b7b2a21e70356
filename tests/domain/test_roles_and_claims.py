"""Unit tests for RoleSet and the ClaimTree accessors."""

from orderdesk.domain.model.claims import ClaimTree, LookupStatus
from orderdesk.domain.model.roles import Role, RoleSet, normalize_role


class TestNormalizeRole:

    def test_upper_cases_and_prefixes(self):
        assert normalize_role("admin") == "ROLE_ADMIN"

    def test_keeps_existing_prefix(self):
        assert normalize_role("role_manager") == "ROLE_MANAGER"

    def test_accepts_enum(self):
        assert normalize_role(Role.CUSTOMER) == "ROLE_CUSTOMER"


class TestRoleSet:

    def test_membership_is_case_insensitive(self):
        roles = RoleSet.of(["admin"])
        assert "Admin" in roles
        assert "ROLE_ADMIN" in roles
        assert Role.ADMIN in roles
        assert "manager" not in roles

    def test_blank_roles_dropped(self):
        roles = RoleSet.of(["", "  ", "ROLE_", "employee"])
        assert roles.names == {"EMPLOYEE"}

    def test_iterates_sorted_names(self):
        assert list(RoleSet.of(["manager", "admin"])) == ["ADMIN", "MANAGER"]

    def test_non_string_role_is_not_a_member(self):
        roles = RoleSet.of(["admin"])
        assert not roles.has(None)
        assert not roles.has_any(None, 7)
        assert None not in roles

    def test_empty_set_is_falsy(self):
        assert not RoleSet()


class TestClaimTree:

    def test_found_map(self):
        lookup = ClaimTree({"realm_access": {"roles": []}}).get_map("realm_access")
        assert lookup.found
        assert isinstance(lookup.value, ClaimTree)

    def test_missing_key(self):
        lookup = ClaimTree({}).get_map("realm_access")
        assert lookup.status is LookupStatus.MISSING
        assert lookup.or_none() is None

    def test_null_value_counts_as_missing(self):
        assert ClaimTree({"email": None}).get_string("email").status is LookupStatus.MISSING

    def test_wrong_type_is_mismatch(self):
        lookup = ClaimTree({"realm_access": []}).get_map("realm_access")
        assert lookup.malformed
        assert lookup.or_none() is None

    def test_string_is_not_a_string_list(self):
        assert ClaimTree({"roles": "admin"}).get_string_list("roles").malformed

    def test_string_list_with_foreign_member_is_mismatch(self):
        assert ClaimTree({"roles": ["admin", None]}).get_string_list("roles").malformed

    def test_number_rejects_bool(self):
        assert ClaimTree({"exp": True}).get_number("exp").malformed
        assert ClaimTree({"exp": 1700000000}).get_number("exp").value == 1700000000

    def test_non_mapping_root_is_empty(self):
        tree = ClaimTree(["not", "a", "map"])  # type: ignore[arg-type]
        assert not tree.get_map("realm_access").found
