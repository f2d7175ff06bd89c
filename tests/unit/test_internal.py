"""
Unit tests for engine internals: property chains, message formatting,
display names, accessors and selectors.

Includes property-based testing with hypothesis for path rendering.
"""

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fluentcheck.core.exceptions import ConfigurationError
from fluentcheck.core.internal import (
    DefaultValidatorSelector,
    MemberNameValidatorSelector,
    MessageFormatter,
    PropertyAccessor,
    PropertyChain,
    ValidationContext,
    split_into_words,
)

segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12)


@dataclass
class Address:
    postcode: str | None = None


@dataclass
class Customer:
    name: str | None = None
    address: Address | None = None


@pytest.mark.unit
class TestPropertyChain:
    """Tests for PropertyChain"""

    def test_empty_chain_renders_leaf_only(self):
        assert PropertyChain().build_property_name("Address") == "Address"

    def test_nested_chain_renders_dotted_path(self):
        chain = PropertyChain()
        chain.add("Customer")
        assert chain.build_property_name("Address") == "Customer.Address"

    def test_empty_leaf_has_no_trailing_separator(self):
        chain = PropertyChain(["Customer", "Address"])
        assert chain.build_property_name(None) == "Customer.Address"
        assert chain.build_property_name("") == "Customer.Address"

    def test_empty_chain_renders_empty_string(self):
        assert str(PropertyChain()) == ""
        assert PropertyChain().build_property_name(None) == ""

    def test_child_does_not_mutate_parent(self):
        parent = PropertyChain(["Customer"])
        child = parent.child("Address")

        assert str(parent) == "Customer"
        assert str(child) == "Customer.Address"
        assert len(parent) == 1

    def test_empty_segments_are_ignored(self):
        chain = PropertyChain()
        chain.add("")
        chain.add(None)
        assert len(chain) == 0

    @given(st.lists(segment, max_size=6), segment)
    def test_property_path_is_segments_joined_by_dots(self, segments, leaf):
        """Property test: rendering is always the segments plus the leaf, dot separated"""
        chain = PropertyChain(segments)
        assert chain.build_property_name(leaf) == ".".join(segments + [leaf])
        assert chain.build_property_name(leaf).split(".") == segments + [leaf]

    @given(st.lists(segment, max_size=6), segment)
    def test_property_child_extends_by_one(self, segments, extra):
        """Property test: a child chain is the parent's segments plus one"""
        parent = PropertyChain(segments)
        child = parent.child(extra)
        assert child.segments == tuple(segments) + (extra,)
        assert parent.segments == tuple(segments)


@pytest.mark.unit
class TestMessageFormatter:
    """Tests for MessageFormatter"""

    def test_substitutes_property_name(self):
        formatter = MessageFormatter().append_property_name("First Name")
        assert formatter.build_message("'{property_name}' is required") == "'First Name' is required"

    def test_substitutes_named_and_positional_arguments(self):
        formatter = (
            MessageFormatter()
            .append_argument("comparison_value", 10)
            .append_additional_arguments("a", "b")
        )
        assert formatter.build_message("{comparison_value}:{0}:{1}") == "10:a:b"

    def test_unknown_placeholders_left_untouched(self):
        formatter = MessageFormatter().append_property_name("Age")
        message = formatter.build_message("{property_name} {unknown} {3}")
        assert message == "Age {unknown} {3}"

    def test_template_without_placeholders(self):
        assert MessageFormatter().build_message("Plain message") == "Plain message"

    @given(st.text(alphabet=st.characters(exclude_characters="{}"), max_size=40))
    def test_property_text_without_braces_is_unchanged(self, template):
        """Property test: templates without placeholders pass through untouched"""
        formatter = MessageFormatter().append_property_name("X").append_additional_arguments(1)
        assert formatter.build_message(template) == template


@pytest.mark.unit
class TestDisplayNames:
    """Tests for split_into_words"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("firstName", "First Name"),
            ("FirstName", "First Name"),
            ("date_of_birth", "Date Of Birth"),
            ("HTTPServer", "HTTP Server"),
            ("age", "Age"),
            ("address.postcode", "Address Postcode"),
        ],
    )
    def test_split_into_words(self, name, expected):
        assert split_into_words(name) == expected

    def test_empty_name_has_no_display_name(self):
        assert split_into_words(None) is None
        assert split_into_words("") is None
        assert split_into_words("__") is None


@pytest.mark.unit
class TestPropertyAccessor:
    """Tests for PropertyAccessor"""

    def test_from_name_reads_attributes(self):
        accessor = PropertyAccessor.from_name("name")
        assert accessor.name == "name"
        assert accessor.resolve(Customer(name="Bob")) == "Bob"

    def test_from_name_reads_mapping_keys(self):
        accessor = PropertyAccessor.from_name("name")
        assert accessor.resolve({"name": "Bob"}) == "Bob"
        assert accessor.resolve({}) is None

    def test_dotted_path_walks_nested_members(self):
        accessor = PropertyAccessor.from_name("address.postcode")
        assert accessor.resolve(Customer(address=Address("AB1"))) == "AB1"
        assert accessor.resolve(Customer(address=None)) is None
        assert accessor.resolve({"address": {"postcode": "XY9"}}) == "XY9"

    def test_lambda_has_no_name(self):
        accessor = PropertyAccessor.from_callable(lambda c: c.name)
        assert accessor.name is None

    def test_named_function_supplies_name(self):
        def surname(customer):
            return customer.name

        assert PropertyAccessor.from_callable(surname).name == "surname"

    def test_create_with_explicit_name(self):
        accessor = PropertyAccessor.create(lambda c: c.name, "name")
        assert accessor.name == "name"

    @pytest.mark.parametrize("target", [None, "", 42])
    def test_invalid_targets_raise_configuration_error(self, target):
        with pytest.raises(ConfigurationError):
            PropertyAccessor.create(target)


@pytest.mark.unit
class TestSelectors:
    """Tests for validator selectors"""

    def test_default_selector_runs_everything(self):
        assert DefaultValidatorSelector().can_execute(object(), "anything.at.all") is True

    def test_member_name_selector_matches_exact_paths(self):
        selector = MemberNameValidatorSelector(["name"])
        assert selector.can_execute(None, "name") is True
        assert selector.can_execute(None, "age") is False

    def test_member_name_selector_descends_into_parents(self):
        selector = MemberNameValidatorSelector(["customer.address.postcode"])
        assert selector.can_execute(None, "customer") is True
        assert selector.can_execute(None, "customer.address") is True
        assert selector.can_execute(None, "customer.name") is False
        assert selector.can_execute(None, "cust") is False

    def test_member_name_selector_includes_rules_below_a_selected_parent(self):
        selector = MemberNameValidatorSelector(["customer.address"])
        assert selector.can_execute(None, "customer.address.postcode") is True
        assert selector.can_execute(None, "customer.addressee") is False
        assert selector.can_execute(None, "customer.name") is False


@pytest.mark.unit
class TestValidationContext:
    """Tests for ValidationContext"""

    def test_defaults(self):
        context = ValidationContext("instance")
        assert str(context.property_chain) == ""
        assert isinstance(context.selector, DefaultValidatorSelector)
        assert context.is_child_context is False

    def test_clone_for_child_keeps_selector_and_extends_chain(self):
        selector = MemberNameValidatorSelector(["a.b"])
        parent = ValidationContext("parent", PropertyChain(["a"]), selector)

        child = parent.clone_for_child("child", "b")

        assert child.instance_to_validate == "child"
        assert str(child.property_chain) == "a.b"
        assert child.selector is selector
        assert str(parent.property_chain) == "a"
