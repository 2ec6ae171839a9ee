"""Tests for pointer/evaluate.py — PointerEvaluator and evaluate."""

from __future__ import annotations

import copy

import pytest

from pointer_patch.errors import (
    ArrayIndexOutOfBoundsError,
    InvalidArrayIndexError,
    InvalidArrayReferenceError,
    InvalidPointerError,
    JsonPatchError,
    KeyNotFoundError,
    RootNotObjectError,
    UnresolvableTokenError,
    UnresolvedPointerError,
)
from pointer_patch.pointer import evaluate, parse_array_index


# ======================================================================
# Successful resolution
# ======================================================================
class TestEvaluateResolves:

    def test_empty_pointer_returns_document(self, nested_doc):
        assert evaluate(nested_doc, "") is nested_doc

    def test_empty_pointer_on_array_root(self):
        doc = [1, 2]
        assert evaluate(doc, "") is doc

    def test_top_level_key(self, nested_doc):
        assert evaluate(nested_doc, "/a") == 1

    def test_nested_key(self, nested_doc):
        assert evaluate(nested_doc, "/b/c") == 2

    def test_array_element(self, nested_doc):
        assert evaluate(nested_doc, "/b/d/1") == 4

    def test_nested_array_in_array(self, nested_doc):
        assert evaluate(nested_doc, "/e/2/1") == 7

    def test_object_in_array(self, nested_doc):
        assert evaluate(nested_doc, "/e/1/x") == "hello"

    def test_array_root(self):
        assert evaluate([[0, {"k": "v"}]], "/0/1/k") == "v"

    def test_escaped_slash(self, nested_doc):
        assert evaluate(nested_doc, "/slash~1key") == "secret"

    def test_escaped_tilde(self, nested_doc):
        assert evaluate(nested_doc, "/tilde~0key") == 123

    def test_slash_pointer_is_empty_key(self, nested_doc):
        assert evaluate(nested_doc, "/") == "empty key"

    def test_null_leaf_value(self):
        assert evaluate({"x": None}, "/x") is None

    def test_returns_alias_not_copy(self, nested_doc):
        assert evaluate(nested_doc, "/b") is nested_doc["b"]

    def test_leading_zero_index_is_accepted(self, nested_doc):
        assert evaluate(nested_doc, "/b/d/01") == 4

    def test_does_not_mutate_document(self, nested_doc):
        before = copy.deepcopy(nested_doc)
        first = evaluate(nested_doc, "/e/1")
        second = evaluate(nested_doc, "/e/1")
        assert first == second
        assert nested_doc == before


# ======================================================================
# Failures
# ======================================================================
class TestEvaluateErrors:

    @pytest.mark.parametrize("root", [42, "text", None, True, 1.5])
    def test_root_must_be_container(self, root):
        with pytest.raises(RootNotObjectError, match=r"^The root object is not a valid JSON object\.$"):
            evaluate(root, "/a")

    def test_root_checked_before_pointer(self):
        with pytest.raises(RootNotObjectError):
            evaluate(None, "")

    def test_pointer_without_leading_slash(self, nested_doc):
        with pytest.raises(InvalidPointerError, match="Invalid JSON Pointer: noLeadingSlash"):
            evaluate(nested_doc, "noLeadingSlash")

    def test_missing_key(self, nested_doc):
        with pytest.raises(KeyNotFoundError, match="^Key not found: nonexistent$") as exc_info:
            evaluate(nested_doc, "/nonexistent")
        assert exc_info.value.token == "nonexistent"

    def test_missing_intermediate_key(self, nested_doc):
        with pytest.raises(KeyNotFoundError, match="Key not found: f"):
            evaluate(nested_doc, "/f/g")

    def test_token_into_number(self, nested_doc):
        with pytest.raises(
            UnresolvableTokenError,
            match=r"Cannot resolve token 'x' in non-object, non-array value\.",
        ):
            evaluate(nested_doc, "/a/x")

    def test_token_into_string(self, nested_doc):
        with pytest.raises(UnresolvableTokenError, match="'someKey'"):
            evaluate(nested_doc, "/e/1/x/someKey")

    def test_token_into_null(self):
        with pytest.raises(UnresolvedPointerError, match="Unable to resolve pointer: /x/y"):
            evaluate({"x": None}, "/x/y")

    def test_index_out_of_bounds(self, nested_doc):
        with pytest.raises(ArrayIndexOutOfBoundsError, match="Array index out of bounds: 999") as exc_info:
            evaluate(nested_doc, "/b/d/999")
        assert exc_info.value.index == 999

    def test_index_equal_to_length_is_out_of_bounds(self, nested_doc):
        with pytest.raises(ArrayIndexOutOfBoundsError, match="Array index out of bounds: 2"):
            evaluate(nested_doc, "/b/d/2")

    @pytest.mark.parametrize("token", ["abc", "-1", "1.0", " 1", "1e2", ""])
    def test_invalid_array_index(self, nested_doc, token):
        with pytest.raises(InvalidArrayIndexError, match="Invalid array index: "):
            evaluate(nested_doc, f"/b/d/{token}")

    def test_dash_is_never_evaluable(self, nested_doc):
        with pytest.raises(
            InvalidArrayReferenceError,
            match=r"Invalid reference: '-' points to a non-existent array element\.",
        ):
            evaluate(nested_doc, "/e/-")

    def test_errors_are_value_errors(self, nested_doc):
        with pytest.raises(ValueError):
            evaluate(nested_doc, "/missing")
        with pytest.raises(JsonPatchError):
            evaluate(nested_doc, "/missing")


# ======================================================================
# parse_array_index
# ======================================================================
class TestParseArrayIndex:

    @pytest.mark.parametrize("token, expected", [("0", 0), ("7", 7), ("10", 10), ("007", 7)])
    def test_valid(self, token, expected):
        assert parse_array_index(token) == expected

    @pytest.mark.parametrize("token", ["-", "", "a", "-0", "+1", "1\n", "١"])
    def test_invalid(self, token):
        assert parse_array_index(token) is None

    def test_strict_rejects_leading_zeros(self, enable_setting):
        enable_setting("STRICT_ARRAY_INDICES")
        assert parse_array_index("0") == 0
        assert parse_array_index("10") == 10
        assert parse_array_index("01") is None

    def test_strict_evaluate_rejects_leading_zeros(self, nested_doc, enable_setting):
        enable_setting("STRICT_ARRAY_INDICES")
        with pytest.raises(InvalidArrayIndexError, match="Invalid array index: 01"):
            evaluate(nested_doc, "/b/d/01")
