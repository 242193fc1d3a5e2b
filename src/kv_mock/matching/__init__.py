from .call_shapes import OPERATIONS, CallShape, OperationName
from .equality import deep_equal
from .matchers import (
    AnyOfType,
    Exact,
    Matcher,
    any_bigint,
    any_boolean,
    any_bytes,
    any_consistency_level,
    any_key,
    any_list_selector,
    any_number,
    any_string,
    any_value,
    eq,
)
from .resolve import (
    consistency_matcher,
    key_matcher,
    key_parts,
    keys_matcher,
    matches_list_selector,
    matches_object,
    to_matcher,
)
from .shapes import FieldMatcher, KeyShape, ListSelector, MultiKey, ObjectShape

__all__ = [
    "OPERATIONS",
    "AnyOfType",
    "CallShape",
    "Exact",
    "FieldMatcher",
    "KeyShape",
    "ListSelector",
    "Matcher",
    "MultiKey",
    "ObjectShape",
    "OperationName",
    "any_bigint",
    "any_boolean",
    "any_bytes",
    "any_consistency_level",
    "any_key",
    "any_list_selector",
    "any_number",
    "any_string",
    "any_value",
    "consistency_matcher",
    "deep_equal",
    "eq",
    "key_matcher",
    "key_parts",
    "keys_matcher",
    "matches_list_selector",
    "matches_object",
    "to_matcher",
]
