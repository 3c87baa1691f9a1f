# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Strategy Categories:
- Plain mappings (valid none_in_by input)
- Non-mapping values (must be rejected)
- Non-callable values (must be rejected as predicates)

Usage:
    from tests.property.conftest import plain_mappings, non_mapping_values

    @given(mapping=plain_mappings)
    def test_walks_every_key(mapping: dict) -> None:
        ...
"""

from __future__ import annotations

import datetime
import re

from hypothesis import strategies as st

# =============================================================================
# Valid Input
# =============================================================================

# Mapping keys are strings, like the own property names of a plain object
mapping_keys = st.text(min_size=0, max_size=12)

# Values are unconstrained; integers keep predicates like `v > 0` well-defined
int_values = st.integers(min_value=-1000, max_value=1000)

plain_mappings = st.dictionaries(keys=mapping_keys, values=int_values, max_size=20)

non_empty_mappings = st.dictionaries(keys=mapping_keys, values=int_values, min_size=1, max_size=20)

# =============================================================================
# Invalid Input
# =============================================================================

non_mapping_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=True),
    st.text(),
    st.binary(),
    st.lists(int_values, max_size=5),
    st.tuples(int_values, int_values),
    st.frozensets(int_values, max_size=5),
    st.datetimes(),
    st.dates(),
    st.just(re.compile(r".*")),
    st.just(lambda: None),
    st.just(datetime.datetime.now),
)

non_callable_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(),
    st.lists(int_values, max_size=5),
    st.dictionaries(keys=mapping_keys, values=int_values, max_size=5),
)
