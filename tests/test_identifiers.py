from __future__ import annotations

import pytest

from apimocker.domain.identifiers import (
    IdentifierCoercionError,
    NumericId,
    TextId,
    canonical_text,
    coerce_like,
    find_index,
    identifier_of,
)


def test_identifier_of_distinguishes_kinds():
    assert identifier_of({"id": 3}) == NumericId(3)
    assert identifier_of({"id": 2.5}) == NumericId(2.5)
    assert identifier_of({"id": "x"}) == TextId("x")
    assert identifier_of({"id": True}) is None
    assert identifier_of({"id": None}) is None
    assert identifier_of({"name": "no id"}) is None


def test_canonical_text():
    assert canonical_text(1) == "1"
    assert canonical_text("1") == "1"
    assert canonical_text(1.5) == "1.5"
    assert canonical_text(True) == "true"
    assert canonical_text(None) == "null"


def test_find_index_compares_text_forms():
    records = [{"id": 1}, {"name": "anonymous"}, {"id": "b"}, {"id": 1, "dup": True}]
    assert find_index(records, "1") == 0
    assert find_index(records, "b") == 2
    assert find_index(records, "01") is None
    assert find_index(records, "missing") is None
    assert find_index([], "1") is None


def test_coerce_like_keeps_kind():
    assert coerce_like(NumericId(1), "1") == NumericId(1)
    assert isinstance(coerce_like(NumericId(1), "1").value, int)
    assert coerce_like(TextId("1"), "1") == TextId("1")


def test_coerce_like_rejects_non_integer_for_numeric():
    with pytest.raises(IdentifierCoercionError):
        coerce_like(NumericId(1), "abc")
    with pytest.raises(IdentifierCoercionError):
        coerce_like(NumericId(1.5), "1.5")
