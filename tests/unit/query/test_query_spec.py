"""Unit tests for declarative query-spec parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import InvalidSortDirectionError, InvalidWindowError, QuerySpecError
from query.query_spec import (
    CriterionSpec,
    SortSpecEntry,
    WindowSpecEntry,
    build_query,
    load_query_spec,
    parse_query_spec,
)

VALID_SPEC_YAML = """
version: 1
criteria:
  - key: age
    value: 30
    operator: ">"
  - key: city
    value: London
sort:
  key: age
  direction: DESC
limit:
  offset: 0
  length: 4
"""


def _write_spec(tmp_path: Path, text: str) -> str:
    spec_file = tmp_path / "query.yaml"
    spec_file.write_text(text, encoding="utf-8")
    return str(spec_file)


def test_load_query_spec_valid_file_parses_all_sections(tmp_path: Path) -> None:
    """Valid YAML should parse criteria, sort, and limit."""
    spec = load_query_spec(_write_spec(tmp_path, VALID_SPEC_YAML))

    assert spec.criteria == (
        CriterionSpec(key="age", value=30, operator=">"),
        CriterionSpec(key="city", value="London", operator="="),
    )
    assert spec.sort == SortSpecEntry(key="age", direction="DESC")
    assert spec.window == WindowSpecEntry(offset=0, length=4)


def test_load_query_spec_missing_file_raises_error(tmp_path: Path) -> None:
    """Missing spec files should be reported."""
    with pytest.raises(QuerySpecError, match="does not exist"):
        load_query_spec(str(tmp_path / "absent.yaml"))


def test_load_query_spec_empty_file_raises_error(tmp_path: Path) -> None:
    """Empty documents should be rejected."""
    with pytest.raises(QuerySpecError, match="empty"):
        load_query_spec(_write_spec(tmp_path, ""))


def test_load_query_spec_invalid_yaml_raises_error(tmp_path: Path) -> None:
    """Broken YAML syntax should surface as a spec error."""
    with pytest.raises(QuerySpecError, match="Failed to parse"):
        load_query_spec(_write_spec(tmp_path, "version: [1\n"))


def test_parse_query_spec_defaults_optional_sections() -> None:
    """Only version should be required."""
    spec = parse_query_spec({"version": 1})

    assert spec.criteria == ()
    assert spec.sort is None
    assert spec.window is None


def test_parse_query_spec_applies_sort_direction_default() -> None:
    """Sort direction should default to ascending."""
    spec = parse_query_spec({"version": 1, "sort": {"key": "name"}})

    assert spec.sort == SortSpecEntry(key="name", direction="ASC")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"criteria": []},
        {"version": 2},
        {"version": True},
        {"version": 1, "order": {}},
        {"version": 1, "criteria": {"key": "a"}},
        {"version": 1, "criteria": [{"key": "a"}]},
        {"version": 1, "criteria": [{"value": 1}]},
        {"version": 1, "criteria": [{"key": "a", "value": 1, "op": "="}]},
        {"version": 1, "sort": {"direction": "ASC"}},
        {"version": 1, "limit": {"offset": 0}},
        {"version": 1, "limit": {"offset": "0", "length": 1}},
    ],
)
def test_parse_query_spec_rejects_malformed_payloads(payload: object) -> None:
    """Schema violations should raise spec errors."""
    with pytest.raises(QuerySpecError):
        parse_query_spec(payload)


def test_build_query_matches_fluent_calls(people: list[dict[str, object]]) -> None:
    """Declarative specs should configure the same query as fluent calls."""
    spec = parse_query_spec(
        {
            "version": 1,
            "criteria": [{"key": "age", "value": 30, "operator": ">"}],
            "sort": {"key": "name", "direction": "DESC"},
            "limit": {"offset": 1, "length": 3},
        }
    )

    declared = build_query(people, spec).get_results()
    fluent = (
        build_query(people, parse_query_spec({"version": 1}))
        .add_criterion("age", 30, ">")
        .sorted_by("name", "DESC")
        .limit(1, 3)
        .get_results()
    )

    assert declared == fluent
    assert [record["name"] for record in declared] == ["Grace", "Alan"]


def test_build_query_validates_semantics_through_builder(
    people: list[dict[str, object]],
) -> None:
    """Semantic errors should come from the builder's own validation."""
    spec = parse_query_spec({"version": 1, "sort": {"key": "age", "direction": "down"}})

    with pytest.raises(InvalidSortDirectionError):
        build_query(people, spec)


def test_apply_spec_rejected_window_leaves_builder_unchanged() -> None:
    """A spec failing on its last section should not apply earlier sections."""
    query = build_query([{"a": 1}, {"a": 2}], parse_query_spec({"version": 1}))
    spec = parse_query_spec(
        {
            "version": 1,
            "criteria": [{"key": "a", "value": 1}],
            "sort": {"key": "a"},
            "limit": {"offset": 0, "length": 9},
        }
    )

    with pytest.raises(InvalidWindowError):
        query.apply_spec(spec)

    assert query.criteria == ()
    assert query.sort_spec is None
    assert query.window_spec is None
    assert query.get_count() == 2


def test_apply_spec_keeps_prior_sort_and_window_when_sections_absent(
    people: list[dict[str, object]],
) -> None:
    """Sections missing from a spec should not clear fluent configuration."""
    query = build_query(people, parse_query_spec({"version": 1})).sorted_by("age").limit(0, 2)

    query.apply_spec(parse_query_spec({"version": 1, "criteria": [{"key": "city", "value": "London"}]}))

    assert query.sort_spec is not None
    assert query.window_spec is not None
    assert [record["id"] for record in query.get_results()] == [1, 3]
