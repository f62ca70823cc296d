"""
Unit tests for the batchUpdate request union.
"""
import pytest

from gdocs.batch_requests import REQUEST_KINDS, dump_requests, request_kind
from gdocs.errors import InputValidationError
from gdocs.schemas import DocumentBatchUpdateInput, parse_input

RANGE = {"startIndex": 1, "endIndex": 10}
CELL = {"tableStartLocation": {"index": 2}, "rowIndex": 0, "columnIndex": 1}

ONE_OF_EACH = [
    {"insertText": {"text": "Hello", "location": {"index": 1}}},
    {"deleteContentRange": {"range": RANGE}},
    {"replaceAllText": {"containsText": {"text": "a", "matchCase": True}, "replaceText": "b"}},
    {"insertInlineImage": {"uri": "https://example.com/a.png", "endOfSegmentLocation": {"segmentId": ""}}},
    {"insertTable": {"rows": 2, "columns": 3, "location": {"index": 1}}},
    {"insertTableRow": {"tableCellLocation": CELL, "insertBelow": True}},
    {"insertTableColumn": {"tableCellLocation": CELL, "insertRight": False}},
    {"deleteTableRow": {"tableCellLocation": CELL}},
    {"deleteTableColumn": {"tableCellLocation": CELL}},
    {"insertPageBreak": {"location": {"index": 5, "tabId": "t.0"}}},
    {"createNamedRange": {"name": "intro", "range": RANGE}},
    {"deleteNamedRange": {"name": "intro"}},
    {"createParagraphBullets": {"range": RANGE, "bulletPreset": "BULLET_CHECKBOX"}},
    {"deleteParagraphBullets": {"range": RANGE}},
]


def _parse(requests):
    return parse_input(DocumentBatchUpdateInput, {"documentId": "d", "requests": requests}, "document_batch_update")


class TestRequestKinds:
    """Tests for the closed set of operation kinds."""

    def test_fourteen_kinds(self):
        assert len(REQUEST_KINDS) == 14
        assert len(set(REQUEST_KINDS)) == 14

    def test_request_kind_from_dict(self):
        assert request_kind({"deleteTableRow": {}}) == "deleteTableRow"
        assert request_kind({"updateTextStyle": {}}) is None
        assert request_kind("insertText") is None


class TestBatchUpdateValidation:
    """Tests for validating heterogeneous request lists."""

    def test_every_kind_accepted_and_order_preserved(self):
        params = _parse(ONE_OF_EACH)
        dumped = dump_requests(params.requests)

        assert [next(iter(request)) for request in dumped] == list(REQUEST_KINDS)
        assert dumped == ONE_OF_EACH

    def test_declared_defaults_applied(self):
        """Dimension units default to points."""
        params = _parse([{
            "insertInlineImage": {
                "uri": "https://example.com/a.png",
                "location": {"index": 1},
                "objectSize": {"width": {"magnitude": 100}},
            }
        }])
        dumped = dump_requests(params.requests)

        assert dumped[0]["insertInlineImage"]["objectSize"] == {"width": {"magnitude": 100, "unit": "PT"}}

    def test_unknown_kind_rejected(self):
        with pytest.raises(InputValidationError) as exc_info:
            _parse([ONE_OF_EACH[0], {"updateTextStyle": {"range": RANGE, "fields": "bold"}}])

        field, message = exc_info.value.problems[0]
        assert field.startswith("requests.1")
        assert "exactly one of" in message

    def test_non_object_element_rejected(self):
        with pytest.raises(InputValidationError):
            _parse(["insertText"])

    def test_second_operation_key_rejected(self):
        with pytest.raises(InputValidationError) as exc_info:
            _parse([{"insertText": {"text": "a", "location": {"index": 1}}, "deleteContentRange": {"range": RANGE}}])

        assert any("deleteContentRange" in field for field, _ in exc_info.value.problems)

    def test_only_matching_variant_is_validated(self):
        """Errors point inside the variant named by the key."""
        with pytest.raises(InputValidationError) as exc_info:
            _parse([{"deleteContentRange": {"range": {"startIndex": 1}}}])

        fields = [field for field, _ in exc_info.value.problems]
        assert len(fields) == 1
        assert fields[0].endswith("range.endIndex")

    def test_unknown_nested_field_rejected(self):
        with pytest.raises(InputValidationError):
            _parse([{"insertText": {"text": "a", "location": {"index": 1}, "style": "bold"}}])

    def test_insert_needs_exactly_one_position(self):
        with pytest.raises(InputValidationError):
            _parse([{"insertText": {"text": "a"}}])
        with pytest.raises(InputValidationError):
            _parse([{"insertPageBreak": {"location": {"index": 1}, "endOfSegmentLocation": {}}}])

    def test_delete_named_range_needs_target(self):
        with pytest.raises(InputValidationError):
            _parse([{"deleteNamedRange": {}}])

    def test_unknown_bullet_preset_rejected(self):
        with pytest.raises(InputValidationError):
            _parse([{"createParagraphBullets": {"range": RANGE, "bulletPreset": "BULLET_SMILEY"}}])

    def test_table_dimensions_must_be_positive(self):
        with pytest.raises(InputValidationError):
            _parse([{"insertTable": {"rows": 0, "columns": 2, "location": {"index": 1}}}])

    def test_empty_request_list_rejected(self):
        with pytest.raises(InputValidationError):
            _parse([])

    def test_edit_docs_alias(self):
        params = parse_input(
            DocumentBatchUpdateInput,
            {"document_id": "d", "editDocs": [ONE_OF_EACH[1]]},
            "document_batch_update",
        )
        assert dump_requests(params.requests) == [ONE_OF_EACH[1]]
