"""
Tests for the MCP tool surface.

Tools are driven through mcp.call_tool, the path a host request takes, so
argument handling is exercised exactly as clients see it.
"""
import asyncio

import pytest
from unittest.mock import patch

import mcp_server
from gdocs.api import DocsClient


def _call(name, arguments):
    return asyncio.run(mcp_server.mcp.call_tool(name, arguments))


def _list_tools():
    return {tool.name: tool for tool in asyncio.run(mcp_server.mcp.list_tools())}


@pytest.fixture
def patched_client(docs_service):
    with patch("mcp_server.get_docs_client", return_value=DocsClient(docs_service)):
        yield


@pytest.mark.usefixtures("patched_client")
class TestToolEnvelope:

    def test_success_envelope(self):
        result = _call("document_append", {"documentId": "doc-123", "text": "more"})

        assert result == {"data": {"documentId": "doc-123", "replies": [{}]}, "error": "", "successful": True}

    def test_unset_optional_arguments_are_not_forwarded(self, sent_requests):
        _call("document_insert", {"documentId": "doc-123", "text": "x", "index": 1})

        assert sent_requests() == [{"insertText": {"text": "x", "location": {"index": 1}}}]

    def test_replace_without_match_case(self, sent_requests):
        _call("document_replace", {"documentId": "doc-123", "findText": "a", "replaceText": "b"})

        assert sent_requests()[0]["replaceAllText"]["containsText"]["matchCase"] is False

    def test_validation_failure_envelope(self, docs_service):
        result = _call("document_batch_update", {"documentId": "doc-123", "requests": [{"bogus": {}}]})

        assert result["successful"] is False
        assert result["data"] == {}
        assert result["error"].startswith("Failed to update document: Invalid arguments for document_batch_update")
        docs_service.documents.assert_not_called()

    def test_output_failure_envelope(self, documents):
        documents.create.return_value.execute.return_value = {"title": "missing id"}

        result = _call("document_create", {"title": "T"})

        assert result["successful"] is False
        assert "Unexpected response for document_create" in result["error"]

    def test_get_text_envelope(self, documents):
        documents.get.return_value.execute.return_value = {"documentId": "doc-123", "title": "T", "tabs": []}

        result = _call("document_get_text", {"documentId": "doc-123"})

        assert result["successful"] is True
        assert result["data"] == {"documentId": "doc-123", "title": "T", "tabs": []}


@pytest.mark.usefixtures("patched_client")
class TestArgumentsReachSchemas:
    """Host arguments are validated by the strict schemas, not loosened first."""

    def test_unknown_field_rejected(self, docs_service):
        result = _call("document_append", {"documentId": "doc-123", "text": "x", "bogus": 1})

        assert result["successful"] is False
        assert "bogus" in result["error"]
        docs_service.documents.assert_not_called()

    def test_string_index_not_coerced(self, docs_service):
        result = _call("document_insert", {"documentId": "doc-123", "text": "x", "index": "5"})

        assert result["successful"] is False
        assert "index" in result["error"]
        docs_service.documents.assert_not_called()

    def test_string_match_case_not_coerced(self, docs_service):
        result = _call(
            "document_replace",
            {"documentId": "doc-123", "findText": "a", "replaceText": "b", "matchCase": "yes"},
        )

        assert result["successful"] is False
        docs_service.documents.assert_not_called()

    def test_non_object_request_element_rejected(self, docs_service):
        result = _call("document_batch_update", {"documentId": "doc-123", "requests": ["insertText"]})

        assert result["successful"] is False
        assert "exactly one of" in result["error"]
        docs_service.documents.assert_not_called()

    def test_document_id_alias_accepted(self, documents):
        documents.get.return_value.execute.return_value = {"documentId": "doc-123", "title": "T", "tabs": []}

        result = _call("document_get_text", {"document_id": "doc-123"})

        assert result["successful"] is True
        documents.get.assert_called_once_with(documentId="doc-123", includeTabsContent=True)

    def test_snake_case_aliases_accepted(self, sent_requests):
        result = _call(
            "document_replace",
            {"document_id": "doc-123", "find_text": "a", "replace_text": "b", "match_case": True},
        )

        assert result["successful"] is True
        assert sent_requests()[0]["replaceAllText"]["containsText"] == {"text": "a", "matchCase": True}

    def test_edit_docs_alias_accepted(self, sent_requests):
        requests = [{"deleteContentRange": {"range": {"startIndex": 1, "endIndex": 3}}}]

        result = _call("document_batch_update", {"id": "doc-123", "editDocs": requests})

        assert result["successful"] is True
        assert sent_requests() == requests


class TestRegistration:

    def test_all_tools_registered(self):
        assert set(_list_tools()) == {
            "document_create",
            "document_get_raw",
            "document_get_text",
            "document_insert",
            "document_append",
            "document_replace",
            "document_batch_update",
        }

    def test_published_schema_is_strict(self):
        schema = _list_tools()["document_insert"].inputSchema

        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == {"documentId", "text", "index"}
        assert set(schema["properties"]) == {"documentId", "text", "index", "segmentId"}

    def test_match_case_default_published(self):
        schema = _list_tools()["document_replace"].inputSchema

        assert schema["properties"]["matchCase"]["default"] is False

    def test_read_tools_are_marked_read_only(self):
        listed = _list_tools()

        assert listed["document_get_raw"].annotations.readOnlyHint is True
        assert listed["document_get_text"].annotations.readOnlyHint is True
        assert listed["document_append"].annotations is None
