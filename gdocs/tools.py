"""
Google Docs tool operations.

Each operation validates its arguments, builds the request, makes exactly one
call through the DocsClient and validates the response before returning it.
Arguments are plain dicts so any host (the MCP server, scripts, tests) can
drive them; validation failures are raised before the client is touched.
"""
import logging
from typing import Any, Dict

from gdocs.api import DocsClient
from gdocs.batch_requests import dump_requests
from gdocs.request_builder import build_append_request, build_insert_request, build_replace_request
from gdocs.schemas import (
    BatchUpdateOutput,
    Document,
    DocumentAppendInput,
    DocumentBatchUpdateInput,
    DocumentCreateInput,
    DocumentCreateOutput,
    DocumentGetRawInput,
    DocumentGetTextInput,
    DocumentInsertInput,
    DocumentReplaceInput,
    DocumentTextOutput,
    ReplaceOutput,
    check_output,
    parse_input,
)
from gdocs.text_extraction import extract_tabs_text

logger = logging.getLogger(__name__)


def document_create(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    params = parse_input(DocumentCreateInput, arguments, "document_create")
    result = client.create(params.title)
    logger.info(f"Created document {result.get('documentId')}")
    return check_output(DocumentCreateOutput, result, "document_create")


def document_get_raw(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Return the full document JSON, all tabs included, exactly as the API sent it."""
    params = parse_input(DocumentGetRawInput, arguments, "document_get_raw")
    result = client.get(params.document_id, params.suggestions_view_mode)
    return check_output(Document, result, "document_get_raw")


def document_get_text(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Return the plain text of every tab, flattened depth-first."""
    params = parse_input(DocumentGetTextInput, arguments, "document_get_text")
    doc = check_output(Document, client.get(params.document_id), "document_get_text")

    tabs = extract_tabs_text(doc.get("tabs") or [])
    result = {
        "documentId": doc["documentId"],
        "title": doc.get("title") or "",
        "tabs": tabs,
    }
    return check_output(DocumentTextOutput, result, "document_get_text")


def document_insert(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    params = parse_input(DocumentInsertInput, arguments, "document_insert")
    requests = [build_insert_request(params.text, params.index, params.segment_id)]
    result = client.batch_update(params.document_id, requests)
    return check_output(BatchUpdateOutput, result, "document_insert")


def document_append(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    params = parse_input(DocumentAppendInput, arguments, "document_append")
    requests = [build_append_request(params.text)]
    result = client.batch_update(params.document_id, requests)
    return check_output(BatchUpdateOutput, result, "document_append")


def document_replace(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    params = parse_input(DocumentReplaceInput, arguments, "document_replace")
    requests = [build_replace_request(params.find_text, params.replace_text, params.match_case)]
    result = client.batch_update(params.document_id, requests)
    return check_output(ReplaceOutput, result, "document_replace")


def document_batch_update(client: DocsClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Forward a list of requests as one atomic batchUpdate, order preserved."""
    params = parse_input(DocumentBatchUpdateInput, arguments, "document_batch_update")
    requests = dump_requests(params.requests)
    logger.info(f"Applying {len(requests)} request(s) to document {params.document_id}")
    result = client.batch_update(params.document_id, requests)
    return check_output(BatchUpdateOutput, result, "document_batch_update")
