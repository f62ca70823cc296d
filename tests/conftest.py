"""
Shared fixtures for the Google Docs tool tests.

The googleapiclient service is replaced by a MagicMock, so every call the
tools make can be inspected through docs_service.documents.return_value.
"""
import pytest
from unittest.mock import MagicMock

from gdocs.api import DocsClient


@pytest.fixture
def docs_service():
    service = MagicMock()
    documents = service.documents.return_value
    documents.batchUpdate.return_value.execute.return_value = {"documentId": "doc-123", "replies": [{}]}
    documents.create.return_value.execute.return_value = {"documentId": "doc-123", "title": "Untitled", "revisionId": "rev-1"}
    documents.get.return_value.execute.return_value = {"documentId": "doc-123", "title": "Empty", "tabs": []}
    return service


@pytest.fixture
def documents(docs_service):
    return docs_service.documents.return_value


@pytest.fixture
def client(docs_service):
    return DocsClient(docs_service)


@pytest.fixture
def sent_requests(documents):
    """Return a callable giving the requests list of the single batchUpdate call."""
    def _sent():
        documents.batchUpdate.assert_called_once()
        return documents.batchUpdate.call_args.kwargs["body"]["requests"]
    return _sent
