"""
Thin client over the googleapiclient Docs v1 service.

One method per remote call used by the tools. Each issues exactly one request
and either returns the parsed JSON response or raises DocsApiError; status
codes are carried on the error, never interpreted here.
"""
import logging
from typing import Any, Dict, List, Optional

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from gdocs.auth import get_docs_service
from gdocs.errors import DocsApiError

logger = logging.getLogger(__name__)


class DocsClient:
    """Issues Docs API requests through a discovery-built service object.

    Without an explicit service one is built on first use, so a client can be
    handed to a tool that may still reject its arguments without ever
    touching credentials or the network.
    """

    def __init__(self, service=None):
        self._service = service

    def create(self, title: str) -> Dict[str, Any]:
        request = self._documents().create(body={"title": title})
        return self._execute("create", request)

    def get(self, document_id: str, suggestions_view_mode: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"documentId": document_id, "includeTabsContent": True}
        if suggestions_view_mode:
            params["suggestionsViewMode"] = suggestions_view_mode
        request = self._documents().get(**params)
        return self._execute("get", request, document_id)

    def batch_update(self, document_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        request = self._documents().batchUpdate(
            documentId=document_id,
            body={"requests": requests},
        )
        return self._execute("batchUpdate", request, document_id)

    def _documents(self):
        if self._service is None:
            try:
                self._service = get_docs_service()
            except GoogleAuthError as e:
                logger.error(f"Could not authorize Docs API client: {e}")
                raise DocsApiError(f"Google Docs authorization error: {e}") from e
        return self._service.documents()

    def _execute(self, operation: str, request, document_id: Optional[str] = None) -> Dict[str, Any]:
        logger.debug(f"Docs API {operation} (document={document_id})")
        try:
            return request.execute()
        except HttpError as e:
            status = e.resp.status
            logger.error(f"Docs API {operation} failed with HTTP {status}: {e.reason}")
            raise DocsApiError(f"Google Docs API error ({status}): {e.reason}", status_code=status) from e
        except GoogleAuthError as e:
            logger.error(f"Docs API {operation} failed to authorize: {e}")
            raise DocsApiError(f"Google Docs authorization error: {e}") from e


def get_docs_client() -> DocsClient:
    """Return a fresh client; credentials are resolved lazily on its first call."""
    return DocsClient()
