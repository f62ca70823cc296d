import logging
from typing import Optional, Dict, Any, Callable, Type

from mcp.server.fastmcp import FastMCP
from mcp.types import Tool as MCPTool, ToolAnnotations
from pydantic import BaseModel

from gdocs import tools
from gdocs.api import get_docs_client
from gdocs.config import configure_logging, get_transport, load_environment
from gdocs.errors import DocsToolError
from gdocs.schemas import (
    DocumentAppendInput,
    DocumentBatchUpdateInput,
    DocumentCreateInput,
    DocumentGetRawInput,
    DocumentGetTextInput,
    DocumentInsertInput,
    DocumentReplaceInput,
)

load_environment()
configure_logging()
logger = logging.getLogger(__name__)

ToolHandler = Callable[[Dict[str, Any]], Dict[str, Any]]


class DocsFastMCP(FastMCP):
    """FastMCP server whose Docs tools receive the caller's arguments untouched.

    FastMCP validates tool arguments against the Python signature of each tool
    function, dropping unknown keys and coercing scalars on the way. Docs tools
    are dispatched around that: the raw argument dict goes straight to the
    gdocs schemas, and the schema published to clients is the strict one.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._docs_tools: Dict[str, ToolHandler] = {}
        self._docs_schemas: Dict[str, Dict[str, Any]] = {}

    def docs_tool(
        self,
        name: str,
        input_model: Type[BaseModel],
        title: str,
        description: str,
        annotations: Optional[ToolAnnotations] = None,
    ):
        def decorator(fn: ToolHandler) -> ToolHandler:
            self.add_tool(
                fn,
                name=name,
                title=title,
                description=description,
                annotations=annotations,
                structured_output=False,
            )
            self._docs_tools[name] = fn
            self._docs_schemas[name] = input_model.model_json_schema(by_alias=True)
            return fn

        return decorator

    async def list_tools(self) -> list[MCPTool]:
        listed = await super().list_tools()
        for tool in listed:
            if tool.name in self._docs_schemas:
                tool.inputSchema = self._docs_schemas[tool.name]
        return listed

    async def call_tool(self, name: str, arguments: Dict[str, Any]):
        handler = self._docs_tools.get(name)
        if handler is None:
            return await super().call_tool(name, arguments)
        return handler(dict(arguments or {}))


# Initialize MCP server
mcp = DocsFastMCP("googledocs-mcp")

READ_ONLY = ToolAnnotations(readOnlyHint=True)


def _call_tool(action: str, operation: Callable[..., Dict[str, Any]], arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Run a tool operation and wrap its outcome in the { data, error, successful } envelope."""
    try:
        data = operation(get_docs_client(), arguments)
        return {"data": data, "error": "", "successful": True}
    except DocsToolError as e:
        logger.error(f"Failed to {action}: {e}")
        return {"data": {}, "error": f"Failed to {action}: {str(e)}", "successful": False}
    except Exception as e:
        logger.exception(f"Unexpected error while trying to {action}")
        return {"data": {}, "error": f"Failed to {action}: {str(e)}", "successful": False}


# -------------------- TOOLS --------------------

@mcp.docs_tool(
    "document_create",
    DocumentCreateInput,
    title="Create document",
    description="Create a new blank Google Doc with the specified title. Args: title (str): Document title (required). Returns: dict: { data: {documentId, title, revisionId, ...}, error: str, successful: bool }.",
)
def document_create(arguments: Dict[str, Any]):
    """Creates a new, empty Google Docs document."""
    return _call_tool("create document", tools.document_create, arguments)


@mcp.docs_tool(
    "document_get_raw",
    DocumentGetRawInput,
    title="Get document (raw)",
    description="Get the full raw JSON structure of a Google Doc, including all tabs, formatting, headers, footers, and styles. Body content lives at tabs[].documentTab.body.content, not at the top level. Responses can be very large; use document_get_text for plain text. Args: documentId (str): Docs ID (required). suggestionsViewMode (str): DEFAULT_FOR_CURRENT_ACCESS, SUGGESTIONS_INLINE, PREVIEW_SUGGESTIONS_ACCEPTED or PREVIEW_WITHOUT_SUGGESTIONS (optional). Returns: dict: { data: {documentId, title, tabs, revisionId, ...}, error: str, successful: bool }.",
    annotations=READ_ONLY,
)
def document_get_raw(arguments: Dict[str, Any]):
    """Fetches the complete document JSON with tab content included."""
    return _call_tool("get document", tools.document_get_raw, arguments)


@mcp.docs_tool(
    "document_get_text",
    DocumentGetTextInput,
    title="Get document text",
    description="Get the plain text content of a Google Doc without formatting, one entry per tab (nested tabs included, parent before children). Args: documentId (str): Docs ID (required). Returns: dict: { data: {documentId, title, tabs: [{tabId, title, text}]}, error: str, successful: bool }.",
    annotations=READ_ONLY,
)
def document_get_text(arguments: Dict[str, Any]):
    """Fetches a document and flattens each tab to plain text."""
    return _call_tool("get document text", tools.document_get_text, arguments)


@mcp.docs_tool(
    "document_insert",
    DocumentInsertInput,
    title="Insert into document",
    description="Insert text at a specific location in a Google Doc. Index 1 is the beginning of the document body (index 0 is reserved); use document_get_raw to find indices. Args: documentId (str): Docs ID (required). text (str): Text to insert (required). index (int): Zero-based insertion index (required). segmentId (str): Header, footer or footnote ID; omit for the main body (optional). Returns: dict: { data: {documentId, replies}, error: str, successful: bool }.",
)
def document_insert(arguments: Dict[str, Any]):
    """Inserts text at an explicit index."""
    return _call_tool("insert text", tools.document_insert, arguments)


@mcp.docs_tool(
    "document_append",
    DocumentAppendInput,
    title="Append to document",
    description="Append text to the end of a Google Doc's main body. Convenience wrapper around batch update. Args: documentId (str): Docs ID (required). text (str): Text to append (required). Returns: dict: { data: {documentId, replies}, error: str, successful: bool }.",
)
def document_append(arguments: Dict[str, Any]):
    """Appends text at the end of the main body."""
    return _call_tool("append text", tools.document_append, arguments)


@mcp.docs_tool(
    "document_replace",
    DocumentReplaceInput,
    title="Find and replace in document",
    description="Find and replace all occurrences of text in a Google Doc. Matching is literal (no regular expressions) and case-insensitive unless matchCase is true. Args: documentId (str): Docs ID (required). findText (str): Text to search for (required). replaceText (str): Replacement text (required). matchCase (bool): Case-sensitive search, default false (optional). Returns: dict: { data: {documentId, replies: [{replaceAllText: {occurrencesChanged}}]}, error: str, successful: bool }.",
)
def document_replace(arguments: Dict[str, Any]):
    """Replaces every occurrence of findText with replaceText."""
    return _call_tool("replace text", tools.document_replace, arguments)


@mcp.docs_tool(
    "document_batch_update",
    DocumentBatchUpdateInput,
    title="Batch update document",
    description="Apply one or more updates to a Google Doc in a single atomic batch: if any request fails, none are applied. Each request object must carry exactly one of: insertText, deleteContentRange, replaceAllText, insertInlineImage, insertTable, insertTableRow, insertTableColumn, deleteTableRow, deleteTableColumn, insertPageBreak, createNamedRange, deleteNamedRange, createParagraphBullets, deleteParagraphBullets. Requests are applied in order. Args: documentId (str): Docs ID (required). requests (array): Docs API request objects (required). Returns: dict: { data: {documentId, replies, writeControl}, error: str, successful: bool }.",
)
def document_batch_update(arguments: Dict[str, Any]):
    """Forwards a validated list of batchUpdate requests."""
    return _call_tool("update document", tools.document_batch_update, arguments)


# -------------------- MAIN --------------------

def main():
    transport = get_transport()
    logger.info(f"Starting googledocs-mcp ({transport})")
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
