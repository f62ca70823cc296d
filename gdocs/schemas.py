"""
Input and output schemas for the Google Docs tools.

Inputs are strict: unknown fields are rejected, scalars are never coerced and
declared aliases are folded onto their canonical camelCase names before
validation. Outputs are lenient in the other direction: required fields must
be present and well-typed, but anything the API adds is allowed through.
"""
from typing import Any, ClassVar, Dict, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, model_validator

from gdocs.batch_requests import BatchUpdateRequest, Index
from gdocs.errors import InputValidationError, OutputValidationError

DOCUMENT_ID_ALIASES = {"document_id": "documentId", "id": "documentId"}

SuggestionsViewMode = Literal[
    "DEFAULT_FOR_CURRENT_ACCESS",
    "SUGGESTIONS_INLINE",
    "PREVIEW_SUGGESTIONS_ACCEPTED",
    "PREVIEW_WITHOUT_SUGGESTIONS",
]


class ToolInput(BaseModel):
    """Base for tool arguments.

    Subclasses list alternate argument names in ALIASES (alias -> canonical).
    Passing both an alias and the canonical name is rejected rather than
    silently picking one.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=False)

    ALIASES: ClassVar[Dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def _apply_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not cls.ALIASES:
            return data
        data = dict(data)
        for alias, canonical in cls.ALIASES.items():
            if alias not in data:
                continue
            if canonical in data:
                raise ValueError(f"'{alias}' is an alias of '{canonical}'; pass only one of them")
            data[canonical] = data.pop(alias)
        return data


class DocumentCreateInput(ToolInput):
    title: StrictStr


class DocumentGetRawInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = {
        **DOCUMENT_ID_ALIASES,
        "suggestions_view_mode": "suggestionsViewMode",
    }

    document_id: StrictStr = Field(alias="documentId", min_length=1)
    suggestions_view_mode: Optional[SuggestionsViewMode] = Field(None, alias="suggestionsViewMode")


class DocumentGetTextInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = DOCUMENT_ID_ALIASES

    document_id: StrictStr = Field(alias="documentId", min_length=1)


class DocumentInsertInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = {**DOCUMENT_ID_ALIASES, "segment_id": "segmentId"}

    document_id: StrictStr = Field(alias="documentId", min_length=1)
    text: StrictStr = Field(min_length=1)
    index: Index
    segment_id: Optional[StrictStr] = Field(None, alias="segmentId")


class DocumentAppendInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = DOCUMENT_ID_ALIASES

    document_id: StrictStr = Field(alias="documentId", min_length=1)
    text: StrictStr = Field(min_length=1)


class DocumentReplaceInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = {
        **DOCUMENT_ID_ALIASES,
        "find_text": "findText",
        "replace_text": "replaceText",
        "match_case": "matchCase",
    }

    document_id: StrictStr = Field(alias="documentId", min_length=1)
    find_text: StrictStr = Field(alias="findText", min_length=1)
    replace_text: StrictStr = Field(alias="replaceText")
    match_case: StrictBool = Field(False, alias="matchCase")


class DocumentBatchUpdateInput(ToolInput):
    ALIASES: ClassVar[Dict[str, str]] = {**DOCUMENT_ID_ALIASES, "editDocs": "requests"}

    document_id: StrictStr = Field(alias="documentId", min_length=1)
    requests: List[BatchUpdateRequest] = Field(min_length=1)


# -------------------- OUTPUTS --------------------

class ApiModel(BaseModel):
    """Base for API responses: unknown fields pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class DocumentCreateOutput(ApiModel):
    document_id: StrictStr = Field(alias="documentId")
    title: Optional[StrictStr] = None
    revision_id: Optional[StrictStr] = Field(None, alias="revisionId")


class WriteControl(ApiModel):
    required_revision_id: Optional[StrictStr] = Field(None, alias="requiredRevisionId")
    target_revision_id: Optional[StrictStr] = Field(None, alias="targetRevisionId")


class BatchUpdateOutput(ApiModel):
    document_id: StrictStr = Field(alias="documentId")
    replies: Optional[List[Any]] = None
    write_control: Optional[WriteControl] = Field(None, alias="writeControl")


class ReplaceAllTextReply(ApiModel):
    occurrences_changed: Optional[StrictInt] = Field(None, alias="occurrencesChanged")


class ReplaceReply(ApiModel):
    replace_all_text: Optional[ReplaceAllTextReply] = Field(None, alias="replaceAllText")


class ReplaceOutput(BatchUpdateOutput):
    replies: Optional[List[ReplaceReply]] = None


# Raw document tree. Only the path to text runs is typed; styles, tables,
# section breaks and anything else stay open maps.

class TextRun(ApiModel):
    content: Optional[StrictStr] = None
    text_style: Optional[Dict[str, Any]] = Field(None, alias="textStyle")


class ParagraphElement(ApiModel):
    start_index: Optional[StrictInt] = Field(None, alias="startIndex")
    end_index: Optional[StrictInt] = Field(None, alias="endIndex")
    text_run: Optional[TextRun] = Field(None, alias="textRun")


class Paragraph(ApiModel):
    elements: Optional[List[ParagraphElement]] = None
    paragraph_style: Optional[Dict[str, Any]] = Field(None, alias="paragraphStyle")


class StructuralElement(ApiModel):
    start_index: Optional[StrictInt] = Field(None, alias="startIndex")
    end_index: Optional[StrictInt] = Field(None, alias="endIndex")
    paragraph: Optional[Paragraph] = None


class Body(ApiModel):
    content: Optional[List[StructuralElement]] = None


class DocumentTab(ApiModel):
    body: Optional[Body] = None


class TabProperties(ApiModel):
    tab_id: Optional[StrictStr] = Field(None, alias="tabId")
    title: Optional[StrictStr] = None
    index: Optional[StrictInt] = None


class Tab(ApiModel):
    tab_properties: Optional[TabProperties] = Field(None, alias="tabProperties")
    document_tab: Optional[DocumentTab] = Field(None, alias="documentTab")
    child_tabs: Optional[List["Tab"]] = Field(None, alias="childTabs")


Tab.model_rebuild()


class Document(ApiModel):
    document_id: StrictStr = Field(alias="documentId")
    title: Optional[StrictStr] = None
    tabs: Optional[List[Tab]] = None
    revision_id: Optional[StrictStr] = Field(None, alias="revisionId")
    suggestions_view_mode: Optional[StrictStr] = Field(None, alias="suggestionsViewMode")


class TabText(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tab_id: StrictStr = Field(alias="tabId")
    title: StrictStr
    text: StrictStr


class DocumentTextOutput(ApiModel):
    document_id: StrictStr = Field(alias="documentId")
    title: StrictStr
    tabs: List[TabText]


# -------------------- VALIDATION HELPERS --------------------

InputT = TypeVar("InputT", bound=ToolInput)


def parse_input(model: Type[InputT], arguments: Any, tool: str) -> InputT:
    """Validate tool arguments, raising InputValidationError on any problem."""
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InputValidationError.from_pydantic(tool, e) from e


def check_output(model: Type[ApiModel], response: Any, tool: str) -> Dict[str, Any]:
    """Validate an API response and return it unchanged.

    The response dict itself is returned (not a re-serialized model) so that
    fields the schema does not know about, and the exact JSON values, survive.
    """
    try:
        model.model_validate(response)
    except ValidationError as e:
        raise OutputValidationError.from_pydantic(tool, e) from e
    return response
