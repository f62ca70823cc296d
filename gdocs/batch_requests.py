"""
Google Docs batchUpdate request schemas.

The documents.batchUpdate endpoint accepts a list of request objects, each of
which carries exactly one operation key (``insertText``, ``deleteContentRange``,
...). This module models the fourteen operation kinds the tools accept as a
closed union: an element is dispatched on the first recognized key it carries
and validated against that operation's schema only. Anything else is rejected.
"""
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    Tag,
    TypeAdapter,
    model_validator,
)


class RequestModel(BaseModel):
    """Base for request payloads: camelCase keys only, unknown keys rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=False)


Index = Annotated[StrictInt, Field(ge=0)]


class Location(RequestModel):
    """A particular location in a segment of the document."""

    index: Index
    segment_id: Optional[StrictStr] = Field(None, alias="segmentId")
    tab_id: Optional[StrictStr] = Field(None, alias="tabId")


class EndOfSegmentLocation(RequestModel):
    """The end of the body, header, footer or footnote; an empty segmentId is the body."""

    segment_id: Optional[StrictStr] = Field(None, alias="segmentId")
    tab_id: Optional[StrictStr] = Field(None, alias="tabId")


class Range(RequestModel):
    """Half-open ``[startIndex, endIndex)`` span within a segment."""

    start_index: Index = Field(alias="startIndex")
    end_index: Index = Field(alias="endIndex")
    segment_id: Optional[StrictStr] = Field(None, alias="segmentId")
    tab_id: Optional[StrictStr] = Field(None, alias="tabId")


class SubstringMatchCriteria(RequestModel):
    text: StrictStr
    match_case: Optional[StrictBool] = Field(None, alias="matchCase")


class TabsCriteria(RequestModel):
    tab_ids: Optional[List[StrictStr]] = Field(None, alias="tabIds")


class Dimension(RequestModel):
    magnitude: Union[StrictInt, StrictFloat]
    unit: Literal["UNIT_UNSPECIFIED", "PT"] = "PT"


class Size(RequestModel):
    height: Optional[Dimension] = None
    width: Optional[Dimension] = None


class TableCellLocation(RequestModel):
    table_start_location: Location = Field(alias="tableStartLocation")
    row_index: Index = Field(alias="rowIndex")
    column_index: Index = Field(alias="columnIndex")


class BulletPreset(str, Enum):
    """Bullet glyph presets accepted by createParagraphBullets."""

    BULLET_DISC_CIRCLE_SQUARE = "BULLET_DISC_CIRCLE_SQUARE"
    BULLET_DIAMONDX_ARROW3D_SQUARE = "BULLET_DIAMONDX_ARROW3D_SQUARE"
    BULLET_CHECKBOX = "BULLET_CHECKBOX"
    BULLET_ARROW_DIAMOND_DISC = "BULLET_ARROW_DIAMOND_DISC"
    BULLET_STAR_CIRCLE_SQUARE = "BULLET_STAR_CIRCLE_SQUARE"
    BULLET_ARROW3D_CIRCLE_SQUARE = "BULLET_ARROW3D_CIRCLE_SQUARE"
    BULLET_LEFTTRIANGLE_DIAMOND_DISC = "BULLET_LEFTTRIANGLE_DIAMOND_DISC"
    NUMBERED_DECIMAL_ALPHA_ROMAN = "NUMBERED_DECIMAL_ALPHA_ROMAN"
    NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS = "NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS"
    NUMBERED_DECIMAL_NESTED = "NUMBERED_DECIMAL_NESTED"
    NUMBERED_UPPERALPHA_ALPHA_ROMAN = "NUMBERED_UPPERALPHA_ALPHA_ROMAN"
    NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL = "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL"
    NUMBERED_ZERODECIMAL_ALPHA_ROMAN = "NUMBERED_ZERODECIMAL_ALPHA_ROMAN"


class _Positioned(RequestModel):
    """Insertions target either an explicit location or the end of a segment, never both."""

    location: Optional[Location] = None
    end_of_segment_location: Optional[EndOfSegmentLocation] = Field(None, alias="endOfSegmentLocation")

    @model_validator(mode="after")
    def _exactly_one_position(self):
        if (self.location is None) == (self.end_of_segment_location is None):
            raise ValueError("exactly one of 'location' or 'endOfSegmentLocation' must be set")
        return self


# -------------------- OPERATION PAYLOADS --------------------

class InsertTextRequest(_Positioned):
    text: StrictStr


class DeleteContentRangeRequest(RequestModel):
    range: Range


class ReplaceAllTextRequest(RequestModel):
    contains_text: SubstringMatchCriteria = Field(alias="containsText")
    replace_text: StrictStr = Field(alias="replaceText")
    tabs_criteria: Optional[TabsCriteria] = Field(None, alias="tabsCriteria")


class InsertInlineImageRequest(_Positioned):
    uri: StrictStr
    object_size: Optional[Size] = Field(None, alias="objectSize")


class InsertTableRequest(_Positioned):
    rows: Annotated[StrictInt, Field(gt=0)]
    columns: Annotated[StrictInt, Field(gt=0)]


class InsertTableRowRequest(RequestModel):
    table_cell_location: TableCellLocation = Field(alias="tableCellLocation")
    insert_below: Optional[StrictBool] = Field(None, alias="insertBelow")


class InsertTableColumnRequest(RequestModel):
    table_cell_location: TableCellLocation = Field(alias="tableCellLocation")
    insert_right: Optional[StrictBool] = Field(None, alias="insertRight")


class DeleteTableRowRequest(RequestModel):
    table_cell_location: TableCellLocation = Field(alias="tableCellLocation")


class DeleteTableColumnRequest(RequestModel):
    table_cell_location: TableCellLocation = Field(alias="tableCellLocation")


class InsertPageBreakRequest(_Positioned):
    pass


class CreateNamedRangeRequest(RequestModel):
    name: StrictStr
    range: Range


class DeleteNamedRangeRequest(RequestModel):
    named_range_id: Optional[StrictStr] = Field(None, alias="namedRangeId")
    name: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _has_target(self):
        if self.named_range_id is None and self.name is None:
            raise ValueError("one of 'namedRangeId' or 'name' must be set")
        return self


class CreateParagraphBulletsRequest(RequestModel):
    range: Range
    bullet_preset: Optional[BulletPreset] = Field(None, alias="bulletPreset")


class DeleteParagraphBulletsRequest(RequestModel):
    range: Range


# -------------------- REQUEST UNION --------------------

class _Operation(RequestModel):
    KIND: ClassVar[str]


class InsertText(_Operation):
    KIND: ClassVar[str] = "insertText"
    insert_text: InsertTextRequest = Field(alias="insertText")


class DeleteContentRange(_Operation):
    KIND: ClassVar[str] = "deleteContentRange"
    delete_content_range: DeleteContentRangeRequest = Field(alias="deleteContentRange")


class ReplaceAllText(_Operation):
    KIND: ClassVar[str] = "replaceAllText"
    replace_all_text: ReplaceAllTextRequest = Field(alias="replaceAllText")


class InsertInlineImage(_Operation):
    KIND: ClassVar[str] = "insertInlineImage"
    insert_inline_image: InsertInlineImageRequest = Field(alias="insertInlineImage")


class InsertTable(_Operation):
    KIND: ClassVar[str] = "insertTable"
    insert_table: InsertTableRequest = Field(alias="insertTable")


class InsertTableRow(_Operation):
    KIND: ClassVar[str] = "insertTableRow"
    insert_table_row: InsertTableRowRequest = Field(alias="insertTableRow")


class InsertTableColumn(_Operation):
    KIND: ClassVar[str] = "insertTableColumn"
    insert_table_column: InsertTableColumnRequest = Field(alias="insertTableColumn")


class DeleteTableRow(_Operation):
    KIND: ClassVar[str] = "deleteTableRow"
    delete_table_row: DeleteTableRowRequest = Field(alias="deleteTableRow")


class DeleteTableColumn(_Operation):
    KIND: ClassVar[str] = "deleteTableColumn"
    delete_table_column: DeleteTableColumnRequest = Field(alias="deleteTableColumn")


class InsertPageBreak(_Operation):
    KIND: ClassVar[str] = "insertPageBreak"
    insert_page_break: InsertPageBreakRequest = Field(alias="insertPageBreak")


class CreateNamedRange(_Operation):
    KIND: ClassVar[str] = "createNamedRange"
    create_named_range: CreateNamedRangeRequest = Field(alias="createNamedRange")


class DeleteNamedRange(_Operation):
    KIND: ClassVar[str] = "deleteNamedRange"
    delete_named_range: DeleteNamedRangeRequest = Field(alias="deleteNamedRange")


class CreateParagraphBullets(_Operation):
    KIND: ClassVar[str] = "createParagraphBullets"
    create_paragraph_bullets: CreateParagraphBulletsRequest = Field(alias="createParagraphBullets")


class DeleteParagraphBullets(_Operation):
    KIND: ClassVar[str] = "deleteParagraphBullets"
    delete_paragraph_bullets: DeleteParagraphBulletsRequest = Field(alias="deleteParagraphBullets")


OPERATIONS = (
    InsertText,
    DeleteContentRange,
    ReplaceAllText,
    InsertInlineImage,
    InsertTable,
    InsertTableRow,
    InsertTableColumn,
    DeleteTableRow,
    DeleteTableColumn,
    InsertPageBreak,
    CreateNamedRange,
    DeleteNamedRange,
    CreateParagraphBullets,
    DeleteParagraphBullets,
)

REQUEST_KINDS = tuple(op.KIND for op in OPERATIONS)


def request_kind(value: Any) -> Optional[str]:
    """Return the operation key a request element carries, or None if it has none."""
    if isinstance(value, dict):
        for key in value:
            if key in REQUEST_KINDS:
                return key
        return None
    return getattr(value, "KIND", None)


BatchUpdateRequest = Annotated[
    Union[tuple(Annotated[op, Tag(op.KIND)] for op in OPERATIONS)],
    Discriminator(
        request_kind,
        custom_error_type="unknown_request_kind",
        custom_error_message="Request must contain exactly one of: " + ", ".join(REQUEST_KINDS),
    ),
]

_request_list_adapter = TypeAdapter(List[BatchUpdateRequest])


def dump_requests(requests: List[_Operation]) -> List[Dict[str, Any]]:
    """Serialize validated requests back to API dicts, keeping their order."""
    return _request_list_adapter.dump_python(requests, by_alias=True, exclude_none=True, mode="json")
