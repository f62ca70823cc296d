"""Builders for the batchUpdate requests issued by the single-purpose tools."""
from typing import Any, Dict, Optional


def build_append_request(text: str) -> Dict[str, Any]:
    """Insert text at the end of the main body (empty segmentId)."""
    return {
        "insertText": {
            "text": text,
            "endOfSegmentLocation": {"segmentId": ""},
        }
    }


def build_insert_request(text: str, index: int, segment_id: Optional[str] = None) -> Dict[str, Any]:
    """Insert text at an explicit index; segmentId is omitted for the main body."""
    location: Dict[str, Any] = {"index": index}
    if segment_id:
        location["segmentId"] = segment_id
    return {
        "insertText": {
            "text": text,
            "location": location,
        }
    }


def build_replace_request(find_text: str, replace_text: str, match_case: bool = False) -> Dict[str, Any]:
    """Literal find/replace across the document; no pattern syntax."""
    return {
        "replaceAllText": {
            "containsText": {
                "text": find_text,
                "matchCase": bool(match_case),
            },
            "replaceText": replace_text,
        }
    }
