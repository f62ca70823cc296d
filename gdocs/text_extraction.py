"""
Plain-text extraction from the Docs tab tree.

Documents fetched with includeTabsContent=true keep their body under
tabs[].documentTab.body.content, and tabs nest through childTabs. The helpers
here flatten that tree into one record per tab, parent before children, in
the order the API returned them. Only paragraph text runs contribute text;
tables, section breaks, page breaks and the like are skipped.
"""
from typing import Any, Dict, List


def extract_text_from_body(content: List[Dict[str, Any]]) -> str:
    """Concatenate every textRun content of every paragraph, verbatim."""
    parts = []
    for element in content:
        paragraph = element.get("paragraph")
        if not paragraph:
            continue
        for paragraph_element in paragraph.get("elements") or []:
            text_run = paragraph_element.get("textRun")
            if text_run and text_run.get("content"):
                parts.append(text_run["content"])
    return "".join(parts)


def extract_tabs_text(tabs: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten a tab tree into [{tabId, title, text}], depth-first.

    The tree is owned by the Docs API and assumed acyclic.
    """
    results: List[Dict[str, str]] = []
    for tab in tabs:
        properties = tab.get("tabProperties") or {}
        body = (tab.get("documentTab") or {}).get("body") or {}
        results.append({
            "tabId": properties.get("tabId", ""),
            "title": properties.get("title", ""),
            "text": extract_text_from_body(body.get("content") or []),
        })

        child_tabs = tab.get("childTabs")
        if child_tabs:
            results.extend(extract_tabs_text(child_tabs))
    return results
