"""
Field extractors for YC company pages.

Each field is read by its own function against a PageDocument so that a
layout change on the site only touches one heuristic. None of them raise on
missing structure; absent elements fall back to "", 0 or [].
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

from models import CompanyRecord, FounderRecord
from ports.page import PageDocument
from services.page_document import SoupDocument
from utils.number_parsing import parse_count


HEADING_SELECTOR = "h1"
TEAM_SIZE_LABEL = "Team Size:"
JOBS_LINK_TEXT = "Jobs"
JOBS_BADGE_SELECTOR = ".ycdc-badge"
FOUNDER_BLOCK_SELECTOR = "div.flex-grow"
FOUNDER_MARKER = "founder"


def extract_name(doc: PageDocument) -> str:
    return doc.get_text(doc.query_one(HEADING_SELECTOR))


def extract_team_size(doc: PageDocument) -> int:
    # First div holding exactly two spans: ["Team Size:", "<n>"]
    for div in doc.query_all("div"):
        spans = doc.query_all("span", scope=div)
        if len(spans) == 2 and doc.get_text(spans[0]) == TEAM_SIZE_LABEL:
            return parse_count(doc.get_text(spans[1]))
    return 0


def extract_job_count(doc: PageDocument) -> int:
    for div in doc.query_all("div"):
        anchor = doc.query_one("a", scope=div)
        if anchor is None or doc.get_text(anchor) != JOBS_LINK_TEXT:
            continue
        badge = doc.query_one(JOBS_BADGE_SELECTOR, scope=div)
        return parse_count(doc.get_text(badge)) if badge is not None else 0
    return 0


def extract_founders(doc: PageDocument) -> List[FounderRecord]:
    founders: List[FounderRecord] = []
    for block in doc.query_all(FOUNDER_BLOCK_SELECTOR):
        heading = doc.query_one("h3", scope=block)
        if heading is None:
            continue
        name = doc.get_text(heading)
        # "co-founder" is covered by the substring check
        if FOUNDER_MARKER not in name.lower():
            continue
        description = doc.get_text(doc.query_one("p", scope=block))
        founders.append(FounderRecord(name=name, description=description))
    return founders


FIELD_EXTRACTORS: Dict[str, Callable[[PageDocument], Any]] = {
    "name": extract_name,
    "team_size": extract_team_size,
    "job_count": extract_job_count,
    "founders": extract_founders,
}


def extract_company(doc: PageDocument) -> CompanyRecord:
    fields = {field: extractor(doc) for field, extractor in FIELD_EXTRACTORS.items()}
    return CompanyRecord(**fields)


def extract_company_from_html(html: str) -> CompanyRecord:
    return extract_company(SoupDocument(html))
