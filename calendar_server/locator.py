# -*- coding: utf-8 -*-
"""Finds the academic calendar link on an institution's landing page."""
from __future__ import annotations

import re
import typing as t
import unicodedata
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from shared.errors import NetworkError

CALENDAR_LINK_PHRASE = "calendario academico"

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_text(text: str) -> str:
    """
    Strip accents, surrounding whitespace and case from anchor text.

    "  Calendário Acadêmico 2025 " -> "calendario academico 2025"
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()


def find_calendar_link(html: str, base_url: str) -> t.Optional[str]:
    """
    Return the absolute URL of the first anchor whose text mentions the calendar.

    Anchors are checked in document order; the first one with a matching text
    and a non-empty href wins.
    :param html: HTML of the landing page.
    :param base_url: URL the page was fetched from, used to resolve relative hrefs.
    :return: The absolute link, or None if no anchor matches.
    """
    soup = BeautifulSoup(html, "html.parser")
    for anchor in soup.find_all("a"):
        if CALENDAR_LINK_PHRASE not in normalize_text(anchor.get_text()):
            continue
        href = anchor.get("href")
        if href:
            return urljoin(base_url, href)
    return None


def get_calendar_link(url: str, session: t.Optional[requests.Session] = None) -> t.Optional[str]:
    """
    Fetch the landing page and look for the calendar link.

    :param url: Landing page URL.
    :param session: Optional requests session, defaults to a plain ``requests.get``.
    :return: The absolute calendar URL, or None if the page has no such link.
    :raises NetworkError: If the page cannot be fetched.
    """
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url)
    except requests.RequestException as e:
        raise NetworkError(f"Falha ao buscar a página {url}: {e}") from e
    if not response.ok:
        raise NetworkError(f"Falha ao buscar a página {url}: {response.status_code} {response.reason}")
    return find_calendar_link(response.text, url)
