# -*- coding: utf-8 -*-
import base64
import io
from pathlib import Path

import pdfplumber
import requests

from shared.errors import NetworkError, NotFoundError, ParseError
from .locator import get_calendar_link


def count_pdf_pages(payload: bytes) -> int:
    """
    Open a PDF held in memory and return its page count.
    :param payload: Raw bytes of the file.
    :return: Number of pages.
    :raises ParseError: If the bytes are not a readable PDF.
    """
    try:
        with pdfplumber.open(io.BytesIO(payload)) as pdf:
            return len(pdf.pages)
    except Exception as e:
        raise ParseError(f"O arquivo baixado não é um PDF válido: {e}") from e


def download_calendar(base_url: str, output_file: str) -> tuple[str, int]:
    """
    Locate the calendar link on the landing page and save the PDF it points to.

    The whole payload is fetched in one request and written in one go.
    :param base_url: Landing page to search for the calendar link.
    :param output_file: Local path the PDF is written to.
    :return: The absolute URL the PDF was downloaded from and its page count.
    :raises ParseError: If the payload is not a PDF; nothing is written then.
    """
    calendar_url = get_calendar_link(base_url)
    if not calendar_url:
        raise NotFoundError(f"Não foi possível encontrar o link do calendário em {base_url}")

    try:
        response = requests.get(calendar_url)
    except requests.RequestException as e:
        raise NetworkError(f"Falha ao baixar o PDF de {calendar_url}: {e}") from e
    if not response.ok:
        raise NetworkError(f"Falha ao baixar o PDF: {response.status_code} {response.reason}")

    payload = response.content
    page_count = count_pdf_pages(payload)
    Path(output_file).write_bytes(payload)
    return calendar_url, page_count


def encode_pdf_base64(path: str) -> str:
    """Return the contents of a local file as base64 text."""
    pdf_path = Path(path)
    if not pdf_path.is_file():
        raise FileNotFoundError(f"File not found: {pdf_path}")
    return base64.b64encode(pdf_path.read_bytes()).decode("ascii")
