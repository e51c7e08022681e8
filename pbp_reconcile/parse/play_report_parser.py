#!/usr/bin/env python3
"""
HTML Play-by-Play Report Parser
===============================

Extracts the ordered event rows and the two participating team codes from
the NHL HTML play-by-play (PL) report.

Report layout:
- Each event is a <tr class="evenColor"> whose direct <td class="bborder">
  children are: event #, period, strength, elapsed/remaining time, type code,
  description, then the away and home on-ice cells.
- The on-ice column headings read "<TEAM> On Ice" and are the
  <td class="heading bborder" width="10%"> cells, away first.
"""

import re
import logging
from typing import List, Tuple
from bs4 import BeautifulSoup

from pbp_reconcile.errors import MalformedRow
from pbp_reconcile.model.plays import RawPlayRow, ReportHeader


ELAPSED_PATTERN = re.compile(r"^(\d+):(\d+)$", re.ASCII)
# Elapsed and remaining times are split by <br> in the raw cell, whitespace once flattened
TIME_SEPARATOR = re.compile(r"<br\s*/?>|\s+", re.IGNORECASE)
INTEGER_PATTERN = re.compile(r"^\d+$", re.ASCII)
ON_ICE_SUFFIX = ' On Ice'

# Cell positions within an event row
ID_CELL = 0
PERIOD_CELL = 1
TIME_CELL = 3
TYPE_CELL = 4
DESCRIPTION_CELL = 5


def parse_elapsed(time_text: str) -> int:
    """
    Convert the report's time cell to seconds elapsed in the period.

    The cell holds elapsed and remaining time ("0:00<br>20:00"); only the
    first pair is used.

    Args:
        time_text: Cell text with the two times separated by whitespace or <br>

    Returns:
        Elapsed seconds (60 * MM + SS)

    Raises:
        MalformedRow: when MM or SS is not a non-negative integer or SS >= 60
    """
    parts = [part for part in TIME_SEPARATOR.split(time_text) if part]
    if not parts:
        raise MalformedRow("empty time cell")
    match = ELAPSED_PATTERN.match(parts[0])
    if not match:
        raise MalformedRow(f"unreadable elapsed time '{parts[0]}'")
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if seconds >= 60:
        raise MalformedRow(f"elapsed seconds out of range in '{parts[0]}'")
    return minutes * 60 + seconds


def flatten_description(cell) -> str:
    """Description cell text with <br> breaks and nbsp runs collapsed to single spaces."""
    text = cell.get_text(' ')
    return ' '.join(text.replace('\xa0', ' ').split())


class PlayReportParser:
    """
    Parser for the HTML play-by-play report.

    Produces the report header (away/home codes exactly as the report prints
    them, lowercased) and one RawPlayRow per event row in document order.
    Any structural problem raises MalformedRow; nothing is skipped.
    """

    def __init__(self, config=None):
        """
        Initialize the play-by-play report parser.

        Args:
            config: PBPConfig instance
        """
        self.config = config
        self.logger = logging.getLogger('PlayReportParser')

    def parse(self, html_content: str) -> Tuple[ReportHeader, List[RawPlayRow]]:
        """
        Parse a play-by-play report.

        Args:
            html_content: Raw HTML of the PL report

        Returns:
            Tuple of (report header, ordered list of raw rows)
        """
        soup = BeautifulSoup(html_content, 'html.parser')

        header = self.parse_header(soup)
        rows = self.parse_rows(soup)

        self.logger.debug(f"Parsed {len(rows)} rows for {header.away} @ {header.home}")
        return header, rows

    def parse_header(self, soup: BeautifulSoup) -> ReportHeader:
        """Read the away/home team codes from the on-ice column headings."""
        headings = soup.select('td.heading.bborder[width="10%"]')
        teams = []
        for heading in headings:
            text = ' '.join(heading.get_text(' ').replace('\xa0', ' ').split())
            if ON_ICE_SUFFIX.lower() not in text.lower():
                continue
            code = text[:text.lower().index(ON_ICE_SUFFIX.lower())].strip().lower()
            if code:
                teams.append(code)
            if len(teams) == 2:
                break

        if len(teams) < 2:
            raise MalformedRow(f"expected two '<team>{ON_ICE_SUFFIX}' headings, found {len(teams)}")

        return ReportHeader(away=teams[0], home=teams[1])

    def parse_rows(self, soup: BeautifulSoup) -> List[RawPlayRow]:
        """Extract every event row, enforcing strictly increasing event ids."""
        rows = []
        last_id = None

        for index, tr in enumerate(soup.find_all('tr', class_='evenColor')):
            row = self.parse_row(tr, index)
            if last_id is not None and row.id <= last_id:
                raise MalformedRow(f"event id {row.id} does not follow {last_id}", index)
            last_id = row.id
            rows.append(row)

        return rows

    def parse_row(self, tr, index: int) -> RawPlayRow:
        """
        Build a RawPlayRow from one <tr class="evenColor">.

        Args:
            tr: BeautifulSoup row element
            index: Position of the row in the report, for error reporting

        Returns:
            RawPlayRow
        """
        cells = tr.find_all('td', class_='bborder', recursive=False)
        if len(cells) <= DESCRIPTION_CELL:
            raise MalformedRow(f"expected at least {DESCRIPTION_CELL + 1} cells, found {len(cells)}", index)

        event_id = self._parse_int(cells[ID_CELL], 'event id', index)
        period = self._parse_int(cells[PERIOD_CELL], 'period', index)

        elapsed_text = ' '.join(cells[TIME_CELL].get_text(' ').split())
        try:
            seconds = parse_elapsed(elapsed_text)
        except MalformedRow as e:
            raise MalformedRow(e.reason, index) from e

        type_code = cells[TYPE_CELL].get_text(strip=True)
        if not type_code:
            raise MalformedRow("missing event type code", index)

        return RawPlayRow(
            id=event_id,
            period=period,
            elapsed=elapsed_text,
            timeSeconds=seconds,
            typeCode=type_code,
            description=flatten_description(cells[DESCRIPTION_CELL]),
        )

    def _parse_int(self, cell, label: str, index: int) -> int:
        text = cell.get_text(strip=True)
        if not INTEGER_PATTERN.match(text):
            raise MalformedRow(f"{label} '{text}' is not an integer", index)
        return int(text)
