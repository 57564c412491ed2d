"""Timestamp helpers for parser tests."""

from __future__ import annotations

from datetime import datetime, timedelta


def build_time(layout: str, offset: timedelta = timedelta(0)) -> tuple[str, datetime]:
    """Format the current time and return it with its parsed value.

    The local time shifted by ``offset`` is rendered with the UTC offset
    in effect at that shifted moment, then formatted with the ``strftime``
    layout. The returned ``datetime`` is what ``strptime`` reads back from
    that string, so it carries only the precision the layout keeps.

    Parameters
    ----------
    layout : str
        ``strftime``/``strptime`` format.
    offset : timedelta
        Shift applied to the current time.

    Returns
    -------
    tuple[str, datetime]
        Formatted timestamp and its parsed value.
    """
    moment = (datetime.now() + offset).astimezone()
    text = moment.strftime(layout)
    return text, datetime.strptime(text, layout)
