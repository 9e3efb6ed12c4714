#!/usr/bin/env python3
"""Date model normalization for EAC-CPF output.

A structured date is either single (date element) or a range (dateRange with
fromDate/toDate). A date is only written when it has a display expression; a
range missing both expressions is dropped rather than written empty.
"""

from typing import Iterable, Optional

from xml.etree.ElementTree import Element

from ....models.models import RangeDate, SingleDate
from .builder import create_node, prune_if_empty, sub_element
from .errors import UnrecognizedKindError


def date_expression(date: SingleDate | RangeDate) -> Optional[str]:
    """Display expression of a date; for ranges the begin side wins."""
    if isinstance(date, SingleDate):
        return date.structured_date_single.date_expression or None
    if isinstance(date, RangeDate):
        values = date.structured_date_range
        return values.begin_date_expression or values.end_date_expression or None
    raise UnrecognizedKindError("date", getattr(date, "date_type_structured", date))


def collect_dates(dates: Iterable[SingleDate | RangeDate]) -> list[SingleDate | RangeDate]:
    """Keep only the dates that will produce output (those with an expression)."""
    return [date for date in dates if date_expression(date)]


def build_date_single(parent: Element, date: SingleDate) -> Optional[Element]:
    values = date.structured_date_single
    attrs = {"standardDate": values.date_standardized, "localType": date.date_label}
    return create_node(parent, "date", attrs, values.date_expression)


def build_date_range(parent: Element, date: RangeDate) -> Optional[Element]:
    values = date.structured_date_range
    if not (values.begin_date_expression or values.end_date_expression):
        return None

    date_range = sub_element(parent, "dateRange", {"localType": date.date_label})
    create_node(
        date_range, "fromDate",
        {"standardDate": values.begin_date_standardized},
        values.begin_date_expression
    )
    create_node(
        date_range, "toDate",
        {"standardDate": values.end_date_standardized},
        values.end_date_expression
    )
    return prune_if_empty(parent, date_range)


def build_date(parent: Element, date: SingleDate | RangeDate) -> Optional[Element]:
    """Write a date with the builder matching its shape."""
    if isinstance(date, SingleDate):
        return build_date_single(parent, date)
    if isinstance(date, RangeDate):
        return build_date_range(parent, date)
    raise UnrecognizedKindError("date", getattr(date, "date_type_structured", date))


def build_dates(parent: Element, dates: Iterable[SingleDate | RangeDate]) -> list[Element]:
    """Write every date in order; dates without an expression are skipped."""
    built = []
    for date in dates:
        element = build_date(parent, date)
        if element is not None:
            built.append(element)
    return built
