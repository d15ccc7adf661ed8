"""Read trust relations from delimited rater,ratee,weight files."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from trustnet.core import IngestError, get_logger
from trustnet.graph import TrustGraph, build_trust_graph
from trustnet.graph.model import TrustRelation

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = get_logger(__name__)

REQUIRED_FIELDS = 3


def _parse_weight(value: str) -> int:
    """Parse an integer weight, accepting integral floats such as ``"5.0"``."""
    try:
        return int(value)
    except ValueError:
        number = float(value)
        if not number.is_integer():
            raise ValueError(f"weight {value!r} is not an integer") from None
        return int(number)


def parse_relation(
    row: Sequence[str],
    line_number: int | None = None,
    path: Path | str | None = None,
) -> TrustRelation:
    """Parse one CSV row into a TrustRelation.

    Columns beyond the third (e.g. a rating timestamp) are ignored.

    Args:
        row: Split CSV fields.
        line_number: Line number for error reporting.
        path: Source file for error reporting.

    Returns:
        Parsed TrustRelation.

    Raises:
        IngestError: If a field is missing or not an integer.
    """
    if len(row) < REQUIRED_FIELDS:
        raise IngestError(
            f"Expected at least {REQUIRED_FIELDS} fields, got {len(row)}",
            path=path,
            line_number=line_number,
        )

    rater_field, ratee_field, weight_field = (field.strip() for field in row[:REQUIRED_FIELDS])

    try:
        rater = int(rater_field)
        ratee = int(ratee_field)
        weight = _parse_weight(weight_field)
    except ValueError as e:
        raise IngestError(
            f"Malformed relation {list(row)!r}: {e}",
            path=path,
            line_number=line_number,
        ) from e

    if rater < 0 or ratee < 0:
        raise IngestError(
            f"Participant IDs must be non-negative, got {rater} and {ratee}",
            path=path,
            line_number=line_number,
        )

    return TrustRelation(rater=rater, ratee=ratee, weight=weight)


def _read_rows(
    handle: TextIO,
    delimiter: str,
    path: Path,
) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, row)`` pairs, raising IngestError on read failures.

    Decoding happens in buffered chunks, so the reported line number is the
    row about to be read, not necessarily the one holding the bad bytes.
    """
    reader = csv.reader(handle, delimiter=delimiter)
    line_number = 0

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except (UnicodeDecodeError, csv.Error, OSError) as e:
            raise IngestError(
                f"Cannot read relation file: {e}",
                path=path,
                line_number=line_number + 1,
            ) from e

        line_number += 1
        yield line_number, row


def iter_relations(
    path: Path | str,
    has_header: bool = True,
    delimiter: str = ",",
    strict: bool = True,
) -> Iterator[TrustRelation]:
    """Yield relations from a delimited file in file order.

    Args:
        path: Dataset file.
        has_header: Skip the first row.
        delimiter: Field delimiter.
        strict: Raise on malformed rows; otherwise skip them with a warning.

    Raises:
        IngestError: If the file cannot be opened or decoded (in either
            mode), or on a malformed row in strict mode.
    """
    path = Path(path)

    try:
        handle = path.open(newline="", encoding="utf-8")
    except OSError as e:
        raise IngestError(f"Cannot open relation file: {e}", path=path) from e

    skipped = 0
    with handle:
        for line_number, row in _read_rows(handle, delimiter, path):
            if line_number == 1 and has_header:
                continue
            if not row or all(not field.strip() for field in row):
                continue

            try:
                yield parse_relation(row, line_number=line_number, path=path)
            except IngestError as e:
                if strict:
                    raise
                skipped += 1
                logger.warning(f"Skipping malformed row: {e}")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed rows in {path}")


def read_relations(
    path: Path | str,
    has_header: bool = True,
    delimiter: str = ",",
    strict: bool = True,
) -> list[TrustRelation]:
    """Read every relation from a delimited file.

    Returns:
        Relations in file order.
    """
    relations = list(
        iter_relations(path, has_header=has_header, delimiter=delimiter, strict=strict)
    )
    logger.info(f"Read {len(relations)} relations from {path}")
    return relations


def load_trust_graph(
    path: Path | str,
    has_header: bool = True,
    delimiter: str = ",",
    strict: bool = True,
) -> TrustGraph:
    """Read a relation file and build its trust graph."""
    relations = read_relations(path, has_header=has_header, delimiter=delimiter, strict=strict)
    return build_trust_graph(relations)
