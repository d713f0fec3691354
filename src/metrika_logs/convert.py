"""
Post-processing of downloaded parts.

Parts are stored exactly as served (tab-separated, with a header row).
``tsv_to_csv`` is an explicit, opt-in step for consumers that want a
different delimiter or no quoting; it never runs as part of a download.
"""

from __future__ import annotations

import csv
from pathlib import Path

from metrika_logs.logging import get_logger

logger = get_logger(__name__)


def tsv_to_csv(
    src: Path | str,
    dst: Path | str | None = None,
    delimiter: str = "|",
    strip_quotes: bool = True,
    encoding: str = "utf-8",
) -> Path:
    """
    Rewrite a tab-separated part file with another delimiter.

    Args:
        src: Downloaded part file.
        dst: Output path (default: ``src`` with a ``.converted.csv`` suffix).
        delimiter: Output field delimiter.
        strip_quotes: Remove every ``"`` character from the input lines.
        encoding: Text encoding of both files.

    Returns:
        Path of the converted file.
    """
    src = Path(src)
    dst = Path(dst) if dst is not None else src.with_suffix(".converted.csv")

    rows = 0
    with open(src, encoding=encoding, newline="") as fin, open(
        dst, "w", encoding=encoding, newline=""
    ) as fout:
        writer = csv.writer(fout, delimiter=delimiter, lineterminator="\n")
        for line in fin:
            line = line.rstrip("\r\n")
            if strip_quotes:
                line = line.replace('"', "")
            writer.writerow(line.split("\t"))
            rows += 1

    logger.debug("part_converted", src=str(src), dst=str(dst), rows=rows)
    return dst


__all__ = ["tsv_to_csv"]
