"""Character frequency statistics of a text file."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Mapping, Optional, Sequence, Tuple

Entry = Tuple[int, int, float, float]


def _is_printable(byte: int) -> bool:
    return 32 <= byte < 127


@dataclass(frozen=True)
class FrequencyReport:
    """Byte counts of some data, with ASCII letters folded to lower case."""

    total: int
    printable: int
    counts: Mapping[int, int] = field(default_factory=dict)

    @property
    def entries(self) -> list[Entry]:
        """(byte, count, probability, percentage) for printable bytes, in byte order."""
        return list(self._entries())

    def _entries(self) -> Iterator[Entry]:
        for byte in sorted(self.counts):
            if _is_printable(byte):
                count = self.counts[byte]
                yield (
                    byte,
                    count,
                    count / self.printable,
                    count * 100 / self.printable,
                )

    @property
    def sum_squared_probability(self) -> float:
        return sum(prob * prob for _, _, prob, _ in self._entries())

    @property
    def sum_squared_percentage(self) -> float:
        return sum(pct * pct for _, _, _, pct in self._entries())


def character_frequencies(data: bytes) -> FrequencyReport:
    """Count every byte of ``data``, treating upper-case ASCII letters as lower case."""
    counts = Counter(bytes(data).lower())
    printable = sum(1 for byte in data if _is_printable(byte))
    return FrequencyReport(total=len(data), printable=printable, counts=dict(counts))


def format_report(report: FrequencyReport) -> str:
    """Render the report as the text the command prints."""
    lines = [
        f"Total Char: {report.total}",
        f"TotalPrintable  Characters: {report.printable}",
    ]
    for byte, count, prob, pct in report.entries:
        lines.append(
            f"{chr(byte)}({byte:03d}) - {count:06d} - probability - {prob:.10f}, "
            f"percentage - {pct:.10f} %"
        )
    lines.append(
        f"\u03a3(Pi2) = {report.sum_squared_probability:.6f} - "
        f"{report.sum_squared_percentage:.6f} %"
    )
    lines.append(f"(1 / 255 = {1 / 256:.6f}) (1 / 95 = {1 / 95:.6f})")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print character frequencies of a file.")
    parser.add_argument("path", nargs="?", default="ptext.txt")
    args = parser.parse_args(argv)
    try:
        data = Path(args.path).read_bytes()
    except OSError as exc:
        print(f"cannot read {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    sys.stdout.write(format_report(character_frequencies(data)))
    return 0