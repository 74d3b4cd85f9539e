from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence


CSV_HEADER = ("Élève", "Matière", "Appréciation")
CSV_FILENAME = "appreciations.csv"
BOM = "\ufeff"

_NEEDS_QUOTING = (",", '"', "\n", "\r")


@dataclass(frozen=True)
class SessionRecord:
	student_name: str
	subject: str
	generated_text: str


def escape_csv_field(value: object) -> str:
	text = str(value)
	escaped = text.replace('"', '""')
	if any(ch in text for ch in _NEEDS_QUOTING):
		escaped = f'"{escaped}"'
	return escaped


def _csv_row(fields: Sequence[object]) -> str:
	return ",".join(escape_csv_field(f) for f in fields)


class SessionLog:
	"""Comments generated during one browser session, oldest first.

	Append-only: entries are never edited or removed while the session lives.
	"""

	def __init__(self) -> None:
		self._records: List[SessionRecord] = []

	def append(self, record: SessionRecord) -> None:
		self._records.append(record)

	def all(self) -> List[SessionRecord]:
		return list(self._records)

	def __len__(self) -> int:
		return len(self._records)

	def __iter__(self) -> Iterator[SessionRecord]:
		return iter(list(self._records))

	def to_csv(self) -> str:
		"""Render the log as CSV text prefixed with a UTF-8 byte-order mark."""
		lines = [_csv_row(CSV_HEADER)]
		lines.extend(_csv_row((r.student_name, r.subject, r.generated_text)) for r in self._records)
		return BOM + "\n".join(lines)
