"""Parses `git diff --name-status` output into change records."""

from typing import List, Optional

from ..schemas import ChangeRecord, ChangeStatus


def parse_name_status(raw_output: str) -> List[ChangeRecord]:
    """
    Parse name-status output, one change per line.

    Lines look like ``M\\tsrc/a.ts`` or ``R100\\told.ts\\tnew.ts``; only the
    first character of the status field matters. Lines that do not carry
    enough paths for their status are skipped.
    """
    if not raw_output or not raw_output.strip():
        return []

    records = []
    for line in raw_output.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        record = parse_line(line)
        if record is None:
            print(f"Warning: skipping unrecognised status line: {line!r}")
            continue
        records.append(record)
    return records


def parse_line(line: str) -> Optional[ChangeRecord]:
    """Parse a single status line, or return None if it is malformed."""
    fields = line.split("\t")
    raw_status = fields[0].strip()
    if not raw_status:
        return None

    code = raw_status[0]
    status = ChangeStatus.from_code(code)

    if status.has_old_path:
        # Renames and copies: R100\told\tnew
        if len(fields) < 3 or not fields[1] or not fields[2]:
            return None
        return ChangeRecord(status=status, code=code, old_path=fields[1], path=fields[2])

    if len(fields) < 2 or not fields[1]:
        return None
    return ChangeRecord(status=status, code=code, path=fields[1])
