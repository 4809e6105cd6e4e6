"""Association table mapping TSAPs (address table indices) to ASAPs (group objects).

Wire format: ``[count:u16be] [tsap:u16be asap:u16be] ...``
"""

from __future__ import annotations

from collections.abc import Iterator

_ENTRY_SIZE = 4
_HEADER_SIZE = 2


class AssociationTable:
    """Association table as loaded by the configuration tool."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)

    def load(self, data: bytes) -> None:
        """Replace the table contents with ``data``."""
        self._data = bytes(data)

    def entry_count(self) -> int:
        """Number of entries declared in the table header."""
        if len(self._data) < _HEADER_SIZE:
            return 0
        return int.from_bytes(self._data[:2], "big")

    def _word(self, offset: int) -> int | None:
        if offset + 2 > len(self._data):
            return None
        return int.from_bytes(self._data[offset:offset + 2], "big")

    def _tsap(self, idx: int) -> int | None:
        return self._word(_HEADER_SIZE + idx * _ENTRY_SIZE)

    def _asap(self, idx: int) -> int | None:
        return self._word(_HEADER_SIZE + idx * _ENTRY_SIZE + 2)

    def _indices(self, start: int = 0) -> Iterator[int]:
        yield from range(start, self.entry_count())

    def translate_asap(self, asap: int) -> int | None:
        """Return the TSAP of the first entry holding ``asap``, or None."""
        for idx in self._indices():
            if self._asap(idx) == asap:
                return self._tsap(idx)
        return None

    def next_asap(self, tsap: int, start_idx: int) -> tuple[int, int] | None:
        """Find the next ASAP for ``tsap`` from entry ``start_idx`` on.

        Returns ``(asap, next_start_idx)`` or None when no entry is left.
        """
        for idx in self._indices(start_idx):
            if self._tsap(idx) == tsap:
                asap = self._asap(idx)
                if asap is None:
                    return None
                return asap, idx + 1
        return None

    def asaps_for_tsap(self, tsap: int) -> list[int]:
        """All ASAPs associated with ``tsap``, in table order."""
        result: list[int] = []
        idx = 0
        while (found := self.next_asap(tsap, idx)) is not None:
            asap, idx = found
            result.append(asap)
        return result