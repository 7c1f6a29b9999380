from __future__ import annotations

from collections.abc import Iterable


class QueryBuilder:
    """Accumulate query-string pairs, skipping unset values.

    Pairs are kept in insertion order and repeated keys are preserved, so
    ``add_all("tags", ["a", "b"])`` renders as ``tags=a&tags=b``.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, name: str, value: str | None) -> QueryBuilder:
        if value:
            self._pairs.append((name, value))
        return self

    def add_bool(self, name: str, value: bool | None) -> QueryBuilder:
        if value is not None:
            self._pairs.append((name, "true" if value else "false"))
        return self

    def add_all(self, name: str, values: Iterable[str] | None) -> QueryBuilder:
        for value in values or ():
            self.add(name, value)
        return self

    def add_pagination(self, offset: int | None, limit: int | None) -> QueryBuilder:
        # offset/limit travel as a pair; either side unset suppresses both
        if offset and limit and offset > 0 and limit > 0:
            self._pairs.append(("offset", str(offset)))
            self._pairs.append(("limit", str(limit)))
        return self

    def build(self) -> list[tuple[str, str]]:
        return list(self._pairs)


__all__ = ["QueryBuilder"]
