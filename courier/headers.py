from __future__ import annotations

from collections.abc import Iterable, Iterator

HeaderValue = str | list[str]


def group_header_pairs(pairs: Iterable[tuple[str, str]]) -> dict[str, HeaderValue]:
    """
    Group raw (name, value) pairs by case-insensitive name.

    The first casing seen for a name wins. Names carrying a single value map to
    that value, repeated names map to the ordered list of their values.
    """
    names: dict[str, str] = {}
    grouped: dict[str, list[str]] = {}
    for name, value in pairs:
        key = names.setdefault(name.lower(), name)
        grouped.setdefault(key, []).append(value)
    return {
        name: values[0] if len(values) == 1 else values
        for name, values in grouped.items()
    }


class HeaderBag:
    """
    Multi-value header store with case-insensitive lookups.

    Values are kept under the casing they were set with; a second mapping
    resolves lowercase names back to that casing.
    """

    def __init__(self, headers: dict[str, HeaderValue] | None = None) -> None:
        self._headers: dict[str, HeaderValue] = {}
        self._names: dict[str, str] = {}
        for name, value in (headers or {}).items():
            self.set(name, value)

    def _resolve(self, name: str) -> str:
        return self._names.get(name.lower(), name)

    def set(self, name: str, value: HeaderValue) -> None:
        previous = self._names.get(name.lower())
        if previous is not None and previous != name:
            # Re-registering under a new casing replaces the old entry.
            self._headers.pop(previous, None)
        self._headers[name] = list(value) if isinstance(value, list) else value
        self._names[name.lower()] = name

    def append(self, name: str, value: HeaderValue) -> None:
        if not self.has(name):
            self.set(name, value)
            return
        name = self._resolve(name)
        self._headers[name] = _as_list(self._headers[name]) + _as_list(value)

    def remove(self, name: str) -> None:
        key = name.lower()
        canonical = self._names.pop(key, None)
        if canonical is not None:
            self._headers.pop(canonical, None)

    def get(self, name: str) -> HeaderValue | None:
        value = self._headers.get(self._resolve(name))
        if isinstance(value, list):
            return list(value)
        return value

    def get_line(self, name: str) -> str | None:
        value = self.get(name)
        if isinstance(value, list):
            return ", ".join(value)
        return value

    def has(self, name: str) -> bool:
        value = self.get(name)
        return value is not None and value != []

    def to_dict(self) -> dict[str, HeaderValue]:
        return {
            name: list(value) if isinstance(value, list) else value
            for name, value in self._headers.items()
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._headers))

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"<HeaderBag {self._headers!r}>"


def _as_list(value: HeaderValue) -> list[str]:
    if isinstance(value, list):
        return list(value)
    return [value]
