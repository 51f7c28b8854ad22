"""src/urlparams/query.py

Order-preserving multi-valued query parameters for urlparams.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from urlparams.exceptions import InvalidArgumentError
from urlparams.utils.validators import check_not_none

__all__ = ["QueryParams"]


class QueryParams(Mapping[str, List[str]]):
    """
    Ordered multi-map from parameter name to raw (still encoded) values.

    Names keep the order in which they were first seen, values keep the
    order in which they were added. Every stored name holds at least one
    value. No encoding happens here; callers store wire-form values.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Mapping[str, Iterable[str]]] = None):
        self._params: Dict[str, List[str]] = {}
        if params:
            for name, values in params.items():
                self.extend(name, values)

    @classmethod
    def parse(cls, query: Optional[str]) -> "QueryParams":
        """
        Tokenize a raw query string (without the leading ``?``).

        Tokens are split on ``&``, then on the first ``=``. A token without
        ``=`` has an empty name and an empty value. Blank input gives an
        empty collection and trailing empty tokens are dropped.
        """
        params = cls()
        if query is None or not query.strip():
            return params

        items = query.split("&")
        while items and not items[-1]:
            items.pop()

        for item in items:
            name, sep, value = item.partition("=")
            if not sep:
                name = ""
            params.add(name, value)
        return params

    def __getitem__(self, name: str) -> List[str]:
        return list(self._params[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return list(self._params.items()) == list(other._params.items())
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"

    def add(self, name: str, value: str) -> None:
        """Append one raw value under ``name``."""
        check_not_none(name, "name")
        check_not_none(value, "value")
        self._params.setdefault(name, []).append(value)

    def extend(self, name: str, values: Iterable[str]) -> None:
        """
        Append raw values under ``name`` in order.

        An empty iterable leaves the collection untouched.
        """
        check_not_none(name, "name")
        check_not_none(values, "values")
        items = list(values)
        for value in items:
            check_not_none(value, "value")
        if items:
            self._params.setdefault(name, []).extend(items)

    def replace(self, name: str, values: Iterable[str]) -> None:
        """Replace every value of ``name``; ``values`` must not be empty."""
        check_not_none(name, "name")
        items = list(values)
        if not items:
            raise InvalidArgumentError("values should not be empty")
        for value in items:
            check_not_none(value, "value")
        self._params[name] = items

    def remove(self, name: Optional[str]) -> None:
        """Delete ``name`` and its values. Missing names are ignored."""
        if name is None:
            return
        self._params.pop(name, None)

    def get_all(self, name: str) -> Optional[List[str]]:
        """
        Get all raw values of a parameter.

        Returns:
            A copy of the values, or None when the name is absent.
        """
        check_not_none(name, "name")
        values = self._params.get(name)
        return None if values is None else list(values)

    def first(self, name: str) -> Optional[str]:
        """First raw value of ``name``, or None."""
        values = self.get_all(name)
        return values[0] if values else None

    def to_query_string(self) -> str:
        """Join ``name=value`` pairs with ``&``; empty collection gives ``""``."""
        return "&".join(
            f"{name}={value}"
            for name, values in self._params.items()
            for value in values
        )
