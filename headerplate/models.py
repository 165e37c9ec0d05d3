from __future__ import annotations

from collections.abc import Iterable, Mapping

# Sentinel keys used by ordered-header HTTP clients to carry the order lists
# inside the header map itself. A parsed header name never ends with ":".
HEADER_ORDER_KEY = "Header-Order:"
PHEADER_ORDER_KEY = "PHeader-Order:"


class OrderedHeaders:
    """
    Header values plus the exact sequence in which header names appeared.

    ``values`` maps each regular header name (original casing, not folded)
    to its values in occurrence order. ``pseudo_order`` lists pseudo-header
    names such as ``:method``; ``header_order`` lists regular header names,
    including ``cookie`` and ``content-length`` whose values are kept out
    of ``values``.
    """

    def __init__(
        self,
        values: Mapping[str, Iterable[str]] | None = None,
        pseudo_order: Iterable[str] | None = None,
        header_order: Iterable[str] | None = None,
    ) -> None:
        self.values: dict[str, list[str]] = {
            name: list(vals) for name, vals in (values or {}).items()
        }
        self.pseudo_order: list[str] = list(pseudo_order or [])
        self.header_order: list[str] = list(header_order or [])

    def to_header_map(self) -> dict[str, list[str]]:
        """
        Return the values with the order lists attached under the reserved
        keys. Each list is attached only when it is non-empty.
        """
        out = {name: list(vals) for name, vals in self.values.items()}
        if self.pseudo_order:
            out[PHEADER_ORDER_KEY] = list(self.pseudo_order)
        if self.header_order:
            out[HEADER_ORDER_KEY] = list(self.header_order)
        return out

    @classmethod
    def from_header_map(cls, header_map: Mapping[str, Iterable[str]]) -> OrderedHeaders:
        values = {
            name: vals
            for name, vals in header_map.items()
            if name not in (HEADER_ORDER_KEY, PHEADER_ORDER_KEY)
        }
        return cls(
            values,
            header_map.get(PHEADER_ORDER_KEY),
            header_map.get(HEADER_ORDER_KEY),
        )

    def __bool__(self) -> bool:
        return bool(self.values or self.pseudo_order or self.header_order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedHeaders):
            return NotImplemented
        return (
            self.values == other.values
            and self.pseudo_order == other.pseudo_order
            and self.header_order == other.header_order
        )

    def __repr__(self) -> str:
        return (
            f"<OrderedHeaders values={self.values!r} "
            f"pseudo_order={self.pseudo_order!r} header_order={self.header_order!r}>"
        )

