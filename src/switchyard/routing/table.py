"""Append-only route table."""

from collections.abc import Iterable, Iterator
from typing import overload

from switchyard.routing.layer import Layer


class RouteTable:
    """Ordered sequence of layers.

    Layers are only ever appended. Dispatch reads the table by index while
    other requests may be reading it too; nothing removes or replaces a
    layer, so a cursor into the table stays valid for the life of a request.
    """

    __slots__ = ("_layers",)

    def __init__(self, layers: Iterable[Layer] = ()) -> None:
        self._layers: list[Layer] = list(layers)

    def append(self, layer: Layer) -> None:
        self._layers.append(layer)

    def extend(self, layers: Iterable[Layer]) -> None:
        self._layers.extend(layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(tuple(self._layers))

    @overload
    def __getitem__(self, index: int) -> Layer: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Layer, ...]: ...
    def __getitem__(self, index: int | slice) -> Layer | tuple[Layer, ...]:
        if isinstance(index, slice):
            return tuple(self._layers[index])
        return self._layers[index]

    def __repr__(self) -> str:
        return f"RouteTable({len(self._layers)} layers)"

    def describe(self) -> list[str]:
        """One line per layer, in dispatch order."""
        return [f"{index:>3}  {layer.describe()}" for index, layer in enumerate(self._layers)]
