from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

import config

Props = Dict[str, str]


@dataclass
class Item:
    """A lootable thing: a name plus an optional set of string properties.

    Items in a catalog are templates; every pick hands out a copy so the
    catalog can be rolled against any number of times.
    """
    name: str
    props: Optional[Props] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Item name must be a non-empty string, got {self.name!r}")
        if self.props is not None:
            self.props = dict(self.props)

    def __str__(self) -> str:
        if not self.props:
            return self.name
        pairs = ",".join(f"{key}={value}" for key, value in self.props.items())
        return f"{self.name}{{{pairs}}}"

    def copy(self) -> Item:
        return Item(self.name, dict(self.props) if self.props is not None else None)

    def has_prop(self, key: str) -> bool:
        return self.props is not None and key in self.props

    def get_prop(self, key: str) -> Optional[str]:
        if self.props is None:
            return None
        return self.props.get(key)

    def set_prop(self, key: str, value: str) -> Item:
        """Set a property, replacing any previous value. Returns self."""
        if self.props is None:
            self.props = {}
        self.props[key] = value
        return self

    def extend(self, name: str, props: Props) -> Item:
        """Create a new item from this one with a new name and extra properties.

        The given properties override this item's on conflict; this item is
        left untouched.

        Example:
            hat = Item("hat", {"color": "black", "size": "large"})
            cap = hat.extend("cap", {"size": "small"})
            # cap.props == {"color": "black", "size": "small"}
        """
        merged: Props = dict(self.props or {})
        merged.update(props)
        return Item(name, merged)


# A modifier turns a picked item copy into its modified form
Modifier = Callable[[Item], Item]


@dataclass(frozen=True)
class Drop:
    """One roll against a catalog.

    Attributes:
        path: Branch to roll in, or None for the node loot() is called on
        depth: How many branch levels the sampler may descend
        luck: Chance of the starting node's items entering the pool; decays per level
        stack: Inclusive (low, high) range for the number of copies produced
        modify: Whether copies go through one of the registered modifiers
    """
    path: Optional[str] = None
    depth: int = config.DEFAULT_DROP_DEPTH
    luck: float = config.DEFAULT_DROP_LUCK
    stack: Tuple[int, int] = field(default=config.DEFAULT_DROP_STACK)
    modify: bool = False

    def __post_init__(self) -> None:
        if len(self.stack) != 2:
            raise ValueError(f"Stack must be a (low, high) pair, got {self.stack!r}")
        low, high = self.stack
        for bound in (low, high):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise ValueError(f"Stack bounds must be integers, got {self.stack!r}")
        if low < 0:
            raise ValueError(f"Stack lower bound must be non-negative, got {low}")
        if low > high:
            raise ValueError(f"Stack lower bound {low} exceeds upper bound {high}")
        if self.depth < 0:
            raise ValueError(f"Depth must be non-negative, got {self.depth}")
        # Normalise lists and other sequences so drops stay hashable
        object.__setattr__(self, "stack", (low, high))

    @classmethod
    def any_depth(cls, **kwargs) -> Drop:
        """Build a drop that may descend into the whole subtree.

        Takes every Drop field except `depth`, which is always config.MAX_DEPTH.
        """
        if "depth" in kwargs:
            raise TypeError("any_depth() sets depth itself; build Drop(depth=...) directly instead")
        return cls(depth=config.MAX_DEPTH, **kwargs)
