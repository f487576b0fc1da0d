"""
The type context: every lookup the printer needs from the surrounding
compiler.

``TypeContext`` is the abstract interface. ``ItemTable`` is an in-memory
implementation used by the command-line tool, by tests, and by embedders
that do not have a full compiler behind them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, TypeVar

from tyrender.ty.fold import walk_types
from tyrender.ty.generics import EMPTY_GENERICS, Generics
from tyrender.ty.ids import CRATE_ROOT, LOCAL_CRATE, DefId
from tyrender.ty.predicates import ClosureKind
from tyrender.ty.types import Type
from tyrender.utils.errors import ItemLookupError, SourceLocation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TypeContext(ABC):
    """
    Lookups into the compiler's item tables.

    Implementations are expected to be synchronous and to memoize on their
    own; the printer may call the same lookup many times per render.
    """

    @abstractmethod
    def item_path_str(self, def_id: DefId) -> str:
        """Get the fully qualified path of an item, e.g. ``std::vec::Vec``."""
        pass

    @abstractmethod
    def item_name(self, def_id: DefId) -> str:
        """Get the last path segment of an item."""
        pass

    @abstractmethod
    def trait_of_item(self, def_id: DefId) -> Optional[DefId]:
        """Get the trait declaring an associated value, or None."""
        pass

    @abstractmethod
    def impl_of_method(self, def_id: DefId) -> Optional[DefId]:
        """Get the impl block declaring a method, or None."""
        pass

    @abstractmethod
    def fn_trait_kind(self, def_id: DefId) -> Optional[ClosureKind]:
        """Get the call-trait kind if ``def_id`` is one of the Fn-family traits."""
        pass

    @abstractmethod
    def item_generics(self, def_id: DefId) -> Generics:
        """Get the generics of a type or function item."""
        pass

    @abstractmethod
    def trait_generics(self, def_id: DefId) -> Generics:
        """Get the generics of a trait."""
        pass

    @abstractmethod
    def has_item_type(self, def_id: DefId) -> bool:
        """Check whether the item's type (and so its layout) has been collected yet."""
        pass

    @abstractmethod
    def lift(self, value: T) -> Optional[T]:
        """
        Move ``value`` into the global arena.

        Returns None when the value refers to something that only lives in a
        local (inference) arena and cannot outlive it.
        """
        pass

    @abstractmethod
    def closure_span(self, def_id: DefId) -> Optional[SourceLocation]:
        """Get the source location of a closure defined in the local crate."""
        pass

    @abstractmethod
    def closure_freevar_names(self, def_id: DefId) -> tuple[str, ...]:
        """Get the names of the variables a local closure captures, in capture order."""
        pass


# =============================================================================
# In-memory item table
# =============================================================================


class ItemKind(Enum):
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    IMPL = "impl"
    FN = "fn"
    METHOD = "method"
    CONST = "const"
    CLOSURE = "closure"


@dataclass(slots=True)
class ItemInfo:
    """
    Everything recorded about one item.

    Attributes:
        path: Fully qualified path, e.g. ``std::collections::HashMap``
        kind: What sort of item this is
        generics: Declared generic parameters
        parent: Trait or impl an associated item is declared in
        fn_trait: Call-trait kind for the Fn-family traits
        has_type: Whether the item type has been collected
        span: Source location (closures)
        captures: Captured variable names (closures)
    """

    def_id: DefId
    path: str
    kind: ItemKind
    generics: Generics = EMPTY_GENERICS
    parent: Optional[DefId] = None
    fn_trait: Optional[ClosureKind] = None
    has_type: bool = True
    span: Optional[SourceLocation] = None
    captures: tuple[str, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.path.rsplit("::", 1)[-1]


class ItemTable(TypeContext):
    """
    A ``TypeContext`` backed by a dictionary of registered items.

    Types registered with ``intern_local`` model values allocated in an
    inference context's local arena: ``lift`` refuses any value containing
    one of them.
    """

    def __init__(self) -> None:
        self._items: dict[DefId, ItemInfo] = {}
        self._next_index: dict[int, int] = {}
        self._local_types: set[Type] = set()

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_item(
        self,
        path: str,
        kind: ItemKind,
        *,
        krate: int = LOCAL_CRATE,
        def_id: Optional[DefId] = None,
        generics: Generics = EMPTY_GENERICS,
        parent: Optional[DefId] = None,
        fn_trait: Optional[ClosureKind] = None,
        has_type: bool = True,
        span: Optional[SourceLocation] = None,
        captures: tuple[str, ...] = (),
    ) -> DefId:
        """Register an item and return its identifier."""
        if def_id is None:
            def_id = self.reserve_def_id(krate)
        elif def_id in self._items:
            raise ValueError(f"item {def_id} is already registered")
        else:
            self._next_index[def_id.krate] = max(
                self._next_index.get(def_id.krate, 1), def_id.index + 1
            )
        self._items[def_id] = ItemInfo(
            def_id=def_id,
            path=path,
            kind=kind,
            generics=generics,
            parent=parent,
            fn_trait=fn_trait,
            has_type=has_type,
            span=span,
            captures=tuple(captures),
        )
        logger.debug("registered %s %s as %s", kind.value, path, def_id)
        return def_id

    def reserve_def_id(self, krate: int = LOCAL_CRATE) -> DefId:
        """
        Allocate an identifier without registering an item.

        Generic parameter declarations need their item's identifier before
        the item itself can be registered.
        """
        # Index 0 is the crate root.
        index = self._next_index.get(krate, 1)
        self._next_index[krate] = index + 1
        return DefId(krate, index)

    def set_generics(self, def_id: DefId, generics: Generics) -> None:
        self._get(def_id).generics = generics

    def mark_type_collected(self, def_id: DefId, collected: bool = True) -> None:
        self._get(def_id).has_type = collected

    def intern_local(self, ty: Type) -> Type:
        """Record ``ty`` as living only in a local inference arena."""
        self._local_types.add(ty)
        return ty

    def item(self, def_id: DefId) -> ItemInfo:
        return self._get(def_id)

    def items(self) -> Iterator[ItemInfo]:
        """Iterate over registered items in registration order."""
        return iter(self._items.values())

    def __contains__(self, def_id: object) -> bool:
        return def_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def _get(self, def_id: DefId) -> ItemInfo:
        try:
            return self._items[def_id]
        except KeyError:
            raise ItemLookupError(f"no item registered for {def_id}", def_id) from None

    # -------------------------------------------------------------------------
    # TypeContext
    # -------------------------------------------------------------------------

    def item_path_str(self, def_id: DefId) -> str:
        if def_id == CRATE_ROOT and def_id not in self._items:
            return ""
        return self._get(def_id).path

    def item_name(self, def_id: DefId) -> str:
        return self._get(def_id).name

    def trait_of_item(self, def_id: DefId) -> Optional[DefId]:
        return self._parent_of_kind(def_id, ItemKind.TRAIT)

    def impl_of_method(self, def_id: DefId) -> Optional[DefId]:
        return self._parent_of_kind(def_id, ItemKind.IMPL)

    def _parent_of_kind(self, def_id: DefId, kind: ItemKind) -> Optional[DefId]:
        info = self._get(def_id)
        if info.parent is None or info.kind not in (ItemKind.METHOD, ItemKind.CONST):
            return None
        parent = self._items.get(info.parent)
        if parent is None or parent.kind is not kind:
            return None
        return parent.def_id

    def fn_trait_kind(self, def_id: DefId) -> Optional[ClosureKind]:
        info = self._items.get(def_id)
        return info.fn_trait if info is not None else None

    def item_generics(self, def_id: DefId) -> Generics:
        return self._get(def_id).generics

    def trait_generics(self, def_id: DefId) -> Generics:
        info = self._get(def_id)
        if info.kind is not ItemKind.TRAIT:
            raise ItemLookupError(f"{info.path} is not a trait", def_id)
        return info.generics

    def has_item_type(self, def_id: DefId) -> bool:
        info = self._items.get(def_id)
        return info is not None and info.has_type

    def lift(self, value: T) -> Optional[T]:
        if not self._local_types:
            return value
        for ty in walk_types(value):
            if ty in self._local_types:
                return None
        return value

    def closure_span(self, def_id: DefId) -> Optional[SourceLocation]:
        if not def_id.is_local():
            return None
        info = self._items.get(def_id)
        if info is None or info.kind is not ItemKind.CLOSURE:
            return None
        return info.span

    def closure_freevar_names(self, def_id: DefId) -> tuple[str, ...]:
        return self._get(def_id).captures
