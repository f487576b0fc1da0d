"""
Global item identifiers.
"""

from dataclasses import dataclass

# Crate number of the crate being compiled; every other crate is external.
LOCAL_CRATE = 0


@dataclass(frozen=True, slots=True)
class DefId:
    """
    Identifies a global item (struct, trait, function, closure, ...).

    Attributes:
        krate: Crate the item is defined in
        index: Index of the item inside its crate
    """

    krate: int
    index: int

    def is_local(self) -> bool:
        """Check whether the item belongs to the crate being compiled."""
        return self.krate == LOCAL_CRATE

    def __str__(self) -> str:
        return f"{self.krate}:{self.index}"


CRATE_ROOT = DefId(LOCAL_CRATE, 0)
