'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Exception hierarchy for cube construction, net decoding and path search.

'''


class NCubeError(Exception):
    """Base class for every error raised by the package."""


class InvalidCubeSize(NCubeError, ValueError):
    def __init__(self, n, reason: str = "cube size must be >= 2"):
        self.n = n
        super().__init__(f"Invalid cube size {n!r}: {reason}")


class MalformedNet(NCubeError, ValueError):
    """The net text or grid does not have the 3n x 4n panel layout."""


class UnknownColorLabel(NCubeError, LookupError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown color label {label!r}")

    def __str__(self) -> str:
        # LookupError would repr() the message otherwise
        return self.args[0]


class ConflictingSticker(NCubeError, ValueError):
    """Two net cells painted the same axis slot of the same piece."""

    def __init__(self, position, axis, existing: int, incoming: int):
        self.position = position
        self.axis = axis
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Conflicting colors at {tuple(position)} on axis {axis}: "
            f"{existing} already set, got {incoming}"
        )


class PathNotFound(NCubeError, RuntimeError):
    """The search frontier was exhausted or exceeded its state budget."""
