from __future__ import annotations

from enum import Enum


class MarkerStrip(Enum):
    """Select how the naming-convention marker is removed from a kind name.

    A kind named ``ArrayOfWidget`` derives the candidate type name ``Widget``
    either way. The modes only differ when the marker occurs again later in
    the name, for example ``ArrayOfArrayOfWidgetHolder``.
    """

    PREFIX = "prefix"
    """Strip exactly the leading marker (``ArrayOfWidgetHolder`` stays intact after it)."""

    ALL = "all"
    """Remove every occurrence of the marker anywhere in the name."""

    def strip(self, name: str, marker: str) -> str:
        """Return ``name`` with ``marker`` removed according to this mode.

        Args:
            name: Simple kind name that already begins with ``marker``.
            marker: Naming-convention marker.

        """
        if self is MarkerStrip.ALL:
            return name.replace(marker, "")
        return name[len(marker) :]
