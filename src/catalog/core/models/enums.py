"""Enumerations shared by entities, requests and change-sets."""

from enum import IntEnum


class PublicationStatus(IntEnum):
    """Publication state of a book.

    Only the UNPUBLISHED -> PUBLISHED direction is a legal transition.
    """

    UNPUBLISHED = 0
    PUBLISHED = 1

    def can_transition_to(self, target: "PublicationStatus") -> bool:
        """Return True if moving from this status to ``target`` is allowed."""
        return not (
            self == PublicationStatus.PUBLISHED and target == PublicationStatus.UNPUBLISHED
        )
