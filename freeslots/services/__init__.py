"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .free_slot_finder import CalendarSourceProtocol, FreeSlotFinderService

__all__ = ["CalendarSourceProtocol", "FreeSlotFinderService"]
