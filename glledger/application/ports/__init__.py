"""Application ports package."""

from .database import DatabaseEnginePort
from .journal_entry_repository import JournalEntryRepositoryPort

__all__ = ["DatabaseEnginePort", "JournalEntryRepositoryPort"]
