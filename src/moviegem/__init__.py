"""MovieGem: booking administration data layer backed by a SheetDB spreadsheet."""

__version__ = "0.1.0"
