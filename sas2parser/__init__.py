"""Parsers and writers for Salt and Sacrifice save files, game data catalogs and name tables."""

__version__ = "1.3.6"