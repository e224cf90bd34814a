"""Socrati backend: PDF text extraction and LLM-generated teaching dialogues."""

__version__ = "1.0.0"
