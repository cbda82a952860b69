"""
charlestown core library.

This package contains the core functionality:
- parser: Byte-level tokenizer, cell decoding and row assembly
- tables: Unheadered and headered tables, CSV writing
"""

__all__: list[str] = []
