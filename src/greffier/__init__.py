"""
Greffier - checkpoint proof service.

Answers block/transaction checkpoint questions for a sidechain bridge and
builds the payloads needed to finalize exits on the mainchain.
"""

__version__ = "0.1.0"
