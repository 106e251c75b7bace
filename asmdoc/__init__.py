"""asmdoc - documentation from assembler list files."""

__version__ = "0.1.0"
