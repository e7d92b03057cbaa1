"""CSV -> CHIP-0007 metadata hasher.

Reads an NFT metadata CSV, builds one CHIP-0007 JSON object per named row,
hashes it with SHA-256 and writes `<input>.output.csv` with an extra Hash column.
"""

__version__ = "0.1.0"
