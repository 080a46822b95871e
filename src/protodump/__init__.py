"""protodump — extract C function prototypes from implementation files.

Parses C source with tree-sitter, finds every function definition with
external linkage, and prints the declaration that precedes its body as a
header-style prototype.
"""

__version__ = "0.1.0"
