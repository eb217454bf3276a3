"""Resource name code generation.

This package turns resource descriptors into Python source:

- `ResourceGenerator` renders the block of a single resource, as a plain
  type or as a dispatch union over one type per pattern;
- `FileRenderer` assembles the blocks of many resources into a module;
- `DescriptorLoader` reads descriptors from YAML streams.

Generation is pure: identical descriptors always yield identical text.
"""

from .generator import ResourceGenerator
from .loader import DescriptorLoader
from .renderer import FileRenderer

__all__ = (
    'DescriptorLoader',
    'FileRenderer',
    'ResourceGenerator',
)
