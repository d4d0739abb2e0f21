"""Configuration for molfile splitters.

Main components:
- load_splitter_config: merge defaults, MOLFILE_* environment and overrides
- Format constants (terminator, supported version, block layout)
"""

from molfile.config.loader import load_splitter_config

__all__ = ["load_splitter_config"]
