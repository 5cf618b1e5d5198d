"""Shared utilities for paths, configuration, and buffer I/O.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

paths.py:
    project_root() → project absolute path
    data_root() → data/ directory (NDBUFFER_DATA_ROOT overrides it)
    resolve_data_path(*segs) → normalized path under the data directory

config.py:
    load_config(path=None) → BufferConfig from YAML
    Missing keys fall back to the BufferConfig defaults

buffer_io.py:
    buffers_dir(config=None) → directory where .npy buffers are stored
    list_buffer_files(pattern) → sorted list of Path objects
    save_memory_view(view, path) → Path of the written .npy file
    load_memory_view(path) → MemoryView of the kind stored in the file

===================================================================================
ERROR HANDLING
===================================================================================

FileNotFoundError:
    - config.yml missing → pass an explicit path to load_config()
    - buffer .npy missing → verify path via list_buffer_files()

ValueError:
    - Non-flat array or non-.npy suffix handed to load_memory_view()

UnknownDataType:
    - Stored dtype is not one of the supported primitive kinds

===================================================================================
"""

from .buffer_io import (
    buffers_dir,
    list_buffer_files,
    load_memory_view,
    save_memory_view,
)
from .config import load_config
from .paths import data_root, project_root, resolve_data_path

__all__ = [
    "project_root",
    "data_root",
    "resolve_data_path",
    "load_config",
    "buffers_dir",
    "list_buffer_files",
    "load_memory_view",
    "save_memory_view",
]
