"""Filesystem infrastructure module."""
from .path_operations import (
    from_slash,
    path_exists,
    require_path,
    create_dir,
    ensure_dir,
    remove_dir,
    remove_dir_contents,
    remove_file,
    is_valid_path_to,
    split_path,
    get_path_without_filename,
    get_filename_from_path,
)
from .directory_reader import read_dir_entries, read_dir_entries_ending_with
from .file_reader import read_bytes_from_file, read_file_as_string
from .file_writer import write_bytes_to_fs, write_string_to_fs, copy_file

__all__ = [
    'from_slash',
    'path_exists',
    'require_path',
    'create_dir',
    'ensure_dir',
    'remove_dir',
    'remove_dir_contents',
    'remove_file',
    'is_valid_path_to',
    'split_path',
    'get_path_without_filename',
    'get_filename_from_path',
    'read_dir_entries',
    'read_dir_entries_ending_with',
    'read_bytes_from_file',
    'read_file_as_string',
    'write_bytes_to_fs',
    'write_string_to_fs',
    'copy_file',
]
