"""Enumeration type definitions"""

from enum import Enum


class I18nStructure(str, Enum):
    """How localized copies of an entry are laid out in the content store"""

    SINGLE_FILE = "single_file"
    MULTIPLE_FILES = "multiple_files"
    MULTIPLE_FOLDERS = "multiple_folders"
