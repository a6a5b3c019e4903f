from dataclasses import dataclass, field
from datetime import datetime
import logging
import re
from typing import ClassVar, Optional

logger = logging.getLogger(__name__)


@dataclass
class FileRecord:
    """
    In-memory metadata of a file: name, size, writable flag and timestamps.

    Name and size are validated on construction and on every assignment.
    Invalid values are ignored and the previous (or default) value is kept.
    """

    DEFAULT_NAME: ClassVar[str] = "file"
    MAX_SIZE: ClassVar[int] = 2**31 - 1
    NAME_PATTERN: ClassVar["re.Pattern"] = re.compile(r"[A-Za-z0-9._-]+")

    name: Optional[str] = DEFAULT_NAME
    size: int = 0
    writable: bool = True
    creation_time: datetime = field(init=False)
    modification_time: datetime = field(init=False)

    def __post_init__(self):
        self.creation_time = datetime.now()
        self.modification_time = self.creation_time

    def __setattr__(self, key, value):
        if key == "name" or key == "size":
            valid = self.is_valid_name(value) if key == "name" else self.is_valid_size(value)
            if not valid:
                logger.debug("Ignoring invalid %s %r", key, value)
                if key in self.__dict__:
                    return
                value = self.DEFAULT_NAME if key == "name" else 0
        elif key in ("writable", "creation_time", "modification_time") and key in self.__dict__:
            raise AttributeError(f"{key} is set at construction and cannot be changed")
        super().__setattr__(key, value)

    @staticmethod
    def is_valid_name(name) -> bool:
        """Non-empty string of ASCII letters, digits, '.', '-' and '_'."""
        if not isinstance(name, str):
            return False
        return FileRecord.NAME_PATTERN.fullmatch(name) is not None

    @staticmethod
    def is_valid_size(size) -> bool:
        if not isinstance(size, int) or isinstance(size, bool):
            return False
        return 0 <= size <= FileRecord.MAX_SIZE

    def enlarge(self, number_of_bytes: int) -> bool:
        """
        Grow the size by number_of_bytes. The delta is expected to be non-negative.
        Returns False and leaves the size untouched if the result is out of range.
        """
        return self._resize(self.size + number_of_bytes)

    def shorten(self, number_of_bytes: int) -> bool:
        """
        Shrink the size by number_of_bytes. The delta is expected to be non-negative.
        Returns False and leaves the size untouched if the result is out of range.
        """
        return self._resize(self.size - number_of_bytes)

    def _resize(self, new_size):
        if not self.is_valid_size(new_size):
            logger.debug("Ignoring resize of %s from %d to %d", self.name, self.size, new_size)
            return False
        self.size = new_size
        return True
