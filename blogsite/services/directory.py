# 读取博文目录
import logging
import os
from typing import Callable, Iterable

from blogsite.errors import DirectoryAccessError

logger = logging.getLogger(__name__)

DirectoryReader = Callable[[str], Iterable[str]]

SELF_REFERENCES = {".", ".."}

def list_directory(path: str) -> list[str]:
	try:
		with os.scandir(path) as it:
			return [entry.name for entry in it]
	except FileNotFoundError as e:
		raise DirectoryAccessError(path, "directory does not exist") from e
	except NotADirectoryError as e:
		raise DirectoryAccessError(path, "not a directory") from e
	except PermissionError as e:
		raise DirectoryAccessError(path, "permission denied") from e
	except OSError as e:
		raise DirectoryAccessError(path, str(e)) from e

def filter_entries(names: Iterable[str]) -> list[str]:
	# 按名字过滤 "." 和 ".."，不依赖它们在列表中的位置
	return sorted(name for name in names if name not in SELF_REFERENCES)

def read_post_filenames(path: str, read_directory: DirectoryReader = list_directory) -> list[str]:
	names = filter_entries(read_directory(path))
	logger.debug(f"Found {len(names)} entries in {path}")
	return names

def get_directory_reader() -> DirectoryReader:
	return list_directory
