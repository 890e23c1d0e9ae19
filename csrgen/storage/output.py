"""Owner-only output directory and artifact files for one identity.

Layout under the output root:
	<name>/                          0700
	<name>/<name>.key                0600
	<name>/<name>.csr                0600
	<name>/encoded-key.txt           0600
	<name>/<name>-csr-definition.yaml 0600

The directory must not exist beforehand and files are created exclusively,
so a previous identity's key material is never overwritten. A failed write
is reported and nothing is rolled back.
"""
import logging
import os
from typing import Union

from csrgen.common.errors import FilesystemError
from csrgen.common.utils import bundle_dir

log = logging.getLogger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o600
ENCODED_FILENAME = "encoded-key.txt"


class OutputBundle:
	def __init__(self, name: str, directory: str):
		self.name = name
		self.directory = directory

	@classmethod
	def create(cls, root: str, name: str) -> "OutputBundle":
		"""Create <root>/<name> with mode 0700. Fails if it already exists."""
		directory = bundle_dir(root, name)
		try:
			os.mkdir(directory, DIR_MODE)
			# mkdir honours the umask; force the exact mode
			os.chmod(directory, DIR_MODE)
		except FileExistsError as e:
			raise FilesystemError(f"mkdir {directory}: directory already exists") from e
		except OSError as e:
			raise FilesystemError(f"mkdir {directory}: {e.strerror or e}") from e
		log.debug("created output directory %s", directory)
		return cls(name, directory)

	@property
	def key_path(self) -> str:
		return os.path.join(self.directory, f"{self.name}.key")

	@property
	def csr_path(self) -> str:
		return os.path.join(self.directory, f"{self.name}.csr")

	@property
	def encoded_path(self) -> str:
		return os.path.join(self.directory, ENCODED_FILENAME)

	@property
	def manifest_path(self) -> str:
		return os.path.join(self.directory, f"{self.name}-csr-definition.yaml")

	def write(self, path: str, data: Union[bytes, str]) -> str:
		"""Write data to a new file at path with mode 0600 and return the path."""
		if isinstance(data, str):
			data = data.encode("utf-8")
		try:
			fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
		except OSError as e:
			raise FilesystemError(f"open {path}: {e.strerror or e}") from e
		try:
			with os.fdopen(fd, "wb") as f:
				os.fchmod(f.fileno(), FILE_MODE)
				f.write(data)
		except OSError as e:
			raise FilesystemError(f"write {path}: {e.strerror or e}") from e
		log.debug("wrote %d bytes to %s", len(data), path)
		return path


__all__ = ["OutputBundle", "DIR_MODE", "FILE_MODE", "ENCODED_FILENAME"]
