"""Persistent metadata store - one JSON file per volume"""

import json
import os
import tempfile
from typing import Dict, List

from netshare.utils.logger import get_logger
from netshare.utils.validators import validate_volume_name, is_temp_file_name, TEMP_FILE_SUFFIX
from netshare.exceptions import InvalidVolumeNameException, MetadataWriteError

LOG = get_logger(__name__)

DIR_MODE = 0o755
FILE_MODE = 0o760


class MetadataStore:
    """
    Durable volume name -> options mapping.

    Each volume is stored as ``<root>/<name>`` where any '/' in the name
    becomes a sub-directory. The directory is owned by a single driver
    instance; no cross-process locking is done.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def path_for(self, name: str) -> str:
        """
        Get the metadata file path for a volume.

        Raises:
            InvalidVolumeNameException: If the name would escape the root
        """
        if not validate_volume_name(name):
            raise InvalidVolumeNameException(f"Invalid volume name: {name!r}")
        return os.path.join(self.root, *name.split('/'))

    def load(self) -> Dict[str, Dict[str, str]]:
        """
        Read every metadata file under the root.

        Files that cannot be read or decoded are skipped.

        Returns:
            Mapping of volume name (relative path, '/'-joined) to options
        """
        mounts = {}

        if not os.path.isdir(self.root):
            LOG.debug(f"Directory '{self.root}' not found... creating")
            os.makedirs(self.root, mode=DIR_MODE, exist_ok=True)
            return mounts

        LOG.debug(f"Reading metadata from: {self.root}")
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames.sort()
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                if is_temp_file_name(filename) or not os.path.isfile(path) or os.path.islink(path):
                    continue

                opts = self._read(path)
                if opts is None:
                    continue

                name = os.path.relpath(path, self.root).replace(os.sep, '/')
                LOG.debug(f"Mount '{name}' found with options: {opts}")
                mounts[name] = opts

        return mounts

    def _read(self, path: str):
        LOG.debug(f"Reading metadata file from: {path}")
        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            LOG.debug(f"Failed to read metadata file from: {path}: {e}")
            return None

        try:
            opts = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            LOG.debug(f"Failed to decode metadata file {path}: {e}")
            return None

        if not isinstance(opts, dict) or \
                not all(isinstance(v, str) for v in opts.values()):
            LOG.debug(f"Metadata file {path} is not a string mapping, skipping")
            return None

        return opts

    def save(self, name: str, opts: Dict[str, str]):
        """
        Persist the options of a volume.

        Args:
            name: Volume name
            opts: Option mapping

        Raises:
            InvalidVolumeNameException: If the name would escape the root
            MetadataWriteError: If the file cannot be written (fatal)
        """
        file_path = self.path_for(name)
        path = os.path.dirname(file_path)
        data = json.dumps(opts or {}).encode('utf-8')

        LOG.debug(f"Metadata file path: {file_path}")
        tmp_path = None
        try:
            os.makedirs(path, mode=DIR_MODE, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(file_path)}.",
                suffix=TEMP_FILE_SUFFIX,
                dir=path
            )
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, file_path)
            tmp_path = None
        except OSError as e:
            LOG.critical(f"Failed to write metadata for '{name}' to {file_path}: {e}")
            raise MetadataWriteError(name, file_path, e) from e
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass

    def delete(self, name: str):
        """Remove the metadata file of a volume; a missing file is not an error"""
        path = self.path_for(name)
        LOG.debug(f"Removing metadata: {path}")
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    def prune_empty_dirs(self) -> List[str]:
        """
        Remove empty sub-directories left behind by deleted nested volumes.

        Returns:
            Removed directory paths, deepest first
        """
        removed = []
        if not os.path.isdir(self.root):
            return removed

        for dirpath, dirnames, filenames in os.walk(self.root, topdown=False):
            if dirpath == self.root:
                continue
            try:
                if not os.listdir(dirpath):
                    os.rmdir(dirpath)
                    removed.append(dirpath)
            except OSError as e:
                LOG.warning(f"Could not remove metadata directory {dirpath}: {e}")

        if removed:
            LOG.info(f"Pruned {len(removed)} empty metadata directories")
        return removed
