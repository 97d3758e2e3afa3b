from __future__ import annotations

import logging
import os
from typing import Union

from umask.flags import Class

logger = logging.getLogger(__name__)

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class MetadataProvider:
    name: str = "none"

    def getMode(self, path: PathArg) -> int:
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class StatMetadataProvider(MetadataProvider):
    name = "stat"

    def getMode(self, path: PathArg) -> int:
        # raises OSError (FileNotFoundError, PermissionError, ...) untouched
        mode = os.stat(path).st_mode
        logger.debug("stat %r -> %o", path, mode)
        return mode


class PermissiveMetadataProvider(MetadataProvider):
    name = "permissive"

    def getMode(self, path: PathArg) -> int:
        return Class.ALL.value


def selectProvider(osName: str = os.name) -> MetadataProvider:
    if osName == "posix":
        return StatMetadataProvider()
    return PermissiveMetadataProvider()


_defaultProvider: MetadataProvider = selectProvider()
logger.debug("Using %s metadata provider on %s", _defaultProvider.name, os.name)


def defaultProvider() -> MetadataProvider:
    return _defaultProvider
