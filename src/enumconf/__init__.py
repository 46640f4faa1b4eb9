__version__ = "0.1.0"

from enumconf.enumerator import Enumerator, new, path_chain
from enumconf.filesystem import FileInfo, FileSystem, MemoryFileSystem, OSFileSystem
from enumconf.platform_dirs import current_dir, default_system_dirs, platform_system_dirs, user_config_dir
from enumconf.settings import EnumeratorSettings

__all__ = [
    "__version__",
    "Enumerator",
    "EnumeratorSettings",
    "FileInfo",
    "FileSystem",
    "MemoryFileSystem",
    "OSFileSystem",
    "current_dir",
    "default_system_dirs",
    "new",
    "path_chain",
    "platform_system_dirs",
    "user_config_dir",
]
