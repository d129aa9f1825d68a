"""Type-directed printing of records to stdout and files.

    import llog
    from llog import pt

    llog.configure(enabled=True, colors=True)
    llog.print("x", 1, 2.5)                     # x 1 2.5
    llog.print(pt.error, llog.location(), "oops")
    llog.print([10, 20, 30])                    # 10 20 30
    llog.print_to_file("out.log", "hello", "world")
    llog.print_from_file("out.log")
"""

import importlib.metadata as importlib_metadata

from llog import pt
from llog.lib.classify import MixedArgumentsError, UnprintableArgumentError
from llog.lib.colors import Color
from llog.lib.config.settings import LlogConfig, load_config
from llog.lib.files import print_from_file, print_to_file
from llog.lib.formatter import print
from llog.lib.location import location
from llog.lib.runtime import configure, reset, set_color
from llog.lib.templates import PrintTemplate

try:
    __version__ = importlib_metadata.version("llog")
except importlib_metadata.PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "Color",
    "LlogConfig",
    "MixedArgumentsError",
    "PrintTemplate",
    "UnprintableArgumentError",
    "configure",
    "load_config",
    "location",
    "print",
    "print_from_file",
    "print_to_file",
    "pt",
    "reset",
    "set_color",
]
