"""structidl - Go struct to protobuf message converter."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("structidl")
except PackageNotFoundError:
    __version__ = "(local)"
