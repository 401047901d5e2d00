"""Message signing, connection files, reply helpers and input history for kernels."""

__version__ = "0.1.0"