"""
Exceptions raised by the export pipeline.

File: errors.py
Created: 2026-10-12
Last Modified: 2026-10-14
"""


class WechatExportError(Exception):
    """Base class for export errors."""


class InvalidInput(WechatExportError):
    """The data source or an argument is unusable; the call is aborted."""


class PartialSourceFailure(WechatExportError):
    """
    A single store, row or directory lookup failed.

    Never propagated out of retrieval: it is logged and the remaining
    sources are processed.
    """

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {cause}")
