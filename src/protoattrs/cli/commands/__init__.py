"""Click commands registered on the ``protoattrs`` group."""

from __future__ import annotations
