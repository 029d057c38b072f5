"""Command-line interface for protoattrs."""

from __future__ import annotations
