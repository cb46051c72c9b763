"""Snapshot persistence layer.

This package serializes compact snapshots, keeps the yearly archive,
and exposes the SDK client used by the CLI.
"""
