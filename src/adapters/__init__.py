"""Adaptadores de I/O: HTTP (TheCatAPI) y disco."""
