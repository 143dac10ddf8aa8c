"""Core gameplay primitives (history events, model context, and status text).

Kept free of console concerns so it can be reused by the CLI and tests.
"""
