"""Turn processing helpers.

This package holds the only stateful contract of a session: applying a model
delta and keeping the transcript bounded.
"""
