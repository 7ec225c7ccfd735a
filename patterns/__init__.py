"""Reusable patterns that sit beside the discount engine.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: a success/failure result wrapper, and lookup-by-type
dispatch of notifications.
"""
