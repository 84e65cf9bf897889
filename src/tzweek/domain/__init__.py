"""Domain layer — weekdays, zone rules, calendar arithmetic, week boundaries.

This layer depends only on the standard library (``datetime``/``zoneinfo``).
It must never import from services, commands, config, or output.
"""
