"""
Presentational view models.

Responsibilities:
- Turn one catalog entity into a display card.
- Produce the fixed loading placeholder.
- Describe the static page header and the rendered listing tree.
"""
