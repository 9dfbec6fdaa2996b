"""
Restaurant listing view layer.

Responsibilities:
- Fetch the restaurant catalog from the remote listing service.
- Hold the listing state (raw list, visible list, search text).
- Apply the name and top-rated filters.
- Render the listing as cards, or as a loading placeholder.
"""
