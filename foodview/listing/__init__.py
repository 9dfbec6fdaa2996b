"""
Listing controller layer.

Responsibilities:
- Own the listing state: raw restaurants, visible restaurants, search text.
- Run the one-shot catalog fetch when the listing is started.
- Apply the name filter and the top-rated filter.
- Decide between the loading placeholder and the card grid.
"""
