"""
Catalog access layer.

Responsibilities:
- Manage the listing endpoint configuration.
- Issue the single catalog request and parse the response.
- Extract restaurant entities from the nested response structure.
- Map transport, parse and shape problems to typed fetch errors.
"""
