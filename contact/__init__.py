"""
Contact App

Handles the public contact form:
- Presence validation of the submitted fields
- HTML escaping of every stored value
- Parameterized insert into the ``messages`` table
- Confirmation fragment or redirect back to the form
"""
