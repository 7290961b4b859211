"""HTTP primitives: immutable request, response, headers, query, and form data."""
