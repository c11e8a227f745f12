"""HTTP primitives — request, response writer, headers, query params."""
