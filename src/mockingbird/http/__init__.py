"""HTTP primitives: immutable Request, Response, and Headers."""
