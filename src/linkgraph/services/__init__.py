"""Service layer — result-returning facade over the domain graph."""
