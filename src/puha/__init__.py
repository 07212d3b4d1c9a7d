"""puha — a personal tree of spaces and items kept in one document."""
