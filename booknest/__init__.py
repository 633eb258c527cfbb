"""BookNest - genre and year book recommendations from Open Library."""
