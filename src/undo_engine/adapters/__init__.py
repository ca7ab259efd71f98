"""Host adapters for the editor."""
