"""Qt views for the language preferences editor."""
