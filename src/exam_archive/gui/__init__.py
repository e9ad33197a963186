"""PySide6 desktop front end for the exam archive."""
