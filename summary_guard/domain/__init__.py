"""
Domain Layer

Pure business logic for summary validation and prompt construction.
No network or storage dependencies.
"""
