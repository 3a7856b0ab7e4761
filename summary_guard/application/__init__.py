"""
Application Layer

Use cases and DTOs wiring the validation domain to a text generator.
"""
