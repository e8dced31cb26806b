"""Domain layer: value objects, pure transformations and exceptions."""
