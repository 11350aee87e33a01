# Factory Method package
"""
A static creation method choosing the concrete class for the caller.

    shapes — 2D game objects with sprite, collider, area and perimeter
"""
