# CLI package for the creational pattern demos
"""
Console interface for running the demos.

Commands:
    creational gui         — Abstract Factory: UI widgets
    creational database    — Abstract Factory: database connectors
    creational npc         — Builder + Director: NPC
    creational characters  — Builder: archetype characters
    creational shapes      — Factory Method: game objects
    creational all         — every demo
"""
