# Builder package
"""
Step-by-step construction of composite objects.

    dice      — injectable dice roller used for stat generation
    npc       — NPC built through setters by a scripted Director
    character — archetype builders that assemble themselves
"""
