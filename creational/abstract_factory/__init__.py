# Abstract Factory package
"""
Families of related products created through one factory interface.

    gui      — Buttons, Menus and Dialogs per client platform
    database — Connections and Commands per database vendor
"""
