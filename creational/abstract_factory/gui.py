"""
Abstract Factory — Cross-Platform UI Elements.

A UI toolkit must ship Buttons, Menus and Dialogs in a different version
per client platform. Each platform gets one concrete factory; application
code talks only to GUIFactory and never names a concrete widget class.

Abstract products:  Button, Menu, Dialog
Abstract factory:   GUIFactory
Concrete factories: WindowsFactory, LinuxFactory, MacOSFactory

Adding a platform means adding one factory and its three widgets, without
touching the client code in run_demo().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Client platforms with their own widget family."""
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"


DEFAULT_PLATFORM = Platform.MACOS


# =============================================================================
# ABSTRACT PRODUCTS
# =============================================================================

class Widget:
    """A drawable UI element belonging to exactly one platform family."""

    platform: Platform

    def draw(self) -> str:
        """Print the widget's name and return it."""
        text = type(self).__name__
        print(text)
        return text


class Button(Widget):
    pass


class Menu(Widget):
    pass


class Dialog(Widget):
    pass


# =============================================================================
# CONCRETE PRODUCTS
# =============================================================================

class WindowsButton(Button):
    platform = Platform.WINDOWS


class WindowsMenu(Menu):
    platform = Platform.WINDOWS


class WindowsDialog(Dialog):
    platform = Platform.WINDOWS


class LinuxButton(Button):
    platform = Platform.LINUX


class LinuxMenu(Menu):
    platform = Platform.LINUX


class LinuxDialog(Dialog):
    platform = Platform.LINUX


class MacOSButton(Button):
    platform = Platform.MACOS


class MacOSMenu(Menu):
    platform = Platform.MACOS


class MacOSDialog(Dialog):
    platform = Platform.MACOS


# =============================================================================
# FACTORIES
# =============================================================================

class GUIFactory(ABC):
    """Creates one mutually compatible family of widgets."""

    platform: Platform

    @abstractmethod
    def create_button(self) -> Button:
        ...

    @abstractmethod
    def create_menu(self) -> Menu:
        ...

    @abstractmethod
    def create_dialog(self) -> Dialog:
        ...


class WindowsFactory(GUIFactory):
    platform = Platform.WINDOWS

    def create_button(self) -> Button:
        return WindowsButton()

    def create_menu(self) -> Menu:
        return WindowsMenu()

    def create_dialog(self) -> Dialog:
        return WindowsDialog()


class LinuxFactory(GUIFactory):
    platform = Platform.LINUX

    def create_button(self) -> Button:
        return LinuxButton()

    def create_menu(self) -> Menu:
        return LinuxMenu()

    def create_dialog(self) -> Dialog:
        return LinuxDialog()


class MacOSFactory(GUIFactory):
    platform = Platform.MACOS

    def create_button(self) -> Button:
        return MacOSButton()

    def create_menu(self) -> Menu:
        return MacOSMenu()

    def create_dialog(self) -> Dialog:
        return MacOSDialog()


FACTORIES: dict[Platform, type[GUIFactory]] = {
    Platform.WINDOWS: WindowsFactory,
    Platform.LINUX: LinuxFactory,
    Platform.MACOS: MacOSFactory,
}


def get_gui_factory(platform: Union[Platform, str, None] = None) -> GUIFactory:
    """
    Select the widget factory for a platform.

    Accepts a Platform member or its string value (case-insensitive).
    Anything unrecognised silently falls through to the MacOS family.
    """
    selected = _coerce_platform(platform)
    if selected is None:
        logger.debug("Unmatched platform %r, using %s", platform, DEFAULT_PLATFORM.value)
        selected = DEFAULT_PLATFORM

    factory = FACTORIES[selected]()
    logger.debug("Selected %s", type(factory).__name__)
    return factory


def _coerce_platform(platform: Union[Platform, str, None]) -> Optional[Platform]:
    if isinstance(platform, Platform):
        return platform
    if isinstance(platform, str):
        try:
            return Platform(platform.strip().lower())
        except ValueError:
            return None
    return None


# =============================================================================
# DEMO
# =============================================================================

def run_demo(platform: Union[Platform, str, None] = None) -> tuple[Button, Menu, Dialog]:
    """Create and draw one button, menu and dialog from a single factory."""
    factory = get_gui_factory(platform)

    button = factory.create_button()
    menu = factory.create_menu()
    dialog = factory.create_dialog()

    button.draw()
    menu.draw()
    dialog.draw()

    return button, menu, dialog
