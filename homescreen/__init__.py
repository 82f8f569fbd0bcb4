"""
homescreen: a decorative game-console home screen.

Packages:
- core: constants, the state machine (reducer) and theme derivation
- models: immutable players, games, state snapshot and actions
- services: config, catalog, clock driver, icons
- viewmodels: the Qt view model owning the current state
- views: the main window and its row widgets
- utils: logging, background workers, toasts
"""

from homescreen.core.constants import APP_VERSION

__version__ = APP_VERSION
