# aether_manager/core/signals.py
from PyQt6.QtCore import QObject, pyqtSignal


class GlobalSignals(QObject):
    """
    A singleton class for application-wide signals.
    Services emit these after a mutation has been committed to disk so any
    front end can refresh without holding a reference to the services.
    """

    # Emitted after mods.json was rewritten.
    mods_changed = pyqtSignal()

    # Emitted after presets.json was rewritten.
    presets_changed = pyqtSignal()

    # Emitted after settings.json was rewritten.
    settings_changed = pyqtSignal()

    # Emitted whenever a service operation fails.
    # Emits: message (str), kind (str, e.g. 'validation', 'filesystem')
    operation_failed = pyqtSignal(str, str)


# Create a single, global instance that can be imported anywhere
global_signals = GlobalSignals()
