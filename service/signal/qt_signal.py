from PySide6.QtCore import Signal, QObject

# Translator page signals
class MySignal(QObject):
    direction_changed_signal = Signal(bool)  # True when translating text -> Morse

    playback_failed_signal = Signal(str)  # audio backend error message
