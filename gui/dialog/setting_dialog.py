from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QSizePolicy,
    QSpacerItem,
    QVBoxLayout,
)
from ui_widgets import DoubleSpinBox, PushButton, SpinBox

from utils.config_manager import ConfigManager


class SettingDialog(QDialog):
    # draft field -> (config key, type)
    FIELDS = {
        "tone_freq": ("Audio/tone_freq", int),
        "tone_gain": ("Audio/tone_gain", float),
        "dot_duration": ("Audio/dot_duration", float),
        "dot_advance": ("Audio/dot_advance", float),
        "dash_duration": ("Audio/dash_duration", float),
        "dash_advance": ("Audio/dash_advance", float),
        "font_size": ("Setting/font_size", int),
    }

    def __init__(self, parent=None, config_manager=None):
        super().__init__(parent)
        self.setWindowTitle(self.tr("Settings"))
        self.resize(420, 380)

        if config_manager is not None:
            self.config_manager = config_manager
        elif parent is not None and hasattr(parent, "config_manager"):
            self.config_manager = parent.config_manager
        else:
            self.config_manager = ConfigManager()

        self._init_draft()
        self._init_ui()
        self._apply_draft_to_ui()

    @staticmethod
    def _normalize(value, value_type):
        if value_type is float:
            return round(float(value), 2)
        return value_type(value)

    @classmethod
    def factory_defaults(cls):
        return {
            name: cls._normalize(ConfigManager.DEFAULT_VALUES[key], value_type)
            for name, (key, value_type) in cls.FIELDS.items()
        }

    def _init_draft(self):
        self.initial = {
            name: self._normalize(self.config_manager.get_value(key, value_type=value_type), value_type)
            for name, (key, value_type) in self.FIELDS.items()
        }
        self.draft = dict(self.initial)

    @staticmethod
    def _seconds_spin(parent):
        spin = DoubleSpinBox(parent)
        spin.setDecimals(2)
        spin.setRange(0.01, 2.0)
        spin.setSingleStep(0.01)
        spin.setSuffix(" s")
        return spin

    def _init_ui(self):
        self.main_vbox = QVBoxLayout(self)
        self.main_vbox.setSpacing(10)

        # Audio
        self.group_audio = QGroupBox(self.tr("Audio"), self)
        audio_form = QFormLayout(self.group_audio)
        self.spin_freq = SpinBox(self)
        self.spin_freq.setRange(200, 1500)
        self.spin_freq.setSingleStep(10)
        self.spin_freq.setSuffix(" Hz")
        audio_form.addRow(self.tr("Tone frequency:"), self.spin_freq)

        self.spin_gain = DoubleSpinBox(self)
        self.spin_gain.setDecimals(2)
        self.spin_gain.setRange(0.01, 1.0)
        self.spin_gain.setSingleStep(0.01)
        audio_form.addRow(self.tr("Volume (gain):"), self.spin_gain)

        self.spin_dot = self._seconds_spin(self)
        audio_form.addRow(self.tr("Dot length:"), self.spin_dot)
        self.spin_dot_advance = self._seconds_spin(self)
        audio_form.addRow(self.tr("Dot step:"), self.spin_dot_advance)
        self.spin_dash = self._seconds_spin(self)
        audio_form.addRow(self.tr("Dash length:"), self.spin_dash)
        self.spin_dash_advance = self._seconds_spin(self)
        audio_form.addRow(self.tr("Dash step:"), self.spin_dash_advance)
        self.main_vbox.addWidget(self.group_audio)

        # Display
        self.group_display = QGroupBox(self.tr("Display"), self)
        display_form = QFormLayout(self.group_display)
        self.spin_font = SpinBox(self)
        self.spin_font.setRange(8, 36)
        display_form.addRow(self.tr("Font size:"), self.spin_font)
        self.main_vbox.addWidget(self.group_display)

        self.label_hint = QLabel("")
        self.label_hint.setStyleSheet("color:#c56a00;")
        self.main_vbox.addWidget(self.label_hint)

        bottom = QHBoxLayout()
        self.btn_restore = PushButton(self.tr("Restore defaults"))
        bottom.addWidget(self.btn_restore)
        spacer = QSpacerItem(40, 20, QSizePolicy.Expanding, QSizePolicy.Minimum)
        bottom.addItem(spacer)
        self.btn_cancel = PushButton(self.tr("Cancel"))
        self.btn_save = PushButton(self.tr("Save"))
        bottom.addWidget(self.btn_cancel)
        bottom.addWidget(self.btn_save)
        self.main_vbox.addLayout(bottom)

        self.btn_restore.clicked.connect(self._restore_factory_defaults)
        self.btn_cancel.clicked.connect(self.cancel)
        self.btn_save.clicked.connect(self.save)

    def _spin_boxes(self):
        return {
            "tone_freq": self.spin_freq,
            "tone_gain": self.spin_gain,
            "dot_duration": self.spin_dot,
            "dot_advance": self.spin_dot_advance,
            "dash_duration": self.spin_dash,
            "dash_advance": self.spin_dash_advance,
            "font_size": self.spin_font,
        }

    def _apply_draft_to_ui(self):
        for name, spin in self._spin_boxes().items():
            spin.setValue(self.draft[name])

    def _restore_factory_defaults(self):
        self.draft = self.factory_defaults()
        self._apply_draft_to_ui()
        self.label_hint.setText(self.tr("Defaults restored; click \"Save\" to keep them"))

    def _snapshot(self):
        return {
            name: self._normalize(spin.value(), self.FIELDS[name][1])
            for name, spin in self._spin_boxes().items()
        }

    def _is_dirty(self):
        return self._snapshot() != self.initial

    def _confirm_discard_if_dirty(self):
        if not self._is_dirty():
            return True
        result = QMessageBox.question(
            self,
            self.tr("Discard changes"),
            self.tr("There are unsaved changes. Discard them?"),
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return result == QMessageBox.Yes

    def save(self):
        snapshot = self._snapshot()
        for name, (key, value_type) in self.FIELDS.items():
            self.config_manager.set_value(key, value_type(snapshot[name]))
        self.config_manager.sync()
        self.initial = snapshot
        self.accept()

    def cancel(self):
        if self._confirm_discard_if_dirty():
            self.reject()

    def closeEvent(self, event):
        if self._confirm_discard_if_dirty():
            event.accept()
            return
        event.ignore()
