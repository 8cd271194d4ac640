import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QCheckBox, QRadioButton, QButtonGroup,
    QPushButton, QSlider, QLabel, QSpinBox, QStyle
)
from PySide6.QtCore import Qt, Signal

from climatespiral.model.mapping import MappingKind
from climatespiral.model.state import DisplayOptions, DisplayFlag


logger = logging.getLogger(__name__)

MAPPING_LABELS: dict[MappingKind, str] = {
    MappingKind.LINEAR: "linear",
    MappingKind.SQRT: "sqrt",
    MappingKind.LOG: "log",
}


class ControlPanel(QWidget):
    """Mode controls and playback controls of the spiral."""
    options_changed = Signal()
    toggle_requested = Signal()
    scrub_requested = Signal(int)
    pause_requested = Signal()
    fps_changed = Signal(int)

    def __init__(self, options: DisplayOptions) -> None:
        super().__init__()
        self.options = options

        layout = QVBoxLayout(self)

        # --- Display ---
        grp_display = QGroupBox("Display")
        l_display = QVBoxLayout(grp_display)

        self.checkboxes: dict[DisplayFlag, QCheckBox] = {}
        for flag in DisplayFlag:
            chk = QCheckBox(flag.value)
            chk.toggled.connect(lambda on, f=flag: self.on_flag_toggled(f, on))
            l_display.addWidget(chk)
            self.checkboxes[flag] = chk

        layout.addWidget(grp_display)

        # --- Scaling ---
        grp_scaling = QGroupBox("Scaling")
        l_scaling = QVBoxLayout(grp_scaling)

        self.scaling = QButtonGroup(self)
        self.radios: dict[MappingKind, QRadioButton] = {}
        for kind, text in MAPPING_LABELS.items():
            radio = QRadioButton(text)
            self.scaling.addButton(radio)
            l_scaling.addWidget(radio)
            self.radios[kind] = radio
        self.scaling.buttonToggled.connect(self.on_scaling_toggled)

        layout.addWidget(grp_scaling)

        # --- Playback ---
        grp_play = QGroupBox("Playback")
        l_play = QVBoxLayout(grp_play)

        self.lbl_position = QLabel("-")
        self.lbl_position.setAlignment(Qt.AlignCenter)
        l_play.addWidget(self.lbl_position)

        hbox_play = QHBoxLayout()

        self.btn_play = QPushButton()
        self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPause))
        self.btn_play.clicked.connect(self.toggle_requested)
        self.btn_play.setEnabled(False)
        hbox_play.addWidget(self.btn_play)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setEnabled(False)
        # Only user interaction scrubs; setValue() from the animation does not
        self.slider.sliderPressed.connect(self.pause_requested)
        self.slider.sliderMoved.connect(self.scrub_requested)
        self.slider.actionTriggered.connect(lambda _: self.pause_requested.emit())
        hbox_play.addWidget(self.slider)

        l_play.addLayout(hbox_play)

        hbox_fps = QHBoxLayout()
        hbox_fps.addWidget(QLabel("Speed:"))
        self.spin_fps = QSpinBox()
        self.spin_fps.setRange(1, 120)
        self.spin_fps.setValue(60)
        self.spin_fps.setSuffix(" FPS")
        self.spin_fps.valueChanged.connect(self.fps_changed)
        hbox_fps.addWidget(self.spin_fps)
        hbox_fps.addStretch()
        l_play.addLayout(hbox_fps)

        layout.addWidget(grp_play)
        layout.addStretch()

        self.load_from_options()

    # --- MODE CONTROLS ---

    def on_flag_toggled(self, flag: DisplayFlag, on: bool) -> None:
        self.options.set_flag(flag, on)
        self.load_from_options()
        self.options_changed.emit()

    def on_scaling_toggled(self, button: QRadioButton, checked: bool) -> None:
        if not checked:
            return
        for kind, radio in self.radios.items():
            if radio is button:
                self.options.set_mapping(kind)
                logger.info(f"Scaling set to {kind.value}.")
                self.options_changed.emit()
                return

    def load_from_options(self) -> None:
        """Syncs widgets from DisplayOptions without re-triggering handlers."""
        for flag, chk in self.checkboxes.items():
            chk.blockSignals(True)
            chk.setChecked(self.options.is_on(flag))
            chk.blockSignals(False)

        self.scaling.blockSignals(True)
        self.radios[self.options.mapping].setChecked(True)
        self.scaling.blockSignals(False)

    # --- PLAYBACK ---

    def set_series_length(self, datalen: int) -> None:
        """Bind the slider to [0, datalen - 1]; disabled for an empty series."""
        has_data = datalen > 0
        self.slider.blockSignals(True)
        self.slider.setRange(0, max(datalen - 1, 0))
        self.slider.setValue(0)
        self.slider.blockSignals(False)
        self.slider.setEnabled(has_data)
        self.btn_play.setEnabled(has_data)
        if not has_data:
            self.lbl_position.setText("-")

    def set_position_text(self, text: str) -> None:
        self.lbl_position.setText(text)

    def update_play_icon(self, running: bool) -> None:
        if running:
            self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPause))
        else:
            self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
