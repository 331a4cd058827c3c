from pathlib import Path
from typing import Dict, Optional
import logging

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap
from PyQt5.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from PA_Libs.constants import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    COLOR_EFFECT_NONE,
    CONTRAST_MAX,
    CONTRAST_MIN,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    FIELD_BRIGHTNESS,
    FIELD_COLOR_EFFECT,
    FIELD_CONTRAST,
    IMAGE_FILE_FILTER,
    PREVIEW_MIN_SIZE,
)
from PA_Libs.errors import AdjustmentError
from PA_Libs.ImageEditingLib.image_models import PixelBuffer
from PA_Libs.SessionLib.adjustment_session import AdjustmentSession
from PA_Libs.SessionLib.image_io import encode_png

logger = logging.getLogger(__name__)


class ImageAdjusterWindow(QMainWindow):
    def __init__(self, session: Optional[AdjustmentSession] = None) -> None:
        super().__init__()
        self.setWindowTitle("Photo Adjust")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.session = session if session is not None else AdjustmentSession()
        self.effect_buttons: Dict[str, QPushButton] = {}

        self._build_ui()
        self._connect_signals()
        self.refresh_controls()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        controls_col = QVBoxLayout()

        self.label_preview = QLabel("No image uploaded")
        self.label_preview.setAlignment(Qt.AlignCenter)
        self.label_preview.setMinimumSize(PREVIEW_MIN_SIZE, PREVIEW_MIN_SIZE)
        self.label_preview.setStyleSheet("border: 1px solid #888;")

        self.btn_load_image = QPushButton("Upload Image")
        self.slider_brightness, self.label_brightness_value = self._make_slider(BRIGHTNESS_MIN, BRIGHTNESS_MAX)
        self.slider_contrast, self.label_contrast_value = self._make_slider(CONTRAST_MIN, CONTRAST_MAX)

        self.effect_group = QButtonGroup(self)
        self.effect_group.setExclusive(False)
        effects_row = QHBoxLayout()
        effects_row.addWidget(QLabel("Effects:"))
        for effect_name, label in self.session.effect_registry.selectable_effects().items():
            button = QPushButton(label)
            button.setCheckable(True)
            self.effect_group.addButton(button)
            self.effect_buttons[effect_name] = button
            effects_row.addWidget(button)

        self.btn_apply = QPushButton("Apply Adjustment")
        self.btn_reset = QPushButton("Reset")
        self.btn_download = QPushButton("Download Image")

        controls_col.addWidget(self.btn_load_image)
        controls_col.addLayout(self._labelled_row("Brightness:", self.slider_brightness, self.label_brightness_value))
        controls_col.addLayout(self._labelled_row("Contrast:", self.slider_contrast, self.label_contrast_value))
        controls_col.addLayout(effects_row)
        actions_row = QHBoxLayout()
        actions_row.addWidget(self.btn_apply)
        actions_row.addWidget(self.btn_reset)
        actions_row.addWidget(self.btn_download)
        controls_col.addLayout(actions_row)
        controls_col.addStretch(1)

        root.addWidget(self.label_preview, stretch=2)
        root.addLayout(controls_col, stretch=1)

    def _make_slider(self, minimum: int, maximum: int):
        slider = QSlider(Qt.Horizontal)
        slider.setRange(minimum, maximum)
        slider.setValue(0)
        value_label = QLabel("0")
        return slider, value_label

    def _labelled_row(self, text: str, slider: QSlider, value_label: QLabel) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addWidget(QLabel(text))
        row.addWidget(slider, stretch=1)
        row.addWidget(value_label)
        return row

    def _connect_signals(self) -> None:
        self.btn_load_image.clicked.connect(self.load_image)
        self.slider_brightness.valueChanged.connect(self.on_brightness_changed)
        self.slider_contrast.valueChanged.connect(self.on_contrast_changed)
        self.effect_group.buttonClicked.connect(self.on_effect_clicked)
        self.btn_apply.clicked.connect(self.apply_adjustment)
        self.btn_reset.clicked.connect(self.reset_adjustment)
        self.btn_download.clicked.connect(self.download_image)

    def load_image(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Select Image", "", IMAGE_FILE_FILTER)
        if not file_path:
            return

        try:
            original = self.session.load_image_file(Path(file_path))
        except (AdjustmentError, OSError) as e:
            self._show_warning("Could not load image", str(e))
            return

        self._sync_controls_to_parameters()
        self._set_preview(original)
        self.refresh_controls()

    def on_brightness_changed(self, value: int) -> None:
        self._set_parameter(FIELD_BRIGHTNESS, value)
        self.label_brightness_value.setText(str(value))

    def on_contrast_changed(self, value: int) -> None:
        self._set_parameter(FIELD_CONTRAST, value)
        self.label_contrast_value.setText(str(value))

    def on_effect_clicked(self, clicked: QPushButton) -> None:
        selected = COLOR_EFFECT_NONE
        for effect_name, button in self.effect_buttons.items():
            if button is clicked and button.isChecked():
                selected = effect_name
            else:
                button.setChecked(False)
        self._set_parameter(FIELD_COLOR_EFFECT, selected)

    def _set_parameter(self, field_name: str, value) -> None:
        try:
            self.session.set_parameter(field_name, value)
        except AdjustmentError as e:
            self._show_warning("Invalid adjustment", str(e))

    def apply_adjustment(self) -> None:
        if not self.session.has_image:
            return

        try:
            result = self.session.apply()
        except AdjustmentError as e:
            self._show_warning("Could not apply adjustment", str(e))
            return

        self._set_preview(result)
        self.refresh_controls()

        applied = self.session.last_applied_parameters
        effect_label = self.session.effect_registry.get_label(applied.color_effect)
        self.statusBar().showMessage(
            f"Brightness {applied.brightness}, contrast {applied.contrast}, effect: {effect_label}"
        )

    def reset_adjustment(self) -> None:
        if not self.session.has_image:
            return

        restored = self.session.reset()
        self._sync_controls_to_parameters()
        self._set_preview(restored)
        self.refresh_controls()

    def download_image(self) -> None:
        if not self.session.can_export:
            return

        folder = QFileDialog.getExistingDirectory(self, "Select Download Directory")
        if not folder:
            return

        try:
            saved_path = self.session.save_export(Path(folder))
        except (AdjustmentError, OSError) as e:
            self._show_warning("Could not save image", str(e))
            return

        self.statusBar().showMessage(f"Saved {saved_path}")

    def refresh_controls(self) -> None:
        has_image = self.session.has_image
        self.btn_apply.setEnabled(has_image)
        self.btn_reset.setEnabled(has_image)
        self.btn_download.setEnabled(self.session.can_export)

    def _sync_controls_to_parameters(self) -> None:
        parameters = self.session.parameters
        for widget in (self.slider_brightness, self.slider_contrast):
            widget.blockSignals(True)
        self.slider_brightness.setValue(parameters.brightness)
        self.slider_contrast.setValue(parameters.contrast)
        for widget in (self.slider_brightness, self.slider_contrast):
            widget.blockSignals(False)
        self.label_brightness_value.setText(str(parameters.brightness))
        self.label_contrast_value.setText(str(parameters.contrast))
        for effect_name, button in self.effect_buttons.items():
            button.setChecked(effect_name == parameters.color_effect)

    def _set_preview(self, buffer: PixelBuffer) -> None:
        pixmap = QPixmap()
        try:
            png_bytes = encode_png(buffer)
        except AdjustmentError:
            png_bytes = b""
        if not png_bytes or not pixmap.loadFromData(png_bytes, "PNG"):
            self.label_preview.setText("Preview failed")
            return

        scaled = pixmap.scaled(
            self.label_preview.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.label_preview.setPixmap(scaled)

    def _show_warning(self, title: str, message: str) -> None:
        logger.warning(f"{title}: {message}")
        QMessageBox.warning(self, title, message)
