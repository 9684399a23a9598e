# erabu/ui/project_picker_view.py
# Rev 0.1.1
from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton


class ProjectPickerView(QDialog):
    """Reveals the frozen random pick until the dialog is closed."""

    def __init__(self, projects_vm, parent=None):
        super().__init__(parent)
        self._vm = projects_vm
        self.setWindowTitle("pick")

        self._title = QLabel(self)
        self._title.setAlignment(Qt.AlignCenter)
        font = self._title.font(); font.setPointSize(font.pointSize() + 6); self._title.setFont(font)
        self._tags = QLabel(self)
        self._tags.setAlignment(Qt.AlignCenter)
        close_btn = QPushButton("close", self)
        close_btn.clicked.connect(self.close)

        layout = QVBoxLayout(self)
        layout.addWidget(self._title)
        layout.addWidget(self._tags)
        layout.addWidget(close_btn, alignment=Qt.AlignRight)

        self._vm.pickChanged.connect(self.show_project)
        self._connected = True

    def show_project(self, project):
        if project is None:
            self._title.setText("nothing to pick")
            self._tags.setText("")
            return
        self._title.setText(project.title)
        self._tags.setText("  ".join(project.tags))

    def done(self, result):
        # Escape, close button and window close all end up here
        if self._connected:
            self._connected = False
            self._vm.pickChanged.disconnect(self.show_project)
            self._vm.pick_close()
        super().done(result)
        self.deleteLater()
