# Rev 0.1.1
# erabu — Main Window
# Project list on top; filter field, "add project" and "pick" below

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QLineEdit, QListWidget, QListWidgetItem
)

from erabu.ui.dialogs.project_quick_add import ProjectQuickAdd
from erabu.ui.project_picker_view import ProjectPickerView


class _ProjectRow(QWidget):
    def __init__(self, project, on_delete, parent=None):
        super().__init__(parent)
        title = QLabel(project.title, self)
        font = title.font(); font.setBold(True); title.setFont(font)
        tags = QLabel("  ".join(project.tags), self)
        delete_btn = QPushButton("delete", self)
        delete_btn.clicked.connect(lambda: on_delete(project.id))

        bottom = QHBoxLayout()
        bottom.addWidget(tags)
        bottom.addStretch(1)
        bottom.addWidget(delete_btn)
        lay = QVBoxLayout(self)
        lay.addWidget(title)
        lay.addLayout(bottom)


class MainWindow(QMainWindow):
    def __init__(self, ctx, parent=None):
        super().__init__(parent)
        self._ctx = ctx
        self._vm = ctx.projects_vm
        self._picker = None

        self.setWindowTitle("erabu")
        size = ctx.settings.get("main_window", {})
        self.resize(int(size.get("width", 400)), int(size.get("height", 600)))

        # ---- central ----
        central = QWidget(self)
        v = QVBoxLayout(central)

        self._list = QListWidget(self)
        self._list.setSelectionMode(QListWidget.NoSelection)
        v.addWidget(self._list, 1)

        self._filter = QLineEdit(self)
        self._filter.setPlaceholderText("filter by title or tag")
        self._filter.textChanged.connect(self._vm.set_filter)
        v.addWidget(self._filter)

        controls = QHBoxLayout()
        self._btn_add = QPushButton("add project")
        self._btn_add.clicked.connect(self._add_project)
        self._btn_pick = QPushButton("▶")
        self._btn_pick.setToolTip("pick a random visible project")
        self._btn_pick.clicked.connect(self._open_picker)
        controls.addWidget(self._btn_add)
        controls.addStretch(1)
        controls.addWidget(self._btn_pick)
        v.addLayout(controls)
        self.setCentralWidget(central)

        self._vm.projectsChanged.connect(self._render_projects)
        # initial load
        self._vm.reload()

    # -------------------- rendering --------------------

    def _render_projects(self, projects):
        self._list.clear()
        for p in projects:
            item = QListWidgetItem(self._list)
            item.setData(Qt.UserRole, p.id)
            row = _ProjectRow(p, self._vm.delete_project)
            item.setSizeHint(row.sizeHint())
            self._list.setItemWidget(item, row)

    # -------------------- actions --------------------

    def _add_project(self):
        form = self._vm.form
        form.open()
        dlg = ProjectQuickAdd(self._vm, parent=self)
        dlg.exec()
        # no-op after a successful commit; drops the draft otherwise
        form.abandon()
        dlg.deleteLater()

    def _open_picker(self):
        if self._picker is not None and self._picker.isVisible():
            self._picker.raise_()
            return
        self._picker = ProjectPickerView(self._vm, parent=self)
        self._picker.finished.connect(self._forget_picker)
        self._picker.show()
        self._vm.pick_open()

    def _forget_picker(self, _result=None):
        self._picker = None
