# Rev 0.1.1
# erabu/ui/dialogs/project_quick_add.py
from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QLineEdit, QDialogButtonBox


class ProjectQuickAdd(QDialog):
    """Title + tags form bound to the projects view-model's draft."""

    def __init__(self, projects_vm, parent=None):
        super().__init__(parent)
        self._vm = projects_vm
        self._form = projects_vm.form
        self.setWindowTitle("new project")
        self.title = QLineEdit(self);  self.title.setPlaceholderText("title")
        self.tags = QLineEdit(self);  self.tags.setPlaceholderText("tags, separated by spaces")
        self.error = QLabel(self);  self.error.setVisible(False)
        self.title.textChanged.connect(self._form.set_title)
        self.tags.textChanged.connect(self._form.set_tags)

        btns = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel, self)
        btns.button(QDialogButtonBox.Ok).setText("add")
        btns.accepted.connect(self._confirm); btns.rejected.connect(self.reject)

        lay = QVBoxLayout(self)
        lay.addWidget(QLabel("title:")); lay.addWidget(self.title)
        lay.addWidget(QLabel("tags:")); lay.addWidget(self.tags)
        lay.addWidget(self.error); lay.addWidget(btns)

    def _confirm(self):
        # a rejected draft keeps the dialog open
        if self._vm.add_from_form() is None:
            self.error.setText(self._form.last_error or "project not added")
            self.error.setVisible(True)
            return
        self.accept()
