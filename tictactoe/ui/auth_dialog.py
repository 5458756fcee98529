from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
)
from PySide6.QtCore import Qt, Slot

SIGN_IN = "sign_in"
SIGN_UP = "sign_up"


class AuthDialog(QDialog):
    """
    modal sign-in / sign-up form backed by an AuthService
    """
    def __init__(self, auth_service, mode=SIGN_IN, parent=None):
        super().__init__(parent)
        self.auth_service = auth_service
        self.mode = mode
        title = "Sign In" if mode == SIGN_IN else "Sign Up"
        self.setWindowTitle(title)
        self.setModal(True)

        layout = QVBoxLayout(self)
        self.username_input = QLineEdit()
        self.username_input.setPlaceholderText("Username")
        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self._submit)
        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: #ef4444;")
        self.error_label.setWordWrap(True)

        buttons = QHBoxLayout()
        self.submit_button = QPushButton(title)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self._submit)
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)
        buttons.addStretch(1)
        buttons.addWidget(cancel_button)
        buttons.addWidget(self.submit_button)

        for w in (self.username_input, self.password_input, self.error_label):
            layout.addWidget(w)
        layout.addLayout(buttons)
        layout.setAlignment(Qt.AlignTop)

        self.auth_service.error_occurred.connect(self._show_error)

    @Slot(str)
    def _show_error(self, message):
        self.error_label.setText(message)

    @Slot()
    def _submit(self):
        # service emits error_occurred on failure, dialog stays open
        self.error_label.setText("")
        username = self.username_input.text()
        password = self.password_input.text()
        if self.mode == SIGN_UP:
            ok = self.auth_service.sign_up(username, password)
        else:
            ok = self.auth_service.sign_in(username, password)
        if ok:
            self.accept()
        else:
            self.password_input.clear()

