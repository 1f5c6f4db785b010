"""Input form for the employee and loan details."""
from PyQt6.QtWidgets import (QFrame, QGridLayout, QVBoxLayout, QHBoxLayout, QLabel,
                             QLineEdit, QComboBox, QPushButton)
from PyQt6.QtCore import Qt, pyqtSignal

from ..config import LOAN_REASONS, CURRENCY_SYMBOL
from ..form_state import FormState


class ApplicationForm(QFrame):
    """Form card bound one-way into a FormState.
    
    Every edit is pushed to the state immediately; the form never reads
    back from the preview.
    """
    download_requested = pyqtSignal()
    
    def __init__(self, form_state: FormState, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.state = form_state
        self.init_ui()
    
    def _field(self, label, widget):
        box = QVBoxLayout()
        box.setSpacing(4)
        box.addWidget(QLabel(label))
        box.addWidget(widget)
        return box
    
    def init_ui(self):
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        
        title = QLabel("Employee & Loan Details")
        title.setObjectName("sectionTitle")
        self.layout.addWidget(title)
        
        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(10)
        
        self.name_input = QLineEdit(placeholderText="Enter employee full name")
        self.eb_input = QLineEdit(placeholderText="Enter EB number")
        self.department_input = QLineEdit(placeholderText="e.g., Maintenance – Senior Technician")
        self.amount_input = QLineEdit(placeholderText="e.g., 100000")
        
        self.reason_combo = QComboBox()
        self.reason_combo.addItems(LOAN_REASONS)
        self.reason_combo.setCurrentText(self.state.get("loan_reason"))
        
        self.other_input = QLineEdit(placeholderText="Enter loan reason")
        self.mobile_input = QLineEdit(placeholderText="e.g., 9876543210")
        self.mobile_input.setInputMethodHints(Qt.InputMethodHint.ImhDialableCharactersOnly)
        self.amount_input.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        
        grid.addLayout(self._field("Employee Name", self.name_input), 0, 0)
        grid.addLayout(self._field("EB Number", self.eb_input), 0, 1)
        grid.addLayout(self._field("Department & Designation", self.department_input), 1, 0, 1, 2)
        grid.addLayout(self._field(f"Loan Amount ({CURRENCY_SYMBOL})", self.amount_input), 2, 0)
        grid.addLayout(self._field("Loan Reason", self.reason_combo), 2, 1)
        
        # Only shown while "Other" is selected
        self.other_label = QLabel("Specify Other Reason")
        self.other_row = QFrame()
        other_layout = QVBoxLayout(self.other_row)
        other_layout.setContentsMargins(0, 0, 0, 0)
        other_layout.setSpacing(4)
        other_layout.addWidget(self.other_label)
        other_layout.addWidget(self.other_input)
        grid.addWidget(self.other_row, 3, 0, 1, 2)
        
        grid.addLayout(self._field("Mobile Number", self.mobile_input), 4, 0, 1, 2)
        self.layout.addLayout(grid)
        
        actions = QHBoxLayout()
        actions.addStretch()
        self.download_btn = QPushButton("Download PDF")
        self.download_btn.setObjectName("primary")
        self.download_btn.clicked.connect(lambda: self.download_requested.emit())
        actions.addWidget(self.download_btn)
        self.layout.addLayout(actions)
        self.layout.addStretch()
        
        self.name_input.textChanged.connect(self.state.set_employee_name)
        self.eb_input.textChanged.connect(self.state.set_eb_number)
        self.department_input.textChanged.connect(self.state.set_department_designation)
        self.amount_input.textChanged.connect(self.state.set_loan_amount)
        self.reason_combo.currentTextChanged.connect(self.on_reason_changed)
        self.other_input.textChanged.connect(self.state.set_loan_reason_other)
        self.mobile_input.textChanged.connect(self.state.set_mobile_number)
        
        self.other_row.setVisible(self.state.is_other_reason)
    
    def on_reason_changed(self, text):
        self.state.set_loan_reason(text)
        self.other_row.setVisible(self.state.is_other_reason)
