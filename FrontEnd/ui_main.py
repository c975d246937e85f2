from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QListWidgetItem, QLineEdit, QComboBox, QCompleter, QMessageBox, QInputDialog, QSizePolicy
)
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt
from BackEnd.core.validation import parse_date
from BackEnd.services.session_manager import SessionManager
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.subject_chart import draw_subject_chart
from FrontEnd.styles.design_tokens import stylesheet

SESSION_ID_ROLE = Qt.ItemDataRole.UserRole


class MainWindow(QMainWindow):
	def __init__(self, manager=None):
		super().__init__()
		self.setWindowTitle("Study Tracker")
		self.resize(1000, 720)
		self.setStyleSheet(stylesheet())

		self.manager = manager or SessionManager()
		self.manager.user_changed.connect(self._on_user_changed)
		self.manager.sessions_changed.connect(self._show_all)

		# sessions currently listed; None means the full set
		self._view = None
		self._report = None

		content = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(24, 24, 24, 24)
		layout.setSpacing(12)
		layout.addLayout(self._build_login_row())
		layout.addLayout(self._build_form_row())

		body = QHBoxLayout()
		body.setSpacing(16)
		body.addLayout(self._build_list_column(), 2)

		# Bar chart (matplotlib)
		self.figure = Figure(figsize=(5, 3))
		self.canvas = FigureCanvas(self.figure)
		self.canvas.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		body.addWidget(self.canvas, 3)
		layout.addLayout(body)

		layout.addLayout(self._build_filter_row())
		self.footer_today = FooterToday()
		layout.addWidget(self.footer_today)

		content.setLayout(layout)
		self.setCentralWidget(content)
		self._on_user_changed("")

	# --- layout -------------------------------------------------------------

	def _build_login_row(self):
		row = QHBoxLayout()
		self.username_edit = QLineEdit()
		self.username_edit.setPlaceholderText("Username")
		self.password_edit = QLineEdit()
		self.password_edit.setPlaceholderText("Password")
		self.password_edit.setEchoMode(QLineEdit.EchoMode.Password)
		self.login_btn = QPushButton("Login")
		self.register_btn = QPushButton("Register")
		self.user_status = QLabel()
		self.user_status.setObjectName("UserStatus")
		for widget in (self.username_edit, self.password_edit, self.login_btn, self.register_btn):
			row.addWidget(widget)
		row.addStretch()
		row.addWidget(self.user_status)

		self.login_btn.clicked.connect(self._login)
		self.register_btn.clicked.connect(self._register)
		self.password_edit.returnPressed.connect(self._login)
		return row

	def _build_form_row(self):
		config = self.manager.config
		row = QHBoxLayout()
		self.subject_edit = QLineEdit()
		self.subject_edit.setPlaceholderText("Subject")
		completer = QCompleter(config.subjects)
		completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
		self.subject_edit.setCompleter(completer)
		self.category_combo = QComboBox()
		self.category_combo.addItems(config.categories)
		self.category_combo.setCurrentIndex(0)
		self.minutes_edit = QLineEdit()
		self.minutes_edit.setPlaceholderText("Minutes")
		self.add_btn = QPushButton("Add Session")
		row.addWidget(QLabel("Subject:"))
		row.addWidget(self.subject_edit, 2)
		row.addWidget(QLabel("Category:"))
		row.addWidget(self.category_combo, 1)
		row.addWidget(QLabel("Minutes:"))
		row.addWidget(self.minutes_edit)
		row.addWidget(self.add_btn)

		self.add_btn.clicked.connect(self._add_session)
		self.minutes_edit.returnPressed.connect(self._add_session)
		return row

	def _build_list_column(self):
		column = QVBoxLayout()
		self.session_list = QListWidget()
		column.addWidget(self.session_list)

		buttons = QHBoxLayout()
		self.edit_btn = QPushButton("Edit")
		self.delete_btn = QPushButton("Delete")
		self.save_btn = QPushButton("Save")
		self.load_btn = QPushButton("Load")
		self.summary_btn = QPushButton("Summary")
		for btn in (self.edit_btn, self.delete_btn, self.save_btn, self.load_btn, self.summary_btn):
			buttons.addWidget(btn)
		column.addLayout(buttons)

		self.edit_btn.clicked.connect(self._edit_selected)
		self.delete_btn.clicked.connect(self._delete_selected)
		self.save_btn.clicked.connect(self._save)
		self.load_btn.clicked.connect(self._load)
		self.summary_btn.clicked.connect(self._show_summary)
		return column

	def _build_filter_row(self):
		row = QHBoxLayout()
		self.week_btn = QPushButton("Last 7 Days")
		self.from_edit = QLineEdit()
		self.from_edit.setPlaceholderText("From (YYYY-MM-DD)")
		self.to_edit = QLineEdit()
		self.to_edit.setPlaceholderText("To (YYYY-MM-DD)")
		self.range_btn = QPushButton("Filter Range")
		self.all_btn = QPushButton("Show All")
		row.addWidget(self.week_btn)
		row.addStretch()
		for widget in (self.from_edit, self.to_edit, self.range_btn, self.all_btn):
			row.addWidget(widget)

		self.week_btn.clicked.connect(self._filter_week)
		self.range_btn.clicked.connect(self._filter_range)
		self.all_btn.clicked.connect(self._show_all)
		return row

	# --- helpers ------------------------------------------------------------

	def _run(self, action, *args, success="", **kwargs):
		"""Run a manager action; show its message in a dialog when there is one."""
		result = self.manager.perform(action, *args, success=success, **kwargs)
		if not result.ok:
			QMessageBox.warning(self, "Study Tracker", result.message)
		elif result.message:
			QMessageBox.information(self, "Study Tracker", result.message)
		return result

	def _selected_id(self):
		item = self.session_list.currentItem()
		return item.data(SESSION_ID_ROLE) if item is not None else None

	def _refresh(self):
		"""Redraw list, chart and footer from the current view."""
		self.session_list.clear()
		if not self.manager.is_logged_in:
			self._report = None
			draw_subject_chart(self.figure, [])
			self.canvas.draw()
			self.footer_today.set_stats(None)
			return
		user = self.manager.current
		sessions = user.sessions if self._view is None else self._view
		for s in sessions:
			item = QListWidgetItem(user.describe(s))
			item.setData(SESSION_ID_ROLE, s.session_id)
			self.session_list.addItem(item)
		self._report = user.report(sessions)
		draw_subject_chart(self.figure, self._report.points())
		self.canvas.draw()
		self.footer_today.set_stats(user.stats())

	def _show_all(self):
		self._view = None
		self._refresh()

	# --- slots --------------------------------------------------------------

	def _on_user_changed(self, username):
		if username:
			self.user_status.setText(f"Logged in as: {username}")
		else:
			self.user_status.setText("Not logged in.")
		self._show_all()

	def _login(self):
		self._run(self.manager.login, self.username_edit.text(), self.password_edit.text())
		self.password_edit.clear()

	def _register(self):
		self._run(self.manager.register, self.username_edit.text(), self.password_edit.text(),
			success="Registration successful!")

	def _add_session(self):
		result = self._run(self.manager.add_session, self.subject_edit.text(),
			self.category_combo.currentText(), self.minutes_edit.text())
		if result.ok:
			self.subject_edit.clear()
			self.minutes_edit.clear()

	def _edit_selected(self):
		session_id = self._selected_id()
		if session_id is None:
			QMessageBox.warning(self, "Study Tracker", "Please select a session to edit.")
			return
		result = self._run(lambda: self.manager.current.get(session_id))
		if not result.ok:
			return
		selected = result.value
		subject, ok = QInputDialog.getText(self, "Edit", "Edit Subject:", QLineEdit.EchoMode.Normal, selected.subject)
		if not ok:
			return
		categories = list(self.manager.config.categories)
		current = categories.index(selected.category) if selected.category in categories else 0
		category, ok = QInputDialog.getItem(self, "Edit", "Edit Category:", categories, current, True)
		if not ok:
			return
		minutes, ok = QInputDialog.getText(self, "Edit", "Edit Minutes:", QLineEdit.EchoMode.Normal, str(selected.minutes))
		if not ok:
			return
		self._run(self.manager.edit_session, session_id, subject, category, minutes)

	def _delete_selected(self):
		session_id = self._selected_id()
		if session_id is None:
			QMessageBox.warning(self, "Study Tracker", "Please select a session to delete.")
			return
		result = self._run(self.manager.request_delete, session_id)
		if not result.ok:
			return
		answer = QMessageBox.question(
			self, "Confirm Delete",
			f"Are you sure you want to delete this session?\n{self.manager.current.describe(result.value)}",
			QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
		)
		if answer == QMessageBox.StandardButton.Yes:
			self._run(self.manager.confirm_delete)
		else:
			self.manager.cancel_delete()

	def _save(self):
		self._run(self.manager.save, success="Sessions saved successfully.")

	def _load(self):
		self._run(self.manager.reload, success="Sessions loaded successfully.")

	def _filter_week(self):
		result = self._run(lambda: self.manager.current.last_n_days(7))
		if result.ok:
			self._view = result.value
			self._refresh()

	def _filter_range(self):
		def between():
			start = parse_date(self.from_edit.text())
			end = parse_date(self.to_edit.text())
			return self.manager.current.between(start, end)

		result = self._run(between)
		if result.ok:
			self._view = result.value
			self._refresh()

	def _show_summary(self):
		if self._report is None:
			QMessageBox.warning(self, "Study Tracker", "You must be logged in to see a summary.")
			return
		text = self._report.text() or "No sessions yet."
		QMessageBox.information(self, "Summary", f"Summary:\n{text}")
